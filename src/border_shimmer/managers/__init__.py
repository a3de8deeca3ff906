"""
Managers for configuration
"""

from .config_manager import ConfigManager, default_config_path
from .color_manager import ColorManager

__all__ = ['ConfigManager', 'ColorManager', 'default_config_path']
