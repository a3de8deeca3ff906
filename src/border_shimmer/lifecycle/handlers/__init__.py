"""
Shutdown handlers for application components.
"""

from .animation_shutdown_handler import AnimationShutdownHandler

__all__ = ['AnimationShutdownHandler']
