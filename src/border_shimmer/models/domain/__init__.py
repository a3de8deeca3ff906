"""
Domain models - immutable runtime context
"""

from .animation import AnimationConfig, AnimationContext, ColorTrack

__all__ = ['AnimationConfig', 'AnimationContext', 'ColorTrack']
