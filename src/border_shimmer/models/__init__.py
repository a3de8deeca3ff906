"""
Models package - Data models for border-shimmer
"""

from .enums import TrackID, SinkType, LogLevel, LogCategory
from .color import Color, interpolate_color
from .frame import BorderFrame
from .domain import AnimationConfig, AnimationContext, ColorTrack

__all__ = [
    'TrackID',
    'SinkType',
    'LogLevel',
    'LogCategory',
    'Color',
    'interpolate_color',
    'BorderFrame',
    'AnimationConfig',
    'AnimationContext',
    'ColorTrack',
]
