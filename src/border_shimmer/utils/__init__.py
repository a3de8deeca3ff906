"""
Utility functions for border-shimmer
"""

from .colors import (
    parse_rgba_hex,
    format_argb_hex,
    format_rgba_hex,
    lerp_channel,
    rotate_half,
)

__all__ = [
    'parse_rgba_hex',
    'format_argb_hex',
    'format_rgba_hex',
    'lerp_channel',
    'rotate_half',
]
