"""
Color conversion utilities

Pure functions for hex parsing, hex formatting, channel interpolation and
track rotation. The Color model (models/color.py) wraps these.
"""

import string
from typing import List, Sequence, Tuple, TypeVar

from border_shimmer.errors import InvalidColorFormatError, InvalidColorValueError

T = TypeVar("T")

HEX_DIGITS = frozenset(string.hexdigits)


def parse_rgba_hex(text: str) -> Tuple[int, int, int, int]:
    """
    Parse "#RRGGBBAA" (or "RRGGBBAA") into channel values

    Args:
        text: 8 hex digits, optional leading '#', any case

    Returns:
        (r, g, b, a) tuple with values 0-255

    Raises:
        InvalidColorFormatError: wrong length after stripping '#'
        InvalidColorValueError: not hexadecimal

    Example:
        parse_rgba_hex("#FF8000FF")  # (255, 128, 0, 255)
    """
    digits = text[1:] if text.startswith("#") else text

    if len(digits) != 8:
        raise InvalidColorFormatError(digits)

    # int(..., 16) would also accept '0x', '_', signs and whitespace
    if not all(ch in HEX_DIGITS for ch in digits):
        raise InvalidColorValueError(digits)

    value = int(digits, 16)
    return (
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def format_argb_hex(r: int, g: int, b: int, a: int) -> str:
    """Format channels as "0xAARRGGBB" (alpha first, uppercase)"""
    return f"0x{a:02X}{r:02X}{g:02X}{b:02X}"


def format_rgba_hex(r: int, g: int, b: int, a: int) -> str:
    """Format channels as "#RRGGBBAA" (config file notation)"""
    return f"#{r:02X}{g:02X}{b:02X}{a:02X}"


def lerp_channel(start: int, end: int, t: float) -> int:
    """
    Linear interpolation of a single 8-bit channel

    Truncates toward zero (int()), never rounds. Existing configurations
    depend on the exact low bits this produces.
    Equal endpoints come back exactly; the float blend of two equal values
    can fall just below them.

    Example:
        lerp_channel(255, 0, 0.5)  # 127, not 128
    """
    if start == end:
        return start
    return int(start * (1 - t) + end * t)


def rotate_half(items: Sequence[T]) -> List[T]:
    """
    Rotate a sequence left by len // 2 (second half followed by first half)

    Example:
        rotate_half([0, 1, 2, 3])     # [2, 3, 0, 1]
        rotate_half([0, 1, 2, 3, 4])  # [2, 3, 4, 0, 1]
    """
    offset = len(items) // 2
    return list(items[offset:]) + list(items[:offset])
