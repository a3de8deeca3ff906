"""
Color model - RGBA color value

Four 8-bit channels, parsed once from config hex strings and consumed by
interpolation and encoding. Uses utils.colors for the conversion functions.
"""

from dataclasses import dataclass

from border_shimmer.utils.colors import (
    parse_rgba_hex,
    format_argb_hex,
    format_rgba_hex,
    lerp_channel,
)


@dataclass(frozen=True)
class Color:
    """
    Immutable RGBA color (0-255 per channel)

    Examples:
        # Parse from config notation
        red = Color.from_hex("#FF0000FF")

        # Blend toward another color
        purple = red.interpolate(Color.from_hex("#0000FFFF"), 0.5)

        # Encode for the borders command
        purple.to_hex()  # "0xFF7F007F"
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self):
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range (0-255): {value}")

    # === CONSTRUCTORS ===

    @classmethod
    def from_hex(cls, text: str) -> 'Color':
        """
        Create from "#RRGGBBAA" hex string

        Args:
            text: 8 hex digits, optional leading '#', case-insensitive

        Returns:
            Color object

        Raises:
            InvalidColorFormatError: length != 8 after stripping '#'
            InvalidColorValueError: not hexadecimal
        """
        return cls(*parse_rgba_hex(text))

    # === INTERPOLATION ===

    def interpolate(self, other: 'Color', t: float) -> 'Color':
        """
        Linear blend toward another color

        Each channel is truncated toward zero, never rounded.
        t is not range-checked; callers keep it in [0, 1].

        Args:
            other: Target color (returned exactly at t=1.0)
            t: Progress (0.0 = self, 1.0 = other)

        Returns:
            New Color

        Raises:
            ValueError: t far enough outside [0, 1] to push a channel
                past 0-255 (small overshoots truncate back into range)
        """
        return Color(
            lerp_channel(self.red, other.red, t),
            lerp_channel(self.green, other.green, t),
            lerp_channel(self.blue, other.blue, t),
            lerp_channel(self.alpha, other.alpha, t),
        )

    # === ENCODING ===

    def to_hex(self) -> str:
        """Encode as "0xAARRGGBB" (borders command notation)"""
        return format_argb_hex(self.red, self.green, self.blue, self.alpha)

    def to_rgba_hex(self) -> str:
        """Encode as "#RRGGBBAA" (config file notation)"""
        return format_rgba_hex(self.red, self.green, self.blue, self.alpha)

    def __str__(self) -> str:
        return f"Color({self.to_rgba_hex()})"


def interpolate_color(c1: Color, c2: Color, t: float) -> Color:
    """Functional form of Color.interpolate()"""
    return c1.interpolate(c2, t)
