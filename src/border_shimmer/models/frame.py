"""
Frame model

One fully interpolated color pair, dispatched to a sink once per tick.
"""

from dataclasses import dataclass
from typing import Dict, List

from border_shimmer.models.color import Color


def wrap_glow(color_hex: str, glow: bool) -> str:
    """Wrap an encoded color as glow(...) when the glow flag is set"""
    return f"glow({color_hex})" if glow else color_hex


@dataclass(frozen=True)
class BorderFrame:
    """
    Frame for the border command

    Carries the animator position that produced it (track_index, sub_step, t)
    for logging and tests; sinks only need the colors, width and glow flags.
    """
    active_color: Color
    inactive_color: Color
    width: float
    active_glow: bool = False
    inactive_glow: bool = False

    track_index: int = 0
    sub_step: int = 0
    t: float = 0.0

    def to_arguments(self) -> Dict[str, str]:
        """Named sink arguments (width uses six fractional digits)"""
        return {
            "active_color": wrap_glow(self.active_color.to_hex(), self.active_glow),
            "inactive_color": wrap_glow(self.inactive_color.to_hex(), self.inactive_glow),
            "width": f"{self.width:f}",
        }

    def to_argv(self) -> List[str]:
        """key=value command-line arguments; consumers must not rely on order"""
        return [f"{key}={value}" for key, value in self.to_arguments().items()]
