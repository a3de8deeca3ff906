"""
Animation domain models

Immutable timing configuration plus the context object (both color tracks
and timing) that the animator receives at startup.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from border_shimmer.errors import TrackLengthMismatchError
from border_shimmer.models.color import Color
from border_shimmer.models.enums import TrackID

ColorTrack = Tuple[Color, ...]


@dataclass(frozen=True)
class AnimationConfig:
    """Immutable frame timing and border appearance"""
    secs: float
    fps: float
    width: float
    active_glow: bool = False
    inactive_glow: bool = False

    @property
    def steps_per_transition(self) -> int:
        """Frames between two waypoint colors (t=1.0 frame excluded)"""
        return math.floor(self.secs * self.fps)

    @property
    def frame_delay(self) -> float:
        """Seconds to sleep after each frame"""
        return 1.0 / self.fps


@dataclass(frozen=True)
class AnimationContext:
    """
    Everything the animator needs, built once at startup

    Both tracks are cyclic (the color after the last is the first) and must
    have equal, non-zero length.
    """
    active: ColorTrack
    inactive: ColorTrack
    config: AnimationConfig

    def __post_init__(self):
        if not self.active:
            raise ValueError("Active color track must not be empty")
        if len(self.active) != len(self.inactive):
            raise TrackLengthMismatchError(len(self.active), len(self.inactive))

    @property
    def track_length(self) -> int:
        return len(self.active)

    def track(self, track_id: TrackID) -> ColorTrack:
        return self.active if track_id == TrackID.ACTIVE else self.inactive
