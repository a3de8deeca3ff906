"""
Cyclic Animator

Walks the active and inactive color tracks in lockstep, interpolating
between each waypoint and the next one (wrapping after the last).
"""

from typing import Tuple

from border_shimmer.animations.base import BaseAnimation
from border_shimmer.models.domain import AnimationContext
from border_shimmer.models.enums import TrackID
from border_shimmer.models.frame import BorderFrame
from border_shimmer.utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class CyclicAnimator(BaseAnimation):
    """
    Cyclic two-track border animation.

    State is (track_index, sub_step):
    - track_index: 0..len-1, wraps to 0 after the last waypoint
    - sub_step: 0..steps_per_transition INCLUSIVE

    The inclusive bound means the t=1.0 frame of transition i equals the
    t=0.0 frame of transition i+1, so every waypoint is shown twice in a
    row. Frame timing of existing configurations depends on it.

    Example (2 colors, steps_per_transition=2):
        t: 0.0, 0.5, 1.0, 0.0, 0.5, 1.0, ...
    """

    def __init__(self, context: AnimationContext):
        super().__init__()
        self.context = context
        self.track_index = 0
        self.sub_step = 0

        log.debug(
            "CyclicAnimator initialized",
            colors=context.track_length,
            steps_per_transition=context.config.steps_per_transition,
        )

    @property
    def steps_per_transition(self) -> int:
        return self.context.config.steps_per_transition

    @property
    def position(self) -> Tuple[int, int]:
        return (self.track_index, self.sub_step)

    def reset(self) -> None:
        self.track_index = 0
        self.sub_step = 0

    def progress(self) -> float:
        """t for the current sub-step"""
        return self.sub_step / self.steps_per_transition

    def _interpolate(self, track_id: TrackID, t: float):
        track = self.context.track(track_id)
        current = track[self.track_index]
        upcoming = track[(self.track_index + 1) % len(track)]
        return current.interpolate(upcoming, t)

    def _advance(self) -> None:
        if self.sub_step < self.steps_per_transition:
            self.sub_step += 1
            return

        self.sub_step = 0
        self.track_index = (self.track_index + 1) % self.context.track_length

    def step(self) -> BorderFrame:
        """Compute the frame for the current position, then advance"""
        config = self.context.config
        t = self.progress()

        frame = BorderFrame(
            active_color=self._interpolate(TrackID.ACTIVE, t),
            inactive_color=self._interpolate(TrackID.INACTIVE, t),
            width=config.width,
            active_glow=config.active_glow,
            inactive_glow=config.inactive_glow,
            track_index=self.track_index,
            sub_step=self.sub_step,
            t=t,
        )

        self._advance()
        return frame
