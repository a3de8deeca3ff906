"""
Color Manager - Builds color tracks from configured hex strings

Processes color data from ConfigManager (does NOT load files).
Single responsibility: turn a ShimmerConfig into an AnimationContext.
"""

from typing import List, Sequence

from border_shimmer.errors import ColorFormatError, ConfigParseError, TrackLengthMismatchError
from border_shimmer.models.color import Color
from border_shimmer.models.config import ShimmerConfig
from border_shimmer.models.domain import AnimationConfig, AnimationContext, ColorTrack
from border_shimmer.models.enums import TrackID
from border_shimmer.utils.colors import rotate_half
from border_shimmer.utils.logger import get_category_logger, LogCategory

log = get_category_logger(LogCategory.COLOR)


class ColorManager:
    """
    Color track builder (data processor only)

    Responsibilities:
    - Parse every configured color eagerly (fail before the loop starts)
    - Derive the inactive track when none is configured
    - Validate track lengths and frame timing

    Example:
        context = ColorManager(config).build_context()
    """

    def __init__(self, config: ShimmerConfig):
        self.config = config

    @staticmethod
    def parse_track(colors: Sequence[str], track_id: TrackID) -> ColorTrack:
        """
        Parse a list of hex strings into a color track

        Raises:
            ColorFormatError: first malformed color (track name is logged)
        """
        parsed: List[Color] = []
        for position, text in enumerate(colors):
            try:
                parsed.append(Color.from_hex(text))
            except ColorFormatError as e:
                log.error(
                    f"Error parsing {track_id.name.lower()} colors",
                    position=position,
                    error=e.message,
                )
                raise
        return tuple(parsed)

    def active_track(self) -> ColorTrack:
        if not self.config.active_colors:
            raise ConfigParseError("At least one active color is required")
        return self.parse_track(self.config.active_colors, TrackID.ACTIVE)

    def inactive_track(self, active: ColorTrack) -> ColorTrack:
        """Configured inactive colors, or the active track rotated by half"""
        if self.config.inactive_colors:
            return self.parse_track(self.config.inactive_colors, TrackID.INACTIVE)

        derived = tuple(rotate_half(active))
        log.debug("Derived inactive colors from active track", offset=len(active) // 2)
        return derived

    def animation_config(self) -> AnimationConfig:
        cfg = self.config
        if cfg.secs <= 0 or cfg.fps <= 0:
            raise ConfigParseError(f"secs and fps must be positive (secs={cfg.secs}, fps={cfg.fps})")

        animation_config = AnimationConfig(
            secs=cfg.secs,
            fps=cfg.fps,
            width=cfg.width,
            active_glow=cfg.active_glow,
            inactive_glow=cfg.inactive_glow,
        )

        # secs * fps < 1 would mean zero steps and t = 0 / 0
        if animation_config.steps_per_transition < 1:
            raise ConfigParseError(
                f"secs * fps must be at least 1 (secs={cfg.secs}, fps={cfg.fps})"
            )
        return animation_config

    def build_context(self) -> AnimationContext:
        """
        Build the immutable animation context

        Raises:
            ConfigParseError: no active colors or unusable timing
            ColorFormatError: malformed color string
            TrackLengthMismatchError: inactive/active counts differ
        """
        active = self.active_track()
        inactive = self.inactive_track(active)

        if len(inactive) != len(active):
            raise TrackLengthMismatchError(len(active), len(inactive))

        context = AnimationContext(
            active=active,
            inactive=inactive,
            config=self.animation_config(),
        )

        log.info(
            "Color tracks ready",
            colors=context.track_length,
            active=" ".join(c.to_rgba_hex() for c in active),
            inactive=" ".join(c.to_rgba_hex() for c in inactive),
        )
        return context
