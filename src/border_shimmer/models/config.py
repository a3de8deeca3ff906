"""
Resolved configuration model

Output of ConfigManager after defaults, config file and CLI flags are merged.
Colors are still hex strings here; ColorManager parses them.
"""

from dataclasses import dataclass, field, replace
from typing import List

from border_shimmer.models.enums import SinkType


@dataclass(frozen=True)
class ShimmerConfig:
    """Immutable resolved configuration"""
    active_colors: List[str]
    inactive_colors: List[str] = field(default_factory=list)
    secs: float = 3.0
    fps: float = 3.0
    width: float = 5.0
    active_glow: bool = False
    inactive_glow: bool = False

    sink_command: str = "borders"
    sink_type: SinkType = SinkType.COMMAND
    max_frames: int = 0  # 0 = forever

    def with_overrides(self, **changes) -> 'ShimmerConfig':
        return replace(self, **changes)
