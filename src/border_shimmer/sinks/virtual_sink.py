from __future__ import annotations
from typing import List, Optional

from border_shimmer.models.frame import BorderFrame
from border_shimmer.sinks.sink_interface import IFrameSink
from border_shimmer.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SINK)


class VirtualSink(IFrameSink):
    """Records frames instead of running a command (dry run, tests)."""

    def __init__(self, echo: bool = False, history: Optional[int] = None):
        self.echo = echo
        self.history = history
        self.frames: List[BorderFrame] = []
        self.render_count = 0

    async def render(self, frame: BorderFrame) -> None:
        self.render_count += 1
        self.frames.append(frame)
        if self.history is not None and len(self.frames) > self.history:
            del self.frames[0]

        if self.echo:
            log.info(
                f"Frame {self.render_count}",
                details=frame.to_argv(),
            )

    @property
    def last_frame(self) -> Optional[BorderFrame]:
        return self.frames[-1] if self.frames else None
