"""
Borders command sink

Runs the JankyBorders `borders` executable once per frame:

    borders active_color=0xFFFF0000 inactive_color=glow(0xFF0000FF) width=5.000000
"""

from __future__ import annotations

import asyncio
from typing import List

from border_shimmer.errors import SinkInvocationError
from border_shimmer.models.frame import BorderFrame
from border_shimmer.sinks.sink_interface import IFrameSink
from border_shimmer.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SINK)

DEFAULT_COMMAND = "borders"


class BordersCommandSink(IFrameSink):
    """
    Fire-and-wait sink: one subprocess per frame, no retry, no timeout.

    A hung command stalls the animation until it exits.
    """

    def __init__(self, command: str = DEFAULT_COMMAND):
        self.command = command
        self.invocations = 0

    def build_argv(self, frame: BorderFrame) -> List[str]:
        return [self.command, *frame.to_argv()]

    async def render(self, frame: BorderFrame) -> None:
        argv = self.build_argv(frame)
        self.invocations += 1

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            # FileNotFoundError / PermissionError when the binary is unusable
            raise SinkInvocationError(
                self.command,
                f"Failed to start {self.command}: {e}",
            ) from e

        _, stderr = await process.communicate()

        if process.returncode != 0:
            message = stderr.decode(errors="replace").strip() if stderr else ""
            raise SinkInvocationError(
                self.command,
                f"{self.command} exited with status {process.returncode}"
                + (f": {message}" if message else ""),
                returncode=process.returncode,
            )

    def __repr__(self) -> str:
        return f"BordersCommandSink({self.command!r})"
