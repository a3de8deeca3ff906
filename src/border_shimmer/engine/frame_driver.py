"""
FrameDriver — frame clock for the border animation.

Architecture:
  - Pulls one frame at a time from the animator
  - Hands it to the sink and waits for the sink to finish
  - Sleeps frame_delay (wall clock, sink latency is NOT compensated)
  - Logs sink failures and carries on; nothing in the loop is fatal

Stopping is cooperative: stop() is honoured between frames.
"""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, Optional

from border_shimmer.animations.base import BaseAnimation
from border_shimmer.errors import SinkInvocationError
from border_shimmer.sinks.sink_interface import IFrameSink
from border_shimmer.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)

SleepFn = Callable[[float], Awaitable[None]]


class FrameDriver:
    """
    Drives an animation into a sink at a fixed frame delay.

    Runtime state:
    - frames_rendered: frames handed to the sink (success or failure)
    - sink_failures: frames whose sink call raised
    """

    def __init__(
        self,
        animation: BaseAnimation,
        sink: IFrameSink,
        frame_delay: float,
        max_frames: Optional[int] = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        """
        Initialize FrameDriver.

        Args:
            animation: Frame source (CyclicAnimator)
            sink: Render target
            frame_delay: Seconds to sleep after each frame (1 / fps)
            max_frames: Stop after this many frames (None = run forever)
            sleep: Awaitable sleep, replaceable in tests
        """
        self.animation = animation
        self.sink = sink
        self.frame_delay = frame_delay
        self.max_frames = max_frames
        self._sleep = sleep

        self.running = False
        self.frames_rendered = 0
        self.sink_failures = 0
        self.started_at: Optional[float] = None

        log.info(
            "FrameDriver initialized",
            frame_delay=f"{frame_delay:.3f}s",
            sink=repr(sink),
        )

    def is_running(self) -> bool:
        return self.running

    def stop(self) -> None:
        """Request a stop; the loop exits before the next frame."""
        if self.running:
            log.debug("FrameDriver stop requested")
        self.running = False
        self.animation.stop()

    async def _dispatch(self, frame) -> None:
        try:
            await self.sink.render(frame)
        except SinkInvocationError as e:
            self.sink_failures += 1
            log.error(
                "Sink invocation failed",
                error=e.message,
                frame=self.frames_rendered,
            )
        except Exception as e:
            self.sink_failures += 1
            log.error(
                "Unexpected sink error",
                error=str(e),
                error_type=type(e).__name__,
                frame=self.frames_rendered,
            )

    async def run(self) -> None:
        """
        Main frame loop.

        Runs until stop() or max_frames; with neither, forever.
        """
        self.running = True
        self.started_at = time.monotonic()
        log.info("Frame loop started")

        try:
            async for frame in self.animation.run():
                if not self.running:
                    break

                log.debug(
                    "Frame",
                    index=frame.track_index,
                    step=frame.sub_step,
                    t=f"{frame.t:.3f}",
                    active=frame.active_color.to_hex(),
                    inactive=frame.inactive_color.to_hex(),
                )

                await self._dispatch(frame)
                self.frames_rendered += 1

                if self.max_frames is not None and self.frames_rendered >= self.max_frames:
                    log.info("Frame limit reached", frames=self.frames_rendered)
                    break

                await self._sleep(self.frame_delay)

                if not self.running:
                    break
        finally:
            self.running = False
            self.animation.stop()
            elapsed = time.monotonic() - self.started_at
            log.info(
                "Frame loop stopped",
                frames=self.frames_rendered,
                sink_failures=self.sink_failures,
                elapsed=f"{elapsed:.1f}s",
            )
