from __future__ import annotations

import asyncio
from typing import Optional

from border_shimmer.engine.frame_driver import FrameDriver
from border_shimmer.lifecycle.shutdown_protocol import IShutdownHandler
from border_shimmer.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class AnimationShutdownHandler(IShutdownHandler):
    """
    Stops the frame loop between frames and waits for its task to finish.

    The in-flight sink call (if any) is allowed to complete.
    """

    def __init__(self, driver: FrameDriver, task: Optional[asyncio.Task] = None):
        self.driver = driver
        self.task = task

    @property
    def shutdown_priority(self) -> int:
        return 100

    async def shutdown(self) -> None:
        log.info("Stopping animation...")
        self.driver.stop()

        if self.task is None or self.task.done():
            return

        try:
            await self.task
        except asyncio.CancelledError:
            pass
