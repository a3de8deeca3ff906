"""
main.py — Application entry point for border-shimmer
----------------------------------------------------

Responsible for:
- resolving configuration (defaults, config file, flags)
- parsing colors and building the animation context (fatal on error)
- wiring animator, frame driver and sink
- graceful shutdown on Ctrl+C / SIGTERM
"""

import asyncio
import sys
from typing import List, Optional

from border_shimmer.animations.cyclic import CyclicAnimator
from border_shimmer.cli import parse_args
from border_shimmer.engine.frame_driver import FrameDriver
from border_shimmer.errors import ShimmerError
from border_shimmer.lifecycle import ShutdownCoordinator
from border_shimmer.lifecycle.handlers import AnimationShutdownHandler
from border_shimmer.managers import ColorManager, ConfigManager
from border_shimmer.models.domain import AnimationContext
from border_shimmer.models.enums import LogCategory, LogLevel
from border_shimmer.sinks import IFrameSink, create_sink
from border_shimmer.utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


async def run_animation(
    context: AnimationContext,
    sink: IFrameSink,
    max_frames: Optional[int] = None,
) -> FrameDriver:
    """
    Run the frame loop until a signal arrives or max_frames is reached.

    Returns:
        The finished FrameDriver (counters are useful to callers and tests)
    """
    animator = CyclicAnimator(context)
    driver = FrameDriver(
        animation=animator,
        sink=sink,
        frame_delay=context.config.frame_delay,
        max_frames=max_frames,
    )

    coordinator = ShutdownCoordinator()
    coordinator.setup_signal_handlers(asyncio.get_running_loop())

    task = asyncio.create_task(driver.run(), name="frame-driver")
    task.add_done_callback(lambda _: coordinator.request_shutdown("Frame loop finished"))
    coordinator.register(AnimationShutdownHandler(driver, task))

    log.info(
        "Animation started",
        colors=context.track_length,
        secs=context.config.secs,
        fps=context.config.fps,
        steps_per_transition=context.config.steps_per_transition,
    )

    await coordinator.wait_for_shutdown()
    await coordinator.shutdown_all()
    return driver


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point. Returns the process exit status."""
    args = parse_args(argv)
    configure_logger(LogLevel[args.log_level], use_colors=not args.no_color)

    try:
        manager = ConfigManager(config_path=args.config)
        manager.load()
        config = manager.apply_cli(args)
        context = ColorManager(config).build_context()
    except ShimmerError as e:
        log.error("Startup failed", code=e.code, error=e.message)
        return 1

    sink = create_sink(sink_type=config.sink_type, command=config.sink_command)

    try:
        asyncio.run(run_animation(context, sink, max_frames=config.max_frames or None))
    except KeyboardInterrupt:
        # Ctrl+C before signal handlers were installed
        log.info("Interrupted")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
