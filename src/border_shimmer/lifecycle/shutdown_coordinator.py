"""
Shutdown coordinator that orchestrates graceful shutdown.

Turns SIGINT / SIGTERM into a shutdown event, then runs the registered
handlers in priority order with per-handler timeouts.
"""

import asyncio
import signal
from typing import Dict, List, Optional

from border_shimmer.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ShutdownCoordinator:
    """
    Coordinates graceful shutdown of multiple components.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(AnimationShutdownHandler(driver))

        coordinator.setup_signal_handlers(loop)
        await coordinator.wait_for_shutdown()
        await coordinator.shutdown_all()
    """

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        """
        Initialize shutdown coordinator.

        Args:
            timeout_per_handler: Timeout for each individual handler (seconds)
            total_timeout: Total timeout for entire shutdown sequence (seconds)
        """
        self._handlers: List = []
        self._shutdown_event: Optional[asyncio.Event] = None
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._shutdown_trigger: Dict[str, Optional[str]] = {"reason": None}

    def register(self, handler) -> None:
        """
        Register a shutdown handler.

        Handler must have:
        - shutdown_priority property (int)
        - async shutdown() method
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    @property
    def reason(self) -> Optional[str]:
        return self._shutdown_trigger["reason"]

    def _ensure_event(self) -> asyncio.Event:
        if self._shutdown_event is None:
            self._shutdown_event = asyncio.Event()
        return self._shutdown_event

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """
        Install OS signal handlers for graceful shutdown.

        Args:
            loop: Running asyncio event loop
        """
        shutdown_event = self._ensure_event()

        def signal_handler(sig: signal.Signals) -> None:
            self._shutdown_trigger["reason"] = sig.name
            log.info(f"Signal {sig.name} received → triggering shutdown")
            shutdown_event.set()

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))

        log.debug("Signal handlers installed (SIGINT, SIGTERM)")

    def request_shutdown(self, reason: str) -> None:
        """Trigger shutdown from inside the application."""
        if self._shutdown_trigger["reason"] is None:
            self._shutdown_trigger["reason"] = reason
        self._ensure_event().set()

    def is_shutting_down(self) -> bool:
        return self._shutdown_event is not None and self._shutdown_event.is_set()

    async def wait_for_shutdown(self) -> None:
        """Block until a signal arrives or request_shutdown() is called."""
        await self._ensure_event().wait()
        log.debug("Shutdown triggered", reason=self.reason)

    async def shutdown_all(self) -> None:
        """
        Execute graceful shutdown of all handlers in priority order.

        Handlers are called in descending priority order (highest first).
        A failing or slow handler is logged and skipped.
        """
        log.info("Initiating graceful shutdown sequence...", reason=self.reason or "UNKNOWN")

        sorted_handlers = sorted(
            self._handlers, key=lambda h: h.shutdown_priority, reverse=True
        )

        loop = asyncio.get_running_loop()
        start_time = loop.time()

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__

            elapsed = loop.time() - start_time
            if elapsed > self._total_timeout:
                log.error(
                    f"Total shutdown timeout exceeded ({elapsed:.1f}s > {self._total_timeout}s)"
                )
                break

            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug(f"{handler_name} shutdown complete")

            except asyncio.TimeoutError:
                log.error(f"{handler_name} shutdown timeout ({self._timeout_per_handler}s)")

            except Exception as e:
                log.error(f"Error shutting down {handler_name}", error=str(e))

        log.info("Shutdown sequence complete")
