"""
Lifecycle subsystem
-------------------

Exports the public API for graceful shutdown:
    from border_shimmer.lifecycle import ShutdownCoordinator
    from border_shimmer.lifecycle.handlers import AnimationShutdownHandler
"""

from .shutdown_coordinator import ShutdownCoordinator
from .shutdown_protocol import IShutdownHandler
from . import handlers

__all__ = [
    "ShutdownCoordinator",
    "IShutdownHandler",
    "handlers",
]
