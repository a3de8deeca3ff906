"""
Enums for the border shimmer animation loop
"""

from enum import Enum, auto


class TrackID(Enum):
    """Color track identifiers (one per window state)"""
    ACTIVE = auto()      # Focused window border
    INACTIVE = auto()    # Every other window border


class SinkType(Enum):
    """Frame sink implementations"""
    COMMAND = auto()     # External `borders` process per frame
    VIRTUAL = auto()     # In-memory / log only (dry run, tests)


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    COLOR = auto()       # Color parsing, track derivation
    ANIMATION = auto()   # Animator state, frame computation
    SINK = auto()        # External border command invocations
    SYSTEM = auto()      # Startup, errors
    SHUTDOWN = auto()    # Signal handling, shutdown handlers
