"""
Structured console logger

One line per event, optional key/value detail rows drawn as a tree:

[14:23:45] SINK      ✗ Sink invocation failed
           ├─ error: borders exited with status 1
           └─ frame: 12

Modules bind a category once at import time:
    log = get_category_logger(LogCategory.SINK)
"""

from datetime import datetime
from typing import List, Optional
from border_shimmer.models.enums import LogLevel, LogCategory

RESET = '\033[0m'
DIM = '\033[2m'

CATEGORY_COLORS = {
    LogCategory.CONFIG: '\033[36m',       # cyan
    LogCategory.COLOR: '\033[95m',        # bright magenta
    LogCategory.ANIMATION: '\033[93m',    # bright yellow
    LogCategory.SINK: '\033[94m',         # bright blue
    LogCategory.SYSTEM: '\033[97m',       # bright white
    LogCategory.SHUTDOWN: '\033[35m',     # magenta
}

LEVEL_STYLES = {
    # level: (symbol, color, priority)
    LogLevel.DEBUG: ('·', DIM, 0),
    LogLevel.INFO: ('✓', '\033[32m', 1),
    LogLevel.WARN: ('⚠', '\033[33m', 2),
    LogLevel.ERROR: ('✗', '\033[31m', 3),
}

DETAIL_INDENT = " " * 11


class Logger:
    """
    Category logger writing to stdout

    Args:
        min_level: Lowest level printed
        use_colors: ANSI colors (disable for pipes and files)
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
        self.min_level = min_level
        self.use_colors = use_colors

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_colors else text

    def enabled(self, level: LogLevel) -> bool:
        return LEVEL_STYLES[level][2] >= LEVEL_STYLES[self.min_level][2]

    def _detail_lines(self, details: Optional[list], fields: dict) -> List[str]:
        rows = list(details or []) + [f"{k}: {v}" for k, v in fields.items()]
        lines = []
        for i, row in enumerate(rows):
            branch = "└─" if i == len(rows) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, DIM)} {row}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Print one event

        Args:
            category: Log category (CONFIG, SINK, etc.)
            message: Main message text
            level: Log level (DEBUG, INFO, WARN, ERROR)
            details: Preformatted detail rows, printed first
            **kwargs: key: value detail rows
        """
        if not self.enabled(level):
            return

        symbol, color, _ = LEVEL_STYLES[level]
        head = " ".join((
            datetime.now().strftime('[%H:%M:%S]'),
            self._paint(category.name.ljust(9), CATEGORY_COLORS.get(category, RESET)),
            self._paint(symbol, color),
            self._paint(message, color),
        ))

        print("\n".join([head, *self._detail_lines(details, kwargs)]))

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        """Return a contextual logger bound to a specific category."""
        return BoundLogger(self, category)


class BoundLogger:
    """Logger bound to a default category, with ability to override if needed."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        self._base.log(category or self._category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self._base, category)


# === Global instance helpers ===
_logger = Logger()

def get_logger() -> Logger:
    return _logger

def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)

def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """
    Configure the logger singleton in place.

    Bound loggers created at import time keep pointing at the same instance.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
