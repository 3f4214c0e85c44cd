"""
Console logger

One line per event, with key/value details hanging below it:

    [14:23:45] TRANSPORT ✓ Device connected
               ├─ path: /dev/hidraw3
               └─ interface: 1

Modules bind a category once at import time:

    log = get_logger().for_category(LogCategory.HARDWARE)
    log.warn("HID enumeration failed", error=str(ex))
"""

import sys
from datetime import datetime
from typing import List, Optional, TextIO

from quadlight.models.enums import LogLevel, LogCategory


class Colors:
    """ANSI escape codes"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.HARDWARE: Colors.BRIGHT_BLUE,
    LogCategory.STATE: Colors.BRIGHT_CYAN,
    LogCategory.COLOR: Colors.BRIGHT_MAGENTA,
    LogCategory.ANIMATION: Colors.BRIGHT_YELLOW,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
    LogCategory.TRANSPORT: Colors.BRIGHT_GREEN,
    LogCategory.API: Colors.MAGENTA,
}

# level -> (priority, symbol, color)
LEVEL_STYLES = {
    LogLevel.DEBUG: (0, '·', Colors.DIM),
    LogLevel.INFO: (1, '✓', Colors.GREEN),
    LogLevel.WARN: (2, '⚠', Colors.YELLOW),
    LogLevel.ERROR: (3, '✗', Colors.RED),
}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


class Logger:
    """
    Level-filtered console logger shared by the whole process.

    Output goes to `stream`, or to whatever sys.stdout is at call time when
    no stream is given (so redirected stdout is honoured).
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def is_enabled(self, level: LogLevel) -> bool:
        return LEVEL_STYLES[level][0] >= LEVEL_STYLES[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def format(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[List[str]] = None,
        **fields
    ) -> List[str]:
        """Render one event as output lines, without filtering."""
        _, symbol, level_color = LEVEL_STYLES[level]
        head = " ".join((
            datetime.now().strftime('[%H:%M:%S]'),
            self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, Colors.WHITE)),
            self._paint(symbol, level_color),
            self._paint(message, level_color),
        ))

        extra = list(details or []) + [f"{key}: {value}" for key, value in fields.items()]
        lines = [head]
        for i, text in enumerate(extra):
            branch = "└─" if i == len(extra) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, Colors.DIM)} {text}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[List[str]] = None,
        **fields
    ) -> None:
        if not self.is_enabled(level):
            return
        out = self.stream or sys.stdout
        for line in self.format(category, message, level, details, **fields):
            print(line, file=out)

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger with a fixed default category."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self.category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, **kw):
        self._base.log(self.category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self._base, category)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """
    Reconfigure the shared logger in place.

    Bound loggers created at import time keep pointing at the same instance,
    so they pick up the new level immediately.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
