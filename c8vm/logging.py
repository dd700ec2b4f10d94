"""Console logging utilities for the CHIP-8 machine and its host.

Provides a small levelled logger with optional colors and timestamps, a
registry so every module shares one configuration, and a tqdm progress bar
for headless runs.
"""

import time
import sys
from typing import Dict, Iterable, Optional

from tqdm import tqdm


class ConsoleLogger:
    """Console logger with level filtering and formatters."""

    def __init__(
        self,
        name: str = "c8vm",
        log_level: str = "WARNING",
        use_colors: bool = True,
        show_timestamps: bool = True,
    ):
        self.name = name
        self.log_level = log_level.upper()
        self.use_colors = (
            use_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

        self.colors = (
            {
                "DEBUG": "\033[36m",
                "INFO": "\033[32m",
                "WARNING": "\033[33m",
                "ERROR": "\033[31m",
                "CRITICAL": "\033[35m",
                "RESET": "\033[0m"
            }
            if self.use_colors
            else {
                k: ""
                for k in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "RESET"]
            }
        )

        self.level_order = {
            "DEBUG": 0,
            "INFO": 1,
            "WARNING": 2,
            "ERROR": 3,
            "CRITICAL": 4,
        }

    def is_enabled_for(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        return self.level_order.get(level.upper(), 1) >= self.level_order.get(
            self.log_level, 1
        )

    def set_level(self, level: str):
        level = level.upper()
        if level not in self.level_order:
            raise ValueError(
                f"Unknown log level '{level}'. Available: {list(self.level_order)}"
            )
        self.log_level = level

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        name_str = f"[{self.name}]"

        if self.use_colors:
            color = self.colors.get(level.upper(), "")
            reset = self.colors["RESET"]
            level_str = f"{color}{level_str}{reset}"

        return f"{timestamp}{level_str}{name_str} {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self.is_enabled_for(level):
            formatted = self._format_message(level, message)
            # tqdm.write keeps an active progress bar intact
            tqdm.write(formatted, file=sys.stderr)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)

    def critical(self, message: str):
        self.log("CRITICAL", message)


_loggers: Dict[str, ConsoleLogger] = {}
_default_level = "WARNING"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str) -> ConsoleLogger:
    """Return the shared logger for ``name``, creating it on first use."""
    if name not in _loggers:
        _loggers[name] = ConsoleLogger(name, log_level=_default_level)
    return _loggers[name]


def set_log_level(level: str):
    """Reconfigure every logger, including ones created later."""
    global _default_level
    if level.upper() not in LEVELS:
        raise ValueError(f"Unknown log level '{level}'. Available: {list(LEVELS)}")
    for logger in _loggers.values():
        logger.set_level(level)
    _default_level = level.upper()


def progress(iterable: Iterable, total: Optional[int] = None, desc: str = "Running", **kwargs):
    """Wrap ``iterable`` in a tqdm progress bar."""
    return tqdm(iterable, total=total, desc=desc, unit="frame", **kwargs)
