"""Logging configuration and setup utilities."""

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Optional, TextIO

if TYPE_CHECKING:
    from ..config.settings import DatePickerSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

LOGGER_NAME = "datepicker"


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Add verbose() method to Logger class for detailed diagnostic logging.

    Args:
        self (logging.Logger): Logger instance (automatically provided)
        message (Any): Log message or format string
        *args (Any): Arguments for string formatting
        **kwargs (Any): Additional keyword arguments for logging

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Replaying %d key gestures", len(keys))
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


# Add verbose method to all Logger instances
logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name (str): Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        int: Numeric log level value for use with logging methods

    Raises:
        AttributeError: If level name is not recognized or invalid

    Example:
        >>> get_log_level("verbose")
        15
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, level_name)
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    # Color schemes for different terminal types
    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(
        self,
        *args: Any,
        enable_colors: bool = True,
        stream: Optional[TextIO] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.stream = stream if stream is not None else sys.stderr
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities of the output stream."""
        if not hasattr(self.stream, "isatty") or not self.stream.isatty():
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb":
            return "none"
        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"
        if term and "color" in term:
            return "basic"
        if os.name == "nt" and "WT_SESSION" in os.environ:
            return "truecolor"

        return "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color_start = self.COLORS[level_name][self.color_mode]
            color_end = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{color_start}{level_name}{color_end}", 1)

        return formatted


def setup_logging(
    settings: Optional["DatePickerSettings"] = None, log_level: Optional[str] = None
) -> logging.Logger:
    """Configure the ``datepicker`` logger with a single console handler.

    The engine never calls this on import; embedding hosts keep full control of
    logging and only the command line front end sets it up.

    Args:
        settings: Settings providing ``log_level`` and ``console_colors``
        log_level: Level name overriding the settings value

    Returns:
        Configured logger instance
    """
    level_name = log_level or (settings.log_level if settings else "WARNING")
    console_colors = settings.console_colors if settings else True
    numeric_level = get_log_level(level_name)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(
        AutoColoredFormatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
            enable_colors=console_colors,
            stream=sys.stderr,
        )
    )
    logger.addHandler(console_handler)

    logger.debug(f"Logging initialized at {level_name.upper()} level")
    return logger
