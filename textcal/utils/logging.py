"""Logging configuration and setup utilities."""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from ..config.settings import LoggingSettings, TextCalSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Add verbose() method to Logger class for detailed diagnostic logging.

    VERBOSE (15) sits between DEBUG and INFO. The renderer uses it for
    per-year progress so a long range can be followed without the per-row
    DEBUG chatter.

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Rendering year %d", 2022)
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


# Add verbose method to all Logger instances
logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name: Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL),
            case insensitive

    Returns:
        Numeric log level value

    Raises:
        AttributeError: If level name is not recognized
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, level_name)
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(self, *args: Any, enable_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities of stderr, where logs go."""
        if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb":
            return "none"

        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"

        if term and "color" in term:
            return "basic"

        # Windows Terminal
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


class TimestampedFileHandler(logging.FileHandler):
    """Handler that creates a timestamped log file per execution."""

    def __init__(
        self, log_dir: Union[str, Path], prefix: str = "textcal", max_files: int = 5
    ) -> None:
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self.max_files = max_files

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = self.log_dir / f"{prefix}_{timestamp}.log"

        self.log_dir.mkdir(parents=True, exist_ok=True)
        super().__init__(str(log_path), encoding="utf-8")

        self.cleanup_old_files()

    def cleanup_old_files(self) -> None:
        """Remove log files beyond max_files limit, keeping most recent."""
        log_files = list(self.log_dir.glob(f"{self.prefix}_*.log"))

        if len(log_files) > self.max_files:
            log_files.sort(key=lambda f: f.stat().st_mtime, reverse=True)
            for old_file in log_files[self.max_files :]:
                try:
                    old_file.unlink()
                except OSError:
                    pass  # Ignore cleanup errors


def setup_logging(
    logging_settings: "LoggingSettings", default_log_dir: Optional[Path] = None
) -> logging.Logger:
    """Configure the ``textcal`` logger from logging settings.

    Console output goes to stderr so it never interleaves with the rendered
    calendar on stdout.

    Args:
        logging_settings: Console and file logging options
        default_log_dir: Directory for log files when ``file_directory`` is unset

    Returns:
        The configured ``textcal`` logger
    """
    logger = logging.getLogger("textcal")
    logger.setLevel(logging.DEBUG)  # Handlers filter
    logger.handlers.clear()
    logger.propagate = False

    if logging_settings.console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(get_log_level(logging_settings.console_level))
        console_handler.setFormatter(
            AutoColoredFormatter(
                "%(asctime)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
                enable_colors=logging_settings.console_colors,
            )
        )
        logger.addHandler(console_handler)

    if logging_settings.file_enabled:
        if logging_settings.file_directory:
            log_dir = Path(logging_settings.file_directory)
        elif default_log_dir is not None:
            log_dir = default_log_dir
        else:
            log_dir = Path.home() / ".local" / "share" / "textcal" / "logs"

        file_handler = TimestampedFileHandler(
            log_dir=log_dir,
            prefix=logging_settings.file_prefix,
            max_files=logging_settings.max_log_files,
        )
        file_handler.setLevel(get_log_level(logging_settings.file_level))

        if logging_settings.include_function_names:
            file_format = (
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
            )
        else:
            file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))

        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {file_handler.baseFilename}")

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``textcal``.

    Example:
        >>> logger = get_logger("display.month_renderer")
        >>> logger.name
        'textcal.display.month_renderer'
    """
    return logging.getLogger(f"textcal.{name}")


def apply_command_line_overrides(settings: "TextCalSettings", args: Any) -> "TextCalSettings":
    """Apply command-line logging overrides to settings in place.

    Priority: Command-line > Environment > YAML > Defaults.

    Args:
        settings: Current settings object to modify
        args: Parsed command-line arguments from argparse

    Returns:
        The same settings object, for convenience
    """
    if getattr(args, "log_level", None):
        settings.logging.console_level = args.log_level
        settings.logging.file_level = args.log_level

    if getattr(args, "verbose", False):
        settings.logging.console_level = "VERBOSE"
        settings.logging.file_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.logging.console_level = "ERROR"

    if getattr(args, "log_dir", None):
        settings.logging.file_directory = str(args.log_dir)
        settings.logging.file_enabled = True

    if getattr(args, "no_file_logging", False):
        settings.logging.file_enabled = False

    if getattr(args, "no_log_colors", False):
        settings.logging.console_colors = False

    return settings
