"""Utility functions and helpers package."""

from .exceptions import ConfigurationError, LocaleNotAvailableError, RenderError, TextCalError
from .logging import VERBOSE, apply_command_line_overrides, get_logger, setup_logging

__all__ = [
    "VERBOSE",
    "ConfigurationError",
    "LocaleNotAvailableError",
    "RenderError",
    "TextCalError",
    "apply_command_line_overrides",
    "get_logger",
    "setup_logging",
]
