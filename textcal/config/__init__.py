"""Configuration package."""

from .settings import LayoutSettings, LoggingSettings, TextCalSettings, get_settings, reset_settings

__all__ = [
    "LayoutSettings",
    "LoggingSettings",
    "TextCalSettings",
    "get_settings",
    "reset_settings",
]
