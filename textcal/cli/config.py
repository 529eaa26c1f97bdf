"""Build settings from command-line arguments."""

import logging
from typing import Any, Dict

from ..config.settings import LayoutSettings, TextCalSettings

LAYOUT_ARGS = ["columns", "cell_width", "row_gap", "column_gap"]


def settings_kwargs(args: Any) -> Dict[str, Any]:
    """Collect explicit settings arguments so they take precedence over env and YAML.

    A start year given without an end year also pins ``year_end`` to its
    default, so a configured end year cannot produce an empty span.
    """
    kwargs: Dict[str, Any] = {}
    if getattr(args, "year_start", None) is not None:
        kwargs["year_start"] = args.year_start
        kwargs["year_end"] = getattr(args, "year_end", None)
    if getattr(args, "locale", None):
        kwargs["locale"] = args.locale
    if getattr(args, "config_path", None):
        kwargs["config_path"] = args.config_path
    return kwargs


def apply_cli_overrides(settings: TextCalSettings, args: Any) -> TextCalSettings:
    """Apply layout and output overrides to settings.

    Args:
        settings: Current settings object
        args: Parsed command line arguments

    Returns:
        Updated settings object

    Raises:
        pydantic.ValidationError: If an override produces an invalid layout
    """
    logger = logging.getLogger("textcal.cli.config")

    updates = {
        name: getattr(args, name)
        for name in LAYOUT_ARGS
        if getattr(args, name, None) is not None
    }
    if updates:
        settings.layout = LayoutSettings(**{**settings.layout.model_dump(), **updates})
        logger.debug(f"Applied layout overrides: {updates}")

    if getattr(args, "keep_trailing_whitespace", False):
        settings.trim_trailing_whitespace = False

    return settings


def build_settings(args: Any) -> TextCalSettings:
    """Create settings for a command-line run.

    Raises:
        ConfigurationError: If the year span or config file is invalid
        pydantic.ValidationError: If a value fails validation
    """
    settings = TextCalSettings(**settings_kwargs(args))
    return apply_cli_overrides(settings, args)
