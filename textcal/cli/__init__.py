"""CLI module for textcal.

Parses arguments, resolves settings and streams the rendered calendar to
stdout. Log output and error messages go to stderr.
"""

import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from ..display.console_renderer import ConsoleRenderer
from ..utils.exceptions import TextCalError
from ..utils.logging import apply_command_line_overrides, setup_logging
from .config import apply_cli_overrides, build_settings, settings_kwargs
from .parser import create_parser, parse_year

logger = logging.getLogger(__name__)


def main_entry(argv: Optional[List[str]] = None) -> int:
    """Main entry point with argument parsing.

    Args:
        argv: Arguments to parse, defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = build_settings(args)
        apply_command_line_overrides(settings, args)
        setup_logging(settings.logging, settings.data_dir / "logs")

        logger.info(
            f"Rendering {settings.year_start}..{settings.effective_year_end} "
            f"with {settings.layout.columns} columns"
        )
        ConsoleRenderer(settings).display()
    except (TextCalError, ValidationError) as e:
        logger.debug("Render aborted", exc_info=True)
        print(f"textcal: error: {e}", file=sys.stderr)
        return 1

    return 0


__all__ = [
    "apply_cli_overrides",
    "build_settings",
    "create_parser",
    "main_entry",
    "parse_year",
    "settings_kwargs",
]
