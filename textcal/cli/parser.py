"""Command-line argument parsing for textcal."""

import argparse
from datetime import MAXYEAR, MINYEAR
from pathlib import Path

from .. import __version__

LOG_LEVELS = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_year(value: str) -> int:
    """Parse a year argument.

    Args:
        value: Year string from command line

    Returns:
        The year as an integer

    Raises:
        argparse.ArgumentTypeError: If the value is not a supported year
    """
    try:
        year = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid year '{value}'") from None
    if not MINYEAR <= year <= MAXYEAR + 1:
        raise argparse.ArgumentTypeError(
            f"Year {year} out of range ({MINYEAR}-{MAXYEAR + 1})"
        )
    return year


def positive_int(value: str) -> int:
    """Parse an integer argument that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"Value must be at least 1, got {number}")
    return number


def non_negative_int(value: str) -> int:
    """Parse an integer argument that must be at least 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"Value must not be negative, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser.

    Layout options left unset fall back to environment variables, the YAML
    configuration file and then the built-in defaults.

    Returns:
        argparse.ArgumentParser: Configured parser

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["2022", "2024", "--columns", "4"])
        >>> args.columns
        4
    """
    parser = argparse.ArgumentParser(
        prog="textcal",
        description="textcal - print a multi-year calendar as plain text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                         # Current year, three months per row
  %(prog)s 2022                    # The year 2022
  %(prog)s 2022 2025 --columns 4   # 2022 through 2024, four months per row
  %(prog)s --locale de_DE.UTF-8    # German month and weekday names
        """,
    )

    parser.add_argument(
        "year_start",
        nargs="?",
        type=parse_year,
        default=None,
        help="First year to print (default: current year)",
    )
    parser.add_argument(
        "year_end",
        nargs="?",
        type=parse_year,
        default=None,
        help="Year to stop before, exclusive (default: one year after YEAR_START)",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--config", type=Path, dest="config_path", help="Path to a YAML configuration file"
    )

    parser.add_argument(
        "--locale", default=None, help="POSIX locale for month and weekday names"
    )

    # Layout arguments
    layout_group = parser.add_argument_group("layout", "Calendar grid options")

    layout_group.add_argument(
        "--columns", "-c", type=positive_int, help="Months per row (default: 3)"
    )
    layout_group.add_argument(
        "--cell-width",
        type=positive_int,
        help="Characters per day cell including separator, at least 2 (default: 3)",
    )
    layout_group.add_argument(
        "--row-gap", type=non_negative_int, help="Blank lines between rows (default: 1)"
    )
    layout_group.add_argument(
        "--column-gap", type=non_negative_int, help="Spaces between months (default: 1)"
    )
    layout_group.add_argument(
        "--keep-trailing-whitespace",
        action="store_true",
        help="Do not strip trailing spaces from output lines",
    )

    # Logging arguments
    logging_group = parser.add_argument_group("logging", "Logging configuration options")

    logging_group.add_argument(
        "--log-level", choices=LOG_LEVELS, help="Set both console and file log levels"
    )
    logging_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    logging_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only show errors on console (sets console level to ERROR)",
    )
    logging_group.add_argument("--log-dir", type=Path, help="Write log files to this directory")
    logging_group.add_argument(
        "--no-file-logging", action="store_true", help="Disable file logging completely"
    )
    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored console logging"
    )

    return parser
