"""Entry point for `python -m textcal` command."""

import os
import sys

from textcal.cli import main_entry


def main() -> None:
    """Entry point for python -m textcal and the ``textcal`` console script."""
    try:
        exit_code = main_entry()
    except KeyboardInterrupt:
        print("Operation cancelled by user", file=sys.stderr)
        sys.exit(130)
    except BrokenPipeError:
        # Reader went away (e.g. piped into `head`); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
