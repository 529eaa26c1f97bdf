"""Console output for rendered calendars."""

import sys
from typing import Any, Iterable, Optional, TextIO

from ..utils.logging import get_logger
from .calendar_renderer import CalendarRenderer
from .names import LocaleNames


class ConsoleRenderer:
    """Renders the configured calendar span to a terminal or any text stream."""

    def __init__(self, settings: Any, stream: Optional[TextIO] = None) -> None:
        """Initialize console renderer.

        Args:
            settings: Application settings (``TextCalSettings`` or compatible)
            stream: Output stream, defaults to ``sys.stdout`` at write time

        Raises:
            LocaleNotAvailableError: If ``settings.locale`` cannot be loaded
        """
        self.logger = get_logger("display.console_renderer")
        self.settings = settings
        self.stream = stream
        self.trim_trailing_whitespace = getattr(settings, "trim_trailing_whitespace", True)
        self.calendar = CalendarRenderer(settings.layout, LocaleNames(settings.locale))

        self.logger.debug("Console renderer initialized")

    def _format_lines(self, lines: Iterable[str]) -> Iterable[str]:
        if not self.trim_trailing_whitespace:
            return lines
        return (line.rstrip() for line in lines)

    def render_calendar(self) -> str:
        """Render the configured year span to a single string.

        Returns:
            Calendar text, lines joined with ``\\n``
        """
        lines = self.calendar.render(self.settings.year_start, self.settings.effective_year_end)
        return "\n".join(self._format_lines(lines))

    def display(self) -> int:
        """Stream the configured calendar to the output, one line at a time.

        Returns:
            Number of lines written
        """
        stream = self.stream if self.stream is not None else sys.stdout
        lines = self.calendar.render(self.settings.year_start, self.settings.effective_year_end)

        count = 0
        for line in self._format_lines(lines):
            stream.write(line + "\n")
            count += 1
        stream.flush()

        self.logger.info(f"Wrote {count} lines")
        return count
