"""Display package: month blocks, rows and calendar output."""

from .calendar_renderer import CalendarRenderer, render, render_text
from .console_renderer import ConsoleRenderer
from .month_renderer import BLOCK_HEIGHT, WEEK_LINES_PER_MONTH, MonthBlockRenderer
from .names import LocaleNames, NameProvider
from .row_compositor import compose_row

__all__ = [
    "BLOCK_HEIGHT",
    "WEEK_LINES_PER_MONTH",
    "CalendarRenderer",
    "ConsoleRenderer",
    "LocaleNames",
    "MonthBlockRenderer",
    "NameProvider",
    "compose_row",
    "render",
    "render_text",
]
