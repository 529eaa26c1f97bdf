"""Calendar orchestrator: dates in, printable lines out.

The pipeline is lazy end to end. Dates are grouped into years with the
streaming grouper so only the current year is ever materialised, months are
rendered one at a time, and rows are yielded as soon as ``columns`` month
blocks are ready. Stopping iteration early leaves nothing to clean up.
"""

import logging
from itertools import islice
from typing import Iterator, List, Optional

from ..config.settings import LayoutSettings
from ..core.dates import date_range, same_month, same_year
from ..core.grouping import group_consecutive, stream_groups
from .month_renderer import MonthBlockRenderer
from .names import LocaleNames, NameProvider
from .row_compositor import compose_row

logger = logging.getLogger(__name__)


class CalendarRenderer:
    """Renders a span of years into rows of month blocks."""

    def __init__(self, layout: LayoutSettings, names: Optional[NameProvider] = None) -> None:
        """Initialize calendar renderer.

        Args:
            layout: Grid layout
            names: Weekday and month name source; defaults to the current locale
        """
        self.layout = layout
        self.names = names if names is not None else LocaleNames()
        self.month_renderer = MonthBlockRenderer(layout, self.names)

        logger.debug(
            f"Calendar renderer initialized: columns={layout.columns}, "
            f"cell_width={layout.cell_width}"
        )

    def iter_month_blocks(self, year_start: int, year_end: int) -> Iterator[List[str]]:
        """Yield one rendered block per month from ``year_start`` up to ``year_end``."""
        for year_dates in stream_groups(date_range(year_start, year_end), same_year):
            for month_dates in group_consecutive(year_dates, same_month):
                yield self.month_renderer.render(month_dates)
            logger.verbose(f"Rendered year {month_dates[0].year}")  # type: ignore[attr-defined]

    def render(self, year_start: int, year_end: int) -> Iterator[str]:
        """Yield the calendar lines for ``year_start`` (inclusive) to ``year_end`` (exclusive).

        Rows are filled across year boundaries, so with five columns the
        last months of one year share a row with the first of the next.

        Args:
            year_start: First year to render
            year_end: Year to stop before; nothing is yielded when not after ``year_start``

        Yields:
            Text lines, without line terminators
        """
        logger.debug(f"Rendering calendar for {year_start}..{year_end}")
        blocks = self.iter_month_blocks(year_start, year_end)
        while True:
            batch = list(islice(blocks, self.layout.columns))
            if not batch:
                return
            yield from compose_row(batch, self.layout)

    def render_text(self, year_start: int, year_end: int) -> str:
        """Render the calendar as a single newline-joined string."""
        return "\n".join(self.render(year_start, year_end))


def render(
    year_start: int,
    year_end: int,
    layout: Optional[LayoutSettings] = None,
    locale: Optional[str] = None,
    names: Optional[NameProvider] = None,
) -> Iterator[str]:
    """Render a calendar span as a lazy sequence of lines.

    Args:
        year_start: First year to render (inclusive)
        year_end: Year to stop before (exclusive)
        layout: Grid layout; defaults to three columns with default gaps
        locale: POSIX locale for names, ignored when ``names`` is given
        names: Explicit name provider

    Raises:
        LocaleNotAvailableError: If ``locale`` cannot be loaded
    """
    if names is None:
        names = LocaleNames(locale)
    renderer = CalendarRenderer(layout if layout is not None else LayoutSettings(), names)
    return renderer.render(year_start, year_end)


def render_text(
    year_start: int,
    year_end: int,
    layout: Optional[LayoutSettings] = None,
    locale: Optional[str] = None,
    names: Optional[NameProvider] = None,
) -> str:
    """Like :func:`render`, joined with newlines."""
    return "\n".join(render(year_start, year_end, layout, locale=locale, names=names))
