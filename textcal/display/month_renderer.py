"""Render one month as a fixed-height block of text lines."""

import logging
from datetime import date
from typing import List, Sequence

from ..config.settings import LayoutSettings
from ..core.dates import DAYS_PER_WEEK, same_week, sunday_index
from ..core.grouping import group_consecutive
from ..core.text import center, fit, left, right
from .names import NameProvider

logger = logging.getLogger(__name__)

WEEK_LINES_PER_MONTH = 6
HEADER_LINES = 3
BLOCK_HEIGHT = HEADER_LINES + WEEK_LINES_PER_MONTH


class MonthBlockRenderer:
    """Renders a month's dates into ``BLOCK_HEIGHT`` lines of equal width.

    Block layout, for ``cell_width=3``::

        2022                   <- year label, January only
               January         <- month title
         Su Mo Tu We Th Fr Sa  <- weekday header
                            1  <- week lines, padded to six
          2  3  4  5  6  7  8
    """

    def __init__(self, layout: LayoutSettings, names: NameProvider) -> None:
        """Initialize month renderer.

        Args:
            layout: Grid layout; only ``cell_width`` is used here
            names: Source of weekday and month names
        """
        self.layout = layout
        self.names = names
        self.cell_width = layout.cell_width
        self.width = layout.block_width
        self.empty_cell = " " * self.cell_width
        self.empty_week = " " * self.width
        self.weekday_header = self._render_weekday_header()

    def _render_weekday_header(self) -> str:
        names = (
            fit(self.names.weekday_short_name(index), self.cell_width - 1)
            for index in range(DAYS_PER_WEEK)
        )
        return " " + " ".join(names)

    def _render_year_label(self, first_day: date) -> str:
        if first_day.month != 1:
            return self.empty_week
        return left(f"{first_day.year:04d}", self.width)

    def _render_month_title(self, first_day: date) -> str:
        # Names wider than the block are cut so every line keeps the block width
        return fit(center(self.names.month_full_name(first_day.month), self.width), self.width)

    def _render_week(self, week: Sequence[date]) -> str:
        leading = self.empty_cell * sunday_index(week[0])
        trailing = self.empty_cell * (DAYS_PER_WEEK - 1 - sunday_index(week[-1]))
        days = "".join(right(str(day.day), self.cell_width) for day in week)
        return leading + days + trailing

    def render(self, month_dates: Sequence[date]) -> List[str]:
        """Render the dates of a single month.

        Args:
            month_dates: Consecutive dates sharing year and month, non-empty

        Returns:
            Exactly ``BLOCK_HEIGHT`` lines, each ``layout.block_width`` characters wide
        """
        first_day = month_dates[0]
        lines = [
            self._render_year_label(first_day),
            self._render_month_title(first_day),
            self.weekday_header,
        ]
        lines.extend(self._render_week(week) for week in group_consecutive(month_dates, same_week))

        while len(lines) < BLOCK_HEIGHT:
            lines.append(self.empty_week)

        logger.debug(f"Rendered month block {first_day.year}-{first_day.month:02d}")
        return lines
