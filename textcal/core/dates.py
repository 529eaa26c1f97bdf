"""Calendar date generation and grouping keys.

Dates are plain :class:`datetime.date` values. Weeks start on Sunday, so the
weekday of a date is exposed as a Sunday-first index (Sunday=0 .. Saturday=6)
rather than the Monday-first :meth:`date.weekday`.
"""

import logging
from datetime import date, timedelta
from typing import Iterator

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7

_ONE_DAY = timedelta(days=1)


def date_range(year_start: int, year_end: int) -> Iterator[date]:
    """Yield every date from January 1 of ``year_start`` up to, not including, January 1 of ``year_end``.

    Args:
        year_start: First year to include
        year_end: First year to exclude

    Yields:
        Consecutive dates in increasing order. Nothing when ``year_start >= year_end``.
    """
    if year_start >= year_end:
        logger.debug(f"Empty date range requested: {year_start}..{year_end}")
        return

    current = date(year_start, 1, 1)
    while current.year < year_end:
        yield current
        if current == date.max:
            return
        current += _ONE_DAY


def sunday_index(day: date) -> int:
    """Return the Sunday-first weekday index of ``day`` (Sunday=0, Saturday=6)."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def week_of_month(day: date) -> int:
    """Return the zero-based, Sunday-started week of the month containing ``day``."""
    first_offset = sunday_index(day.replace(day=1))
    return (day.day - 1 + first_offset) // DAYS_PER_WEEK


def same_year(previous: date, current: date) -> bool:
    return previous.year == current.year


def same_month(previous: date, current: date) -> bool:
    return previous.year == current.year and previous.month == current.month


def same_week(previous: date, current: date) -> bool:
    return same_month(previous, current) and week_of_month(previous) == week_of_month(current)
