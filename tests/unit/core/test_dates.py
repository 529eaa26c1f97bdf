"""Unit tests for date generation and grouping keys."""

from datetime import date, timedelta
from itertools import islice

import pytest

from textcal.core.dates import (
    date_range,
    same_month,
    same_week,
    same_year,
    sunday_index,
    week_of_month,
)


class TestDateRange:
    """Tests for date_range."""

    @pytest.mark.parametrize(
        ("year_start", "year_end"),
        [(2022, 2023), (2020, 2021), (1999, 2002), (1900, 1901), (2000, 2001)],
    )
    def test_yields_every_day_between_new_years(self, year_start: int, year_end: int) -> None:
        """Test the day count matches the distance between the two January 1sts."""
        days = list(date_range(year_start, year_end))

        expected = (date(year_end, 1, 1) - date(year_start, 1, 1)).days
        assert len(days) == expected
        assert days[0] == date(year_start, 1, 1)
        assert days[-1] == date(year_end - 1, 12, 31)

    def test_strictly_increasing_without_gaps(self) -> None:
        """Test consecutive dates are exactly one day apart."""
        days = list(date_range(2019, 2021))

        assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))

    def test_leap_day_included(self) -> None:
        """Test February 29 appears in leap years only."""
        assert date(2020, 2, 29) in set(date_range(2020, 2021))
        assert not any(d.month == 2 and d.day == 29 for d in date_range(2021, 2022))

    @pytest.mark.parametrize(("year_start", "year_end"), [(2022, 2022), (2023, 2022)])
    def test_empty_range(self, year_start: int, year_end: int) -> None:
        """Test a start year not before the end year yields nothing."""
        assert list(date_range(year_start, year_end)) == []

    def test_is_lazy(self) -> None:
        """Test a huge range can be partially consumed."""
        first = list(islice(date_range(1, 10000), 3))

        assert first == [date(1, 1, 1), date(1, 1, 2), date(1, 1, 3)]

    def test_stops_at_last_supported_date(self) -> None:
        """Test the final year ends at date.max without overflowing."""
        days = list(date_range(9999, 10000))

        assert days[-1] == date.max
        assert len(days) == 365


class TestWeekdayHelpers:
    """Tests for Sunday-first weekday and week-of-month helpers."""

    def test_sunday_index(self) -> None:
        """Test Sunday maps to 0 and Saturday to 6."""
        assert sunday_index(date(2022, 1, 2)) == 0  # Sunday
        assert sunday_index(date(2022, 1, 3)) == 1  # Monday
        assert sunday_index(date(2022, 1, 1)) == 6  # Saturday

    def test_week_of_month_january_2022(self) -> None:
        """Test weeks break on Sundays."""
        assert week_of_month(date(2022, 1, 1)) == 0
        assert week_of_month(date(2022, 1, 2)) == 1
        assert week_of_month(date(2022, 1, 8)) == 1
        assert week_of_month(date(2022, 1, 9)) == 2
        assert week_of_month(date(2022, 1, 31)) == 5

    def test_week_of_month_month_starting_sunday(self) -> None:
        """Test a month starting on Sunday has its first week complete."""
        assert week_of_month(date(2022, 5, 1)) == 0
        assert week_of_month(date(2022, 5, 7)) == 0
        assert week_of_month(date(2022, 5, 8)) == 1


class TestAdjacencyPredicates:
    """Tests for the grouping predicates."""

    def test_same_year(self) -> None:
        assert same_year(date(2022, 12, 30), date(2022, 12, 31))
        assert not same_year(date(2022, 12, 31), date(2023, 1, 1))

    def test_same_month(self) -> None:
        assert same_month(date(2022, 1, 30), date(2022, 1, 31))
        assert not same_month(date(2022, 1, 31), date(2022, 2, 1))
        assert not same_month(date(2022, 1, 1), date(2023, 1, 1))

    def test_same_week(self) -> None:
        """Test week boundaries fall between Saturday and Sunday and at month ends."""
        assert same_week(date(2022, 1, 3), date(2022, 1, 4))
        assert not same_week(date(2022, 1, 1), date(2022, 1, 2))
        # Tuesday to Wednesday, but across a month boundary
        assert not same_week(date(2022, 5, 31), date(2022, 6, 1))
