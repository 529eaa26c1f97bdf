"""Shared test configuration and lightweight fixtures."""

import logging
import os
from pathlib import Path
from typing import Iterator

import pytest

from textcal.config.settings import LayoutSettings, reset_settings
from textcal.display.names import LocaleNames

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class StubNames:
    """Name provider with fixed, locale-independent names."""

    WEEKDAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
    MONTHS = [
        "",
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ]

    def weekday_short_name(self, sunday_index: int) -> str:
        return self.WEEKDAYS[sunday_index][:3]

    def month_full_name(self, month: int) -> str:
        return self.MONTHS[month]


@pytest.fixture
def stub_names() -> StubNames:
    """English names that do not depend on the process locale."""
    return StubNames()


@pytest.fixture
def default_names() -> LocaleNames:
    """Names from the current (C) locale."""
    return LocaleNames()


@pytest.fixture
def default_layout() -> LayoutSettings:
    """Three columns with default cell width and gaps."""
    return LayoutSettings()


@pytest.fixture
def single_column_layout() -> LayoutSettings:
    """One month per row."""
    return LayoutSettings(columns=1)


@pytest.fixture
def reference_calendar_2022() -> list[str]:
    """Reference output for 2022 in three columns, trailing whitespace stripped."""
    return (FIXTURES_DIR / "calendars" / "2022_three_columns.txt").read_text(encoding="utf-8").splitlines()


@pytest.fixture
def isolated_settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run settings code without user config files, .env or TEXTCAL_ variables.

    Yields:
        A temporary directory that is also the working directory
    """
    for key in list(os.environ):
        if key.upper().startswith("TEXTCAL_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield tmp_path
    reset_settings()


@pytest.fixture(autouse=True)
def reset_textcal_logger() -> Iterator[None]:
    """Restore the textcal logger after tests that configure logging."""
    logger = logging.getLogger("textcal")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
