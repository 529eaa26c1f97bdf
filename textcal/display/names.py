"""Weekday and month names for a locale.

The renderer only needs two lookups, so the locale source is injected as a
:class:`NameProvider`; tests and callers with their own translations can pass
any object with these methods instead of touching process locale state.
"""

import calendar
import locale
import logging
from typing import List, Optional, Protocol

from ..utils.exceptions import LocaleNotAvailableError

logger = logging.getLogger(__name__)


class NameProvider(Protocol):
    """Protocol for the source of localized calendar names."""

    def weekday_short_name(self, sunday_index: int) -> str:
        """Short weekday name for a Sunday-first index (Sunday=0 .. Saturday=6)."""
        ...

    def month_full_name(self, month: int) -> str:
        """Full month name for ``month`` in 1..12."""
        ...


class LocaleNames:
    """Names read from the :mod:`calendar` module for a POSIX locale.

    With ``locale_name=None`` the process's current LC_TIME locale is used
    (the C locale unless the application changed it). Names are captured once
    at construction so rendering never touches global locale state.
    """

    def __init__(self, locale_name: Optional[str] = None) -> None:
        """Initialize locale names.

        Args:
            locale_name: Locale such as ``"de_DE.UTF-8"``, or None for the current locale

        Raises:
            LocaleNotAvailableError: If the locale is not installed
        """
        self.locale_name = locale_name
        self._weekdays, self._months = self._load_names()
        logger.debug(f"Loaded calendar names for locale {locale_name or 'default'}")

    def _load_names(self) -> "tuple[List[str], List[str]]":
        if self.locale_name is None:
            return list(calendar.day_abbr), list(calendar.month_name)

        try:
            with calendar.different_locale(self.locale_name):
                return list(calendar.day_abbr), list(calendar.month_name)
        except locale.Error as e:
            raise LocaleNotAvailableError(self.locale_name, str(e)) from e

    def weekday_short_name(self, sunday_index: int) -> str:
        # calendar.day_abbr is Monday-first
        return self._weekdays[(sunday_index + 6) % 7]

    def month_full_name(self, month: int) -> str:
        return self._months[month]
