from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from enum import Enum
from typing import Union

DateInput = Union[int, float, str, date, datetime]

# locale id -> 12 full month names, January first
LocaleMonthNames = Mapping[str, Sequence[str]]


class DateStyle(str, Enum):
    """Which components of a date are emitted."""

    MONTH_YEAR = "month_year"
    DAY_MONTH_YEAR = "day_month_year"


class CitationDateError(Exception):
    """Base class for date formatting failures."""


class InvalidDateError(CitationDateError, ValueError):
    """The input could not be resolved to a calendar date."""


class UnknownLocaleError(CitationDateError, LookupError):
    """No month-name table exists for the requested locale."""

    def __init__(self, locale: str) -> None:
        super().__init__(f"No month names for locale: {locale!r}")
        self.locale = locale
