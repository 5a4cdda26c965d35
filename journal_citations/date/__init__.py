"""Locale-aware date formatting for citations.

ABNT writes months in full when the name is short and abbreviates the rest
("maio 2024", "set. 2024"). Everything here is a pure function of its
arguments: no process locale, no local timezone.
"""

from .abbrev import format_abbreviated_date, month_token
from .parsers import parse_date_string, resolve_datetime
from .types import (
    CitationDateError,
    DateInput,
    DateStyle,
    InvalidDateError,
    LocaleMonthNames,
    UnknownLocaleError,
)
