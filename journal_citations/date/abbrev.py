from __future__ import annotations

from .parsers import resolve_datetime
from .types import DateInput, DateStyle, LocaleMonthNames, UnknownLocaleError

# Month names longer than this are cut to ABBREV_LEN chars plus the marker.
FULL_NAME_MAX_LEN = 4
ABBREV_LEN = 3
ABBREV_MARKER = "."


def month_token(full_name: str) -> str:
    """ABNT month form: short names stay whole ("maio"), long ones are cut ("set.")."""
    if len(full_name) > FULL_NAME_MAX_LEN:
        return full_name[:ABBREV_LEN] + ABBREV_MARKER
    return full_name


def format_abbreviated_date(
    value: DateInput,
    style: DateStyle,
    month_names: LocaleMonthNames,
    locale: str,
) -> str:
    """Format a date with an ABNT-abbreviated month, lower-cased.

    DAY_MONTH_YEAR for 2024-09-15 in English gives "15 sep. 2024";
    MONTH_YEAR for 2024-05-01 gives "may 2024".
    """

    dt = resolve_datetime(value)

    names = month_names.get(locale)
    if names is None:
        raise UnknownLocaleError(locale)
    month = month_token(names[dt.month - 1])

    style = DateStyle(style)
    if style is DateStyle.DAY_MONTH_YEAR:
        out = f"{dt.day:02d} {month} {dt.year}"
    else:
        out = f"{month} {dt.year}"
    return out.lower()
