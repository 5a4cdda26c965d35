from __future__ import annotations

import re
from datetime import date, datetime, timezone

from .types import DateInput, InvalidDateError

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

NUMERIC_RE = re.compile(r"^[+-]?\d+(?:\.\d+)?$")

# Month D, YYYY  /  Mon D YYYY
MONTH_DAY_YEAR_RE = re.compile(
    r"^(?P<month>[a-zA-Z]{3,12})\.?\s+(?P<day>\d{1,2})(?:st|nd|rd|th)?\s*,?\s+(?P<year>\d{4})$",
    re.IGNORECASE,
)

# D Month YYYY
DAY_MONTH_YEAR_RE = re.compile(
    r"^(?P<day>\d{1,2})\s+(?P<month>[a-zA-Z]{3,12})\.?\s*,?\s+(?P<year>\d{4})$",
    re.IGNORECASE,
)

# Month YYYY
MONTH_YEAR_RE = re.compile(r"^(?P<month>[a-zA-Z]{3,12})\.?\s*,?\s+(?P<year>\d{4})$", re.IGNORECASE)


def _month_token_to_int(tok: str) -> int | None:
    tok = tok.strip().lower()
    if tok in MONTHS:
        return MONTHS[tok]
    if len(tok) == 3 or (len(tok) == 4 and tok == "sept"):
        for name, num in MONTHS.items():
            if name.startswith(tok):
                return num
    return None


def _from_tokens(month_tok: str, day_tok: str, year_tok: str, source: str) -> datetime:
    mo = _month_token_to_int(month_tok)
    if not mo:
        raise InvalidDateError(f"Unrecognised month in date: {source!r}")
    try:
        return datetime(int(year_tok), mo, int(day_tok), tzinfo=timezone.utc)
    except ValueError as e:
        raise InvalidDateError(f"Invalid calendar date: {source!r} ({e})") from e


def parse_date_string(text: str) -> datetime:
    """Parse a free-form date string into an aware UTC datetime.

    Accepts ISO 8601 dates/date-times and a few written forms
    ("September 15, 2024", "15 Sep 2024", "May 2024").
    """

    s = (text or "").strip()
    if not s:
        raise InvalidDateError("Empty date string")

    iso = s[:-1] + "+00:00" if s.endswith(("Z", "z")) else s
    try:
        dt = datetime.fromisoformat(iso)
    except ValueError:
        pass
    else:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    m = MONTH_DAY_YEAR_RE.match(s) or DAY_MONTH_YEAR_RE.match(s)
    if m:
        return _from_tokens(m.group("month"), m.group("day"), m.group("year"), s)

    m = MONTH_YEAR_RE.match(s)
    if m:
        return _from_tokens(m.group("month"), "1", m.group("year"), s)

    raise InvalidDateError(f"Unparseable date: {s!r}")


def resolve_datetime(value: DateInput) -> datetime:
    """Resolve a timestamp, date string or date object to an aware UTC datetime.

    Numbers (and numeric strings) are seconds since the Unix epoch.
    """

    if isinstance(value, bool):
        raise InvalidDateError(f"Not a date: {value!r}")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        return _from_timestamp(value)
    if isinstance(value, str):
        if NUMERIC_RE.match(value.strip()):
            return _from_timestamp(int(float(value.strip())))
        return parse_date_string(value)
    raise InvalidDateError(f"Not a date: {value!r}")


def _from_timestamp(ts: float) -> datetime:
    try:
        return datetime.fromtimestamp(int(ts), tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateError(f"Timestamp out of range: {ts!r}") from e
