from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from journal_citations.date import InvalidDateError, parse_date_string, resolve_datetime


@pytest.mark.parametrize(
    "text",
    [
        "2024-09-15",
        "2024-09-15 10:30:00",
        "2024-09-15T10:30:00Z",
        "September 15, 2024",
        "Sep 15 2024",
        "sept. 15, 2024",
        "15 September 2024",
    ],
)
def test_parse_written_forms(text: str) -> None:
    d = parse_date_string(text)
    assert (d.year, d.month, d.day) == (2024, 9, 15)
    assert d.tzinfo is not None


def test_parse_month_year_defaults_to_first() -> None:
    d = parse_date_string("May 2024")
    assert (d.year, d.month, d.day) == (2024, 5, 1)


def test_offset_is_normalised_to_utc() -> None:
    d = parse_date_string("2024-09-15T23:30:00-03:00")
    assert (d.month, d.day, d.hour) == (9, 16, 2)


@pytest.mark.parametrize("text", ["", "   ", "not-a-date", "2024-02-30", "Foo 12, 2024", "31 June 2024"])
def test_parse_rejects(text: str) -> None:
    with pytest.raises(InvalidDateError):
        parse_date_string(text)


def test_resolve_timestamp_is_utc() -> None:
    d = resolve_datetime(0)
    assert d == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert resolve_datetime("86400") == d + timedelta(days=1)


def test_resolve_date_objects() -> None:
    assert resolve_datetime(date(2024, 9, 15)) == datetime(2024, 9, 15, tzinfo=timezone.utc)
    assert resolve_datetime(datetime(2024, 9, 15, 12)).tzinfo == timezone.utc


@pytest.mark.parametrize("value", [None, True, [], float("inf")])
def test_resolve_rejects_non_dates(value) -> None:
    with pytest.raises(InvalidDateError):
        resolve_datetime(value)
