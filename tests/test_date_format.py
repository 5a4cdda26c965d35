from __future__ import annotations

from datetime import datetime, timezone

import pytest

from journal_citations.date import DateStyle, InvalidDateError, UnknownLocaleError, format_abbreviated_date, month_token
from journal_citations.locales import MONTH_NAMES

EN = {"en": MONTH_NAMES["en"]}


def _ts(y: int, m: int, d: int) -> int:
    return int(datetime(y, m, d, tzinfo=timezone.utc).timestamp())


def test_long_month_is_abbreviated() -> None:
    assert format_abbreviated_date(_ts(2024, 9, 15), DateStyle.MONTH_YEAR, EN, "en") == "sep. 2024"


def test_short_month_is_kept_whole() -> None:
    assert format_abbreviated_date(_ts(2024, 5, 1), DateStyle.MONTH_YEAR, EN, "en") == "may 2024"


def test_day_month_year_zero_pads_day() -> None:
    assert format_abbreviated_date(_ts(2024, 9, 15), DateStyle.DAY_MONTH_YEAR, EN, "en") == "15 sep. 2024"
    assert format_abbreviated_date(_ts(2024, 6, 3), DateStyle.DAY_MONTH_YEAR, EN, "en") == "03 june 2024"


def test_numeric_string_is_a_timestamp() -> None:
    assert format_abbreviated_date(str(_ts(2024, 9, 15)), DateStyle.MONTH_YEAR, EN, "en") == "sep. 2024"


def test_date_string_is_parsed() -> None:
    assert format_abbreviated_date("2024-09-15", DateStyle.DAY_MONTH_YEAR, EN, "en") == "15 sep. 2024"


def test_invalid_date_string() -> None:
    with pytest.raises(InvalidDateError):
        format_abbreviated_date("not-a-date", DateStyle.MONTH_YEAR, EN, "en")


def test_unknown_locale() -> None:
    with pytest.raises(UnknownLocaleError):
        format_abbreviated_date(_ts(2024, 9, 15), DateStyle.MONTH_YEAR, EN, "xx")


def test_style_accepts_enum_value() -> None:
    assert format_abbreviated_date(_ts(2024, 9, 15), "day_month_year", EN, "en") == "15 sep. 2024"


@pytest.mark.parametrize("loc", sorted(MONTH_NAMES))
def test_month_rule_holds_for_every_builtin_locale(loc: str) -> None:
    for i, full in enumerate(MONTH_NAMES[loc], start=1):
        out = format_abbreviated_date(_ts(2023, i, 10), DateStyle.MONTH_YEAR, MONTH_NAMES, loc)
        tok = out.rsplit(" ", 1)[0]
        if len(full) <= 4:
            assert tok == full.lower()
        else:
            assert tok == full[:3].lower() + "."


def test_portuguese_months() -> None:
    pt = {"pt": MONTH_NAMES["pt"]}
    assert format_abbreviated_date("2024-05-20", DateStyle.MONTH_YEAR, pt, "pt") == "maio 2024"
    assert format_abbreviated_date("2024-03-20", DateStyle.MONTH_YEAR, pt, "pt") == "mar. 2024"
    assert format_abbreviated_date("2024-09-02", DateStyle.DAY_MONTH_YEAR, pt, "pt") == "02 set. 2024"


def test_non_ascii_month_is_lowercased() -> None:
    de = {"de": MONTH_NAMES["de"]}
    assert format_abbreviated_date("2024-03-01", DateStyle.MONTH_YEAR, de, "de") == "märz 2024"


def test_month_token() -> None:
    assert month_token("May") == "May"
    assert month_token("June") == "June"
    assert month_token("September") == "Sep."


def test_repeated_calls_are_identical() -> None:
    args = (_ts(2024, 9, 15), DateStyle.DAY_MONTH_YEAR, EN, "en")
    first = format_abbreviated_date(*args)
    assert all(format_abbreviated_date(*args) == first for _ in range(5))
