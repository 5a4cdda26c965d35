from __future__ import annotations

from .date import DateInput, DateStyle, format_abbreviated_date
from .locales import LocaleCatalog


def abnt_date_format(value: DateInput, catalog: LocaleCatalog, locale: str | None = None) -> str:
    """Month and year, e.g. "set. 2024" in pt_BR."""
    loc = catalog.resolve_locale(locale or catalog.get_current_locale())
    return format_abbreviated_date(value, DateStyle.MONTH_YEAR, catalog.month_names, loc)


def abnt_date_format_with_day(value: DateInput, catalog: LocaleCatalog, locale: str | None = None) -> str:
    """Day, month and year, e.g. "05 maio 2024" in pt_BR."""
    loc = catalog.resolve_locale(locale or catalog.get_current_locale())
    return format_abbreviated_date(value, DateStyle.DAY_MONTH_YEAR, catalog.month_names, loc)
