#!/usr/bin/env python3
"""Format a date the way ABNT citations print it.

Usage:
  PYTHONPATH=. python3 scripts/format_date.py 2024-09-15
  PYTHONPATH=. python3 scripts/format_date.py 1726358400 --with-day --locale pt_BR

Locale, primary locale and an optional extra month-names JSON come from the
environment (.env supported); see journal_citations/config.py.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from journal_citations.config import AppConfig
from journal_citations.date import CitationDateError
from journal_citations.formatting import abnt_date_format, abnt_date_format_with_day


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("value", help="Unix timestamp or date string.")
    ap.add_argument("--with-day", action="store_true", help="Include the zero-padded day.")
    ap.add_argument("--locale", default=None, help="Display locale (default: JOURNAL_CITATIONS_LOCALE or en_US).")
    ap.add_argument("--months", default=None, help="JSON file with extra month-name tables.")
    args = ap.parse_args()

    cfg = AppConfig.from_env()
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    months = Path(args.months).expanduser() if args.months else None
    try:
        catalog = cfg.build_catalog(locale=args.locale, months_path=months)
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(f"Cannot load month names: {e}")

    fmt = abnt_date_format_with_day if args.with_day else abnt_date_format
    try:
        print(fmt(args.value, catalog))
    except CitationDateError as e:
        raise SystemExit(str(e))


if __name__ == "__main__":
    main()
