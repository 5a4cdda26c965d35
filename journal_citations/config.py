from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .locales import LocaleCatalog
from .plugins import AbntCitationPlugin, CitationPlugin, MlaCitationOutputPlugin
from .settings_store import JsonSettingsStore, MemorySettingsStore, SettingsStore


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name, "").strip()
    return Path(v).expanduser() if v else None


@dataclass(frozen=True)
class AppConfig:
    locale: str = "en_US"
    primary_locale: str = "en_US"
    settings_path: Path | None = None
    months_path: Path | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, dotenv_path: Path | None = None) -> "AppConfig":
        load_dotenv(dotenv_path)
        locale = os.environ.get("JOURNAL_CITATIONS_LOCALE", "").strip() or "en_US"
        primary = os.environ.get("JOURNAL_CITATIONS_PRIMARY_LOCALE", "").strip() or locale
        level = os.environ.get("JOURNAL_CITATIONS_LOG_LEVEL", "").strip().upper() or "WARNING"
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid JOURNAL_CITATIONS_LOG_LEVEL: {level}")
        return cls(
            locale=locale,
            primary_locale=primary,
            settings_path=_env_path("JOURNAL_CITATIONS_SETTINGS"),
            months_path=_env_path("JOURNAL_CITATIONS_MONTHS"),
            log_level=level,
        )

    def build_catalog(self, *, locale: str | None = None, months_path: Path | None = None) -> LocaleCatalog:
        return LocaleCatalog.with_month_file(
            months_path or self.months_path,
            current_locale=locale or self.locale,
            primary_locale=self.primary_locale,
        )

    def build_store(self) -> SettingsStore:
        if self.settings_path:
            return JsonSettingsStore(self.settings_path)
        return MemorySettingsStore()

    def build_plugins(self) -> list[CitationPlugin]:
        """ABNT and MLA plugins sharing one catalog and settings store.

        Entry point for embedding: the host passes requests and articles to
        the returned plugins.
        """
        catalog = self.build_catalog()
        store = self.build_store()
        return [AbntCitationPlugin(catalog, store), MlaCitationOutputPlugin(catalog, store)]
