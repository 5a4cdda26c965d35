from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .date import UnknownLocaleError

log = logging.getLogger(__name__)

MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "pt": (
        "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
        "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
    ),
    "es": (
        "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
        "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre",
    ),
    "fr": (
        "Janvier", "Février", "Mars", "Avril", "Mai", "Juin",
        "Juillet", "Août", "Septembre", "Octobre", "Novembre", "Décembre",
    ),
    "de": (
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    "it": (
        "Gennaio", "Febbraio", "Marzo", "Aprile", "Maggio", "Giugno",
        "Luglio", "Agosto", "Settembre", "Ottobre", "Novembre", "Dicembre",
    ),
}

MESSAGES: dict[str, dict[str, str]] = {
    "en_US": {
        "plugins.citationFormats.abnt.displayName": "ABNT Citation Plugin",
        "plugins.citationFormats.abnt.citationFormatName": "ABNT",
        "plugins.citationFormats.abnt.description": "This plugin implements the ABNT citation format.",
        "plugins.citationFormats.abnt.location": "Location",
        "plugins.citationFormats.abnt.location.required": "The location is required for the primary locale.",
        "plugins.citationFormats.abnt.location.tooLong": "The location must be at most 255 characters.",
        "plugins.citationFormats.abnt.location.unknownLocale": "Unknown locale for location.",
        "plugins.citationOutput.mla.displayName": "MLA Citation Output",
        "plugins.citationOutput.mla.description": "Formats citations in MLA style.",
        "manager.plugins.settings": "Settings",
    },
    "pt_BR": {
        "plugins.citationFormats.abnt.displayName": "Plugin de citação ABNT",
        "plugins.citationFormats.abnt.citationFormatName": "ABNT",
        "plugins.citationFormats.abnt.description": "Este plugin implementa o formato de citação ABNT.",
        "plugins.citationFormats.abnt.location": "Local",
        "plugins.citationFormats.abnt.location.required": "O local é obrigatório no idioma principal.",
        "plugins.citationFormats.abnt.location.tooLong": "O local deve ter no máximo 255 caracteres.",
        "plugins.citationFormats.abnt.location.unknownLocale": "Idioma desconhecido para o local.",
        "plugins.citationOutput.mla.displayName": "Saída de citação MLA",
        "plugins.citationOutput.mla.description": "Formata citações no estilo MLA.",
        "manager.plugins.settings": "Configurações",
    },
}


def language_of(locale: str) -> str:
    """'pt_BR' -> 'pt', 'en-US' -> 'en'."""
    return locale.replace("-", "_").split("_", 1)[0].lower()


def load_month_names(path: Path) -> dict[str, tuple[str, ...]]:
    """Load extra month tables from JSON: {"<locale>": [12 names], ...}."""
    obj = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(obj, dict):
        raise ValueError(f"Month names file must hold a JSON object: {path}")

    out: dict[str, tuple[str, ...]] = {}
    for loc, names in obj.items():
        if not (isinstance(names, list) and len(names) == 12 and all(isinstance(n, str) and n for n in names)):
            raise ValueError(f"Locale {loc!r} in {path} needs exactly 12 non-empty month names")
        out[str(loc)] = tuple(names)
    return out


@dataclass
class LocaleCatalog:
    """Locale service used by the plugins.

    current_locale is the active display locale; primary_locale is the
    journal's designated fallback for localized settings.
    """

    current_locale: str = "en_US"
    primary_locale: str = "en_US"
    month_tables: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(MONTH_NAMES))
    messages: dict[str, dict[str, str]] = field(default_factory=lambda: dict(MESSAGES))

    @classmethod
    def with_month_file(cls, path: Path | None, **kwargs) -> "LocaleCatalog":
        cat = cls(**kwargs)
        if path:
            if not path.exists():
                raise FileNotFoundError(f"Month names file not found: {path}")
            cat.month_tables.update(load_month_names(path))
        return cat

    def get_current_locale(self) -> str:
        return self.current_locale

    def get_primary_locale(self) -> str:
        return self.primary_locale

    def resolve_locale(self, locale: str) -> str:
        """Return the month-table key for locale: exact match, then language."""
        if locale in self.month_tables:
            return locale
        lang = language_of(locale)
        if lang in self.month_tables:
            return lang
        raise UnknownLocaleError(locale)

    def get_full_month_names(self, locale: str | None = None) -> tuple[str, ...]:
        return self.month_tables[self.resolve_locale(locale or self.current_locale)]

    @property
    def month_names(self) -> Mapping[str, tuple[str, ...]]:
        return self.month_tables

    def localized_value(self, values: Mapping[str, str] | None) -> str | None:
        """Value for the current locale, falling back to the primary locale."""
        if values is None:
            return None
        v = values.get(self.current_locale)
        if not v:
            v = values.get(self.primary_locale)
        return v or None

    def translate(self, key: str) -> str:
        for loc in (self.current_locale, self.primary_locale, "en_US"):
            msg = self.messages.get(loc, {}).get(key)
            if msg:
                return msg
        log.debug("missing translation: %s", key)
        return key
