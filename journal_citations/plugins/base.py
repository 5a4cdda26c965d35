from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any
from urllib.parse import urlencode

from ..locales import LocaleCatalog
from ..settings_store import SettingsStore

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Author:
    given_name: str
    family_name: str


@dataclass(frozen=True)
class Journal:
    id: int
    title: str


@dataclass(frozen=True)
class Issue:
    volume: str | None = None
    number: str | None = None
    year: int | None = None
    date_published: int | str | date | datetime | None = None


@dataclass(frozen=True)
class Article:
    title: str
    authors: Sequence[Author] = ()
    pages: str | None = None
    url: str | None = None
    date_published: int | str | date | datetime | None = None


def published_date(article: Article, issue: Issue) -> int | str | date | datetime | None:
    """Article publication date, else the issue's. A 0 timestamp counts as set."""
    if article.date_published is not None:
        return article.date_published
    return issue.date_published


@dataclass
class Request:
    """The parts of an HTTP request the plugins read."""

    journal: Journal
    base_url: str = ""
    user_vars: dict[str, Any] = field(default_factory=dict)

    def get_user_var(self, name: str) -> Any:
        return self.user_vars.get(name)

    def url(
        self,
        page: str,
        op: str | None = None,
        path: Sequence[str] | None = None,
        params: Mapping[str, str] | None = None,
        anchor: str | None = None,
    ) -> str:
        parts = [self.base_url.rstrip("/"), page]
        if op:
            parts.append(op)
        parts.extend(path or ())
        out = "/".join(parts)
        if params:
            out += "?" + urlencode(params)
        if anchor:
            out += "#" + anchor
        return out


@dataclass(frozen=True)
class RedirectAction:
    url: str


@dataclass(frozen=True)
class LinkAction:
    id: str
    action: RedirectAction
    title: str
    image: str | None = None


@dataclass
class ManageResult:
    """Outcome of a management verb.

    handled=False with a redirect means the caller should follow it.
    """

    handled: bool
    redirect: str | None = None
    form: dict[str, Any] | None = None
    errors: dict[str, str] = field(default_factory=dict)


class CitationPlugin:
    """Base for citation plugins: naming, settings and management verbs."""

    category = "citationFormats"
    name = "CitationPlugin"
    display_name_key = ""
    description_key = ""
    citation_format_name_key = ""

    def __init__(self, catalog: LocaleCatalog, store: SettingsStore) -> None:
        self.catalog = catalog
        self.store = store

    def get_name(self) -> str:
        return self.name

    def get_category(self) -> str:
        return self.category

    def get_display_name(self) -> str:
        return self.catalog.translate(self.display_name_key)

    def get_description(self) -> str:
        return self.catalog.translate(self.description_key)

    def get_citation_format_name(self) -> str:
        return self.catalog.translate(self.citation_format_name_key or self.display_name_key)

    def get_setting(self, journal_id: int, name: str) -> Any:
        return self.store.get(self.get_name(), journal_id, name)

    def update_setting(self, journal_id: int, name: str, value: Any) -> None:
        self.store.set(self.get_name(), journal_id, name, value)

    def template_filters(self) -> dict[str, Callable[..., str]]:
        return {}

    def fetch_citation(self, article: Article, issue: Issue, journal: Journal) -> str:
        raise NotImplementedError

    def plugin_url(self, path: str | Sequence[str] | None = None) -> list[str]:
        """Prefix a plugin-relative path with [category, name]."""
        prefix = [self.get_category(), self.get_name()]
        if isinstance(path, (list, tuple)):
            return prefix + list(path)
        if path:
            return prefix + [str(path)]
        return prefix

    def get_management_verbs(self) -> list[tuple[str, str]]:
        return []

    def get_management_verb_link_action(self, request: Request, verb: tuple[str, str]) -> LinkAction | None:
        verb_name, verb_localized = verb
        url = request.url("manager", "plugin", self.plugin_url(verb_name))
        return LinkAction(verb_name, RedirectAction(url), verb_localized)

    def manage(self, verb: str, request: Request) -> ManageResult:
        log.debug("%s: unhandled management verb %r", self.get_name(), verb)
        return ManageResult(handled=False)


def unique_id() -> str:
    return uuid.uuid4().hex
