from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..date import UnknownLocaleError
from ..formatting import abnt_date_format, abnt_date_format_with_day
from .base import (
    Article,
    CitationPlugin,
    Issue,
    Journal,
    LinkAction,
    ManageResult,
    RedirectAction,
    Request,
    published_date,
    unique_id,
)

log = logging.getLogger(__name__)

LOCATION_MAX_LEN = 255


def _sentence(s: str) -> str:
    s = s.strip()
    return s if s.endswith((".", "?", "!")) else s + "."


@dataclass
class AbntSettingsForm:
    """Edits the per-locale "location" shown in ABNT citations."""

    plugin: "AbntCitationPlugin"
    journal_id: int
    data: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    def init_data(self) -> None:
        self.data = {"location": dict(self.plugin.get_setting(self.journal_id, "location") or {})}

    def read_input_data(self, user_vars: Mapping[str, Any]) -> None:
        raw = user_vars.get("location")
        if isinstance(raw, Mapping):
            location = {str(k): str(v or "") for k, v in raw.items()}
        elif raw:
            location = {self.plugin.catalog.get_current_locale(): str(raw)}
        else:
            location = {}
        self.data = {"location": location}

    def is_locale_resubmit(self, user_vars: Mapping[str, Any]) -> bool:
        """True when the form was posted only to switch the editing locale."""
        return bool(user_vars.get("formLocale")) and not user_vars.get("save")

    def validate(self) -> bool:
        cat = self.plugin.catalog
        location: dict[str, str] = self.data.get("location") or {}
        self.errors = {}

        for loc, value in location.items():
            try:
                cat.resolve_locale(loc)
            except UnknownLocaleError:
                self.errors[f"location[{loc}]"] = cat.translate("plugins.citationFormats.abnt.location.unknownLocale")
                continue
            if len(value.strip()) > LOCATION_MAX_LEN:
                self.errors[f"location[{loc}]"] = cat.translate("plugins.citationFormats.abnt.location.tooLong")

        if not (location.get(cat.get_primary_locale()) or "").strip():
            self.errors["location"] = cat.translate("plugins.citationFormats.abnt.location.required")

        return not self.errors

    def execute(self) -> None:
        location = {k: v.strip() for k, v in (self.data.get("location") or {}).items() if v and v.strip()}
        self.plugin.update_setting(self.journal_id, "location", location)

    def display(self) -> dict[str, Any]:
        return {
            "location": dict(self.data.get("location") or {}),
            "errors": dict(self.errors),
            "plugin_url": self.plugin.plugin_url("settings"),
        }


class AbntCitationPlugin(CitationPlugin):
    """ABNT (NBR 6023) citation format."""

    category = "citationFormats"
    name = "AbntCitationPlugin"
    display_name_key = "plugins.citationFormats.abnt.displayName"
    description_key = "plugins.citationFormats.abnt.description"
    citation_format_name_key = "plugins.citationFormats.abnt.citationFormatName"

    def get_localized_location(self, journal: Journal) -> str | None:
        settings = self.get_setting(journal.id, "location")
        if settings is None:
            return None
        return self.catalog.localized_value(settings)

    def template_filters(self) -> dict[str, Callable[..., str]]:
        cat = self.catalog
        return {
            "mb_upper": lambda s: str(s).upper(),
            "abnt_date_format": lambda v: abnt_date_format(v, cat),
            "abnt_date_format_with_day": lambda v: abnt_date_format_with_day(v, cat),
        }

    def fetch_citation(self, article: Article, issue: Issue, journal: Journal, *, accessed: Any = None) -> str:
        f = self.template_filters()

        authors = "; ".join(
            f"{f['mb_upper'](a.family_name.strip())}, {a.given_name.strip()}".strip(", ")
            for a in article.authors
        )
        out: list[str] = []
        if authors:
            out.append(_sentence(authors))
        out.append(_sentence(article.title))

        ref = [journal.title]
        location = self.get_localized_location(journal)
        if location:
            ref.append(location)
        if issue.volume:
            ref.append(f"v. {issue.volume}")
        if issue.number:
            ref.append(f"n. {issue.number}")
        if article.pages:
            ref.append(f"p. {article.pages}")

        published = published_date(article, issue)
        if published is not None:
            ref.append(f["abnt_date_format"](published))
        elif issue.year:
            ref.append(str(issue.year))
        out.append(_sentence(", ".join(ref)))

        if article.url:
            out.append(f"Disponível em: {article.url}.")
            if accessed is not None:
                out.append(f"Acesso em: {f['abnt_date_format_with_day'](accessed)}.")

        return " ".join(out)

    def get_management_verbs(self) -> list[tuple[str, str]]:
        return [("settings", self.catalog.translate("manager.plugins.settings"))]

    def get_management_verb_link_action(self, request: Request, verb: tuple[str, str]) -> LinkAction | None:
        verb_name, verb_localized = verb
        if verb_name == "settings":
            # uid forces a reload of the settings page
            url = request.url(
                "management",
                "settings",
                ["website"],
                params={"uid": unique_id()},
                anchor="staticPages",
            )
            return LinkAction(verb_name, RedirectAction(url), verb_localized)
        return super().get_management_verb_link_action(request, verb)

    def manage(self, verb: str, request: Request) -> ManageResult:
        if verb != "settings":
            return super().manage(verb, request)

        form = AbntSettingsForm(self, request.journal.id)
        if request.get_user_var("save"):
            form.read_input_data(request.user_vars)
            if form.validate():
                form.execute()
                log.debug("%s: saved settings for journal %s", self.get_name(), request.journal.id)
                return ManageResult(handled=False, redirect=request.url("manager", "plugin"))
            return ManageResult(handled=True, form=form.display(), errors=dict(form.errors))

        if form.is_locale_resubmit(request.user_vars):
            form.read_input_data(request.user_vars)
        else:
            form.init_data()
        return ManageResult(handled=True, form=form.display())
