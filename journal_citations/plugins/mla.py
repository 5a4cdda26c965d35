from __future__ import annotations

from collections.abc import Sequence

from ..date import resolve_datetime
from .base import Article, Author, CitationPlugin, Issue, Journal, published_date


def _mla_authors(authors: Sequence[Author]) -> str:
    if not authors:
        return ""
    first = authors[0]
    lead = f"{first.family_name}, {first.given_name}".strip(", ")
    if len(authors) == 1:
        return lead
    if len(authors) == 2:
        second = authors[1]
        return f"{lead}, and {second.given_name} {second.family_name}".strip()
    return f"{lead}, et al"


class MlaCitationOutputBase(CitationPlugin):
    """Shared MLA (9th ed.) journal-article output."""

    category = "citationOutput"
    name = "MlaCitationOutputPlugin"
    display_name_key = "plugins.citationOutput.mla.displayName"
    description_key = "plugins.citationOutput.mla.description"

    def fetch_citation(self, article: Article, issue: Issue, journal: Journal) -> str:
        out: list[str] = []
        authors = _mla_authors(article.authors)
        if authors:
            out.append(authors.rstrip(".") + ".")
        title = article.title.strip()
        if not title.endswith((".", "?", "!")):
            title += "."
        out.append(f'"{title}"')

        container = [journal.title]
        if issue.volume:
            container.append(f"vol. {issue.volume}")
        if issue.number:
            container.append(f"no. {issue.number}")
        published = published_date(article, issue)
        if published is not None:
            container.append(str(resolve_datetime(published).year))
        elif issue.year:
            container.append(str(issue.year))
        if article.pages:
            container.append(f"pp. {article.pages}")
        out.append(", ".join(container) + ".")

        return " ".join(out)


class MlaCitationOutputPlugin(MlaCitationOutputBase):
    """MLA citation style plug-in."""
