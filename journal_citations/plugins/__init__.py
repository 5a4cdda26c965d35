from .abnt import AbntCitationPlugin, AbntSettingsForm
from .base import Article, Author, CitationPlugin, Issue, Journal, LinkAction, ManageResult, Request
from .mla import MlaCitationOutputBase, MlaCitationOutputPlugin
