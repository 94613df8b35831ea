"""Data models for medline_loader."""

from medline_loader.models.model_citation import (
    Abstract,
    Article,
    Citation,
    CitationDate,
    CitationSet,
    Journal,
    JournalIssue,
    Pagination,
    PublicationDate,
)
from medline_loader.models.model_flat_row import FlatRow

__all__ = [
    "Abstract",
    "Article",
    "Citation",
    "CitationDate",
    "CitationSet",
    "FlatRow",
    "Journal",
    "JournalIssue",
    "Pagination",
    "PublicationDate",
]
