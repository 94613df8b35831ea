"""
Pydantic models for one MEDLINE citation.

The nesting mirrors the XML:

    MedlineCitation
      |-- DateCreated / DateCompleted
      `-- Article
            |-- Journal
            |     `-- JournalIssue
            |           `-- PubDate
            |-- Pagination
            `-- Abstract

Every model is frozen. The decoder builds each one in a single call once its
closing tag has been seen.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from medline_loader.helpers.date_helpers import compose_date_or_none


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CitationDate(_Frozen):
    """DateCreated / DateCompleted: Year, Month and Day as raw text."""

    year: str | None = None
    month: str | None = None
    day: str | None = None

    def to_iso(self) -> str | None:
        """YYYY-MM-DD, or None when the parts don't make a calendar date."""
        return compose_date_or_none(self.year, self.month, self.day)


class PublicationDate(_Frozen):
    """PubDate. Older records carry a loose MedlineDate phrase instead of parts."""

    medline_date: str | None = None
    year: str | None = None
    month: str | None = None
    day: str | None = None

    @property
    def text(self) -> str | None:
        if self.medline_date:
            return self.medline_date
        parts = [p for p in (self.year, self.month, self.day) if p]
        return " ".join(parts) if parts else None


class JournalIssue(_Frozen):
    volume: str | None = None
    issue: str | None = None
    publication_date: PublicationDate | None = None


class Journal(_Frozen):
    title: str | None = None  # required for a usable row
    iso_abbreviation: str | None = None
    journal_issue: JournalIssue | None = None


class Pagination(_Frozen):
    medline_pagination: str | None = None


class Abstract(_Frozen):
    """Abstract segments keyed by their Label attribute."""

    objective: str | None = None
    methods: str | None = None
    results: str | None = None
    conclusions: str | None = None
    abstract: str | None = None  # unlabeled


class Article(_Frozen):
    title: str = ""
    journal: Journal | None = None
    pagination: Pagination | None = None
    abstract: Abstract | None = None


class Citation(_Frozen):
    """A single MedlineCitation record."""

    pmid: int | None = None
    created_on: CitationDate | None = None
    completed_on: CitationDate | None = None
    article: Article | None = None

    @field_validator("pmid", mode="before")
    @classmethod
    def coerce_pmid(cls, value: object) -> int | None:
        # A PMID we can't read is reported as "unknown" rather than failing
        # the decode.
        if value is None or isinstance(value, int):
            return value
        text = str(value).strip()
        return int(text) if text.isdecimal() else None


class CitationSet(_Frozen):
    """A whole document's citations. Only for documents small enough to hold."""

    citations: list[Citation] = []
