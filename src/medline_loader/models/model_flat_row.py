"""The denormalized row handed to the sink."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class FlatRow(BaseModel):
    """One citation with every nested field hoisted to the top level.

    Journal fields live directly on the row; journals are not stored as
    entities of their own. None is the empty value for anything the source
    record did not carry.
    """

    model_config = ConfigDict(frozen=True)

    pmid: int
    created_on: date | None = None
    completed_on: date | None = None

    journal_title: str
    iso_abbreviation: str | None = None
    volume: str | None = None
    issue: str | None = None
    publication_date: str | None = None

    pages: str | None = None
    article_title: str = ""
    abstract: str | None = None
    objective: str | None = None
    methods: str | None = None
    results: str | None = None
    conclusions: str | None = None
