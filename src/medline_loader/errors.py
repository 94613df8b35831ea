"""
Exception hierarchy for the loader.

Only FatalParseError stops a run. StructuralError and SinkError are
per-record failures: the pipeline records them against the citation's PMID
and moves on. DateCompositionError never leaves the flattener; a bad date
becomes an empty value on the row.
"""

from medline_loader.constants import UNKNOWN_PMID


class LoaderError(Exception):
    """Base exception for medline_loader."""


class FatalParseError(LoaderError):
    """The XML stream is malformed. Nothing from the document is kept."""

    def __init__(
        self,
        source: str,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ):
        self.source = source
        self.line = line
        self.column = column
        super().__init__(f"[{source}] {message}")


class DateCompositionError(LoaderError):
    """Year/month/day do not form a calendar date."""


class RecordError(LoaderError):
    """A failure isolated to a single citation."""

    kind = "record"

    def __init__(self, pmid: int | str | None, reason: str):
        self.pmid = str(pmid) if pmid is not None else UNKNOWN_PMID
        self.reason = reason
        super().__init__(f"{self.pmid}: {reason}")


class StructuralError(RecordError):
    """A required field, or one of its ancestors, is absent."""

    kind = "structural"


class SinkError(RecordError):
    """The sink rejected a row."""

    kind = "sink"
