"""
Load pipeline: decode, flatten, sink, one citation at a time.

A file is loaded as a single unit. Rows are written as they are decoded but
only committed once the whole document has been read; a malformed document,
or any other abort, rolls the sink back so nothing from it is kept.

Per-record failures (structural or sink) are recorded on the RunReport and
the loop moves on to the next citation.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable

from pydantic import BaseModel

from medline_loader.config import get_settings
from medline_loader.data_sources.medline_xml import iter_citations
from medline_loader.errors import RecordError
from medline_loader.models.model_citation import Citation
from medline_loader.models.model_flat_row import FlatRow
from medline_loader.services.flattener import flatten_citation
from medline_loader.services.sink import Sink

logger = logging.getLogger(__name__)


class RecordFailure(BaseModel):
    """Why one citation did not make it into the sink."""

    pmid: str  # "unknown" when the PMID itself was unreadable
    kind: str  # "structural" or "sink"
    reason: str


class RunReport(BaseModel):
    """Outcome of one load run."""

    source: str
    persisted: int = 0
    failures: list[RecordFailure] = []

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def total(self) -> int:
        return self.persisted + self.failed


def load_citations(
    citations: Iterable[Citation],
    sink: Sink,
    source: str = "<stream>",
    on_row: Callable[[FlatRow], None] | None = None,
    on_failure: Callable[[RecordFailure], None] | None = None,
    progress_every: int | None = None,
) -> RunReport:
    """Flatten and persist each citation, isolating per-record failures.

    Args:
        citations: Citations in document order (usually a lazy reader).
        sink: Where rows go. Committed on success, rolled back on abort.
        source: Name used in logs and on the report.
        on_row: Called after each row is persisted.
        on_failure: Called after each per-record failure.
        progress_every: Log progress every N persisted rows (settings default).

    Returns:
        RunReport with persisted/failed counts and every failure's pmid and reason.

    Raises:
        FatalParseError: the document is malformed. Nothing is committed.
    """
    if progress_every is None:
        progress_every = get_settings().progress_every

    report = RunReport(source=source)
    try:
        for citation in citations:
            try:
                row = flatten_citation(citation)
                sink.persist(row)
            except RecordError as e:
                failure = RecordFailure(pmid=e.pmid, kind=e.kind, reason=e.reason)
                report.failures.append(failure)
                logger.warning("%s failure for pmid %s: %s", e.kind, e.pmid, e.reason)
                if on_failure is not None:
                    on_failure(failure)
                continue

            report.persisted += 1
            if on_row is not None:
                on_row(row)
            if progress_every and report.persisted % progress_every == 0:
                logger.info("%s: %d citations loaded", source, report.persisted)
    except BaseException:
        logger.error("Aborting load of %s; rolling back", source)
        sink.rollback()
        raise

    sink.commit()
    return report


def load_file(
    path: Path,
    sink: Sink,
    on_row: Callable[[FlatRow], None] | None = None,
    on_failure: Callable[[RecordFailure], None] | None = None,
) -> RunReport:
    """Stream the citations in ``path`` into ``sink``."""
    logger.info("Start parse %s", path)
    report = load_citations(
        iter_citations(path),
        sink,
        source=str(path),
        on_row=on_row,
        on_failure=on_failure,
    )
    logger.info(
        "Finish parse %s: %d loaded, %d failed",
        path,
        report.persisted,
        report.failed,
    )
    return report
