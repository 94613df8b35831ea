"""Persistence of flattened citations.

The pipeline talks to anything shaped like ``Sink``. ``CitationSink`` is the
SQLAlchemy implementation: every row goes in under its own savepoint, so a
rejected row is rolled back alone while the surrounding transaction, which
spans the whole file, carries on.
"""

import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from medline_loader.errors import SinkError
from medline_loader.models.model_flat_row import FlatRow
from medline_loader.sqlalchemy.citations import Citations

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def persist(self, row: FlatRow) -> int:
        """Store one row and return its id. Raises SinkError on rejection."""
        ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class CitationSink:
    """Writes FlatRows into the citations table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def persist(self, row: FlatRow) -> int:
        record = Citations(**row.model_dump())
        savepoint = None
        try:
            savepoint = self.db.begin_nested()
            self.db.add(record)
            self.db.flush()
        # Values the driver cannot bind raise OverflowError or ValueError unwrapped.
        except (SQLAlchemyError, OverflowError, ValueError) as e:
            if savepoint is not None:
                savepoint.rollback()
            cause = getattr(e, "orig", None) or e
            raise SinkError(row.pmid, f"{type(e).__name__}: {cause}") from e
        savepoint.commit()

        row_id = record.id
        # Rows are never read back during a load; keep the identity map empty.
        self.db.expunge(record)
        logger.debug("Stored pmid=%s as id=%s", row.pmid, row_id)
        return row_id

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
