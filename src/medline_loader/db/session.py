"""Engine and session factory."""

from typing import Iterator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from medline_loader.config import get_settings
from medline_loader.db.base import Base


def _enable_sqlite_savepoints(engine: Engine) -> None:
    # pysqlite issues its own BEGIN lazily, which breaks SAVEPOINT. Hand
    # transaction control back to SQLAlchemy.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def make_engine(database_url: str | None = None, echo: bool | None = None) -> Engine:
    """Create an engine for ``database_url`` (defaults to settings)."""
    settings = get_settings()
    engine = create_engine(
        database_url or settings.database_url,
        echo=settings.echo_sql if echo is None else echo,
    )
    if engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(engine)
    return engine


def create_tables(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left alone."""
    # Registers the citations table on Base.metadata.
    import medline_loader.sqlalchemy.citations  # noqa: F401

    Base.metadata.create_all(engine)


def _make_session_factory(database_url: str | None = None) -> sessionmaker[Session]:
    return sessionmaker(bind=make_engine(database_url), expire_on_commit=False)


def get_db(database_url: str | None = None) -> Iterator[Session]:
    """Yield a session and close it afterwards."""
    session = _make_session_factory(database_url)()
    try:
        yield session
    finally:
        session.close()
