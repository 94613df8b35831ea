from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from medline_loader.constants import CITATIONS_TABLE
from medline_loader.db.base import Base


class Citations(Base):
    """One denormalized MEDLINE citation per row; journal fields inline."""

    __tablename__ = CITATIONS_TABLE

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pmid: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    created_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    completed_on: Mapped[date | None] = mapped_column(Date, nullable=True)

    journal_title: Mapped[str] = mapped_column(String(512), nullable=False)
    iso_abbreviation: Mapped[str | None] = mapped_column(String(255), nullable=True)
    volume: Mapped[str | None] = mapped_column(String(64), nullable=True)
    issue: Mapped[str | None] = mapped_column(String(64), nullable=True)
    publication_date: Mapped[str | None] = mapped_column(String(64), nullable=True)

    pages: Mapped[str | None] = mapped_column(String(128), nullable=True)
    article_title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    abstract: Mapped[str | None] = mapped_column(Text, nullable=True)
    objective: Mapped[str | None] = mapped_column(Text, nullable=True)
    methods: Mapped[str | None] = mapped_column(Text, nullable=True)
    results: Mapped[str | None] = mapped_column(Text, nullable=True)
    conclusions: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )
