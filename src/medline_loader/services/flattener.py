"""Denormalize a parsed Citation into a single FlatRow.

Required fields (PMID, Article, Journal title) raise StructuralError when
absent. Everything else is read through ``resolve_path``: the first missing
link in the chain gives None for that one field and nothing else changes.
"""

from typing import Any

from pydantic import ValidationError

from medline_loader.errors import StructuralError
from medline_loader.models.model_citation import Citation, CitationDate
from medline_loader.models.model_flat_row import FlatRow


JOURNAL_TITLE_PATH: tuple[str, ...] = ("article", "journal", "title")

# FlatRow field -> attribute chain from the Citation.
OPTIONAL_PATHS: dict[str, tuple[str, ...]] = {
    "iso_abbreviation": ("article", "journal", "iso_abbreviation"),
    "volume": ("article", "journal", "journal_issue", "volume"),
    "issue": ("article", "journal", "journal_issue", "issue"),
    "publication_date": (
        "article",
        "journal",
        "journal_issue",
        "publication_date",
        "text",
    ),
    "pages": ("article", "pagination", "medline_pagination"),
    "abstract": ("article", "abstract", "abstract"),
    "objective": ("article", "abstract", "objective"),
    "methods": ("article", "abstract", "methods"),
    "results": ("article", "abstract", "results"),
    "conclusions": ("article", "abstract", "conclusions"),
}


def resolve_path(node: Any, path: tuple[str, ...], default: Any = None) -> Any:
    """Follow ``path`` from ``node``; return ``default`` at the first None."""
    for name in path:
        if node is None:
            return default
        node = getattr(node, name)
    return default if node is None else node


def _iso(value: CitationDate | None) -> str | None:
    return value.to_iso() if value is not None else None


def flatten_citation(citation: Citation) -> FlatRow:
    """Project one citation onto a FlatRow.

    Raises:
        StructuralError: the PMID is unreadable, or the Article or its
            Journal title is missing, or a value does not fit its row
            column.
    """
    if citation.pmid is None:
        raise StructuralError(None, "missing or non-numeric PMID")
    if citation.article is None:
        raise StructuralError(citation.pmid, "missing Article")

    journal_title = resolve_path(citation, JOURNAL_TITLE_PATH)
    if not journal_title:
        raise StructuralError(citation.pmid, "missing Journal title")

    optional = {
        field: resolve_path(citation, path) for field, path in OPTIONAL_PATHS.items()
    }

    try:
        return FlatRow(
            pmid=citation.pmid,
            created_on=_iso(citation.created_on),
            completed_on=_iso(citation.completed_on),
            journal_title=journal_title,
            article_title=citation.article.title,
            **optional,
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(loc) for loc in error["loc"])
        raise StructuralError(citation.pmid, f"invalid {field}: {error['msg']}") from e
