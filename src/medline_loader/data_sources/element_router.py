"""
Element routing for the MEDLINE decoder.

``route`` maps (kind of the node being built, tag, attributes) to one action:

  EnterChild : the element is a nested entity; build it in a new frame
  SetScalar  : the element's text is a field of the current node
  PassThrough: a wrapper whose children belong to the current node
  Ignore     : skip the element and everything inside it

The lookup table is built once at import time. Tag names are matched exactly
as MEDLINE spells them.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, NamedTuple, Union

from medline_loader.constants import (
    ABSTRACT_LABEL_ATTR,
    ABSTRACT_LABEL_FIELDS,
    ABSTRACT_TEXT_TAG,
    ABSTRACT_UNLABELED_FIELD,
    CITATION_TAG,
    PUBMED_ARTICLE_TAG,
)


class NodeKind(Enum):
    """What the frame on top of the decoder's stack is building."""

    CITATION_SET = "citation_set"
    CITATION = "citation"
    DATE = "date"
    ARTICLE = "article"
    JOURNAL = "journal"
    JOURNAL_ISSUE = "journal_issue"
    PUBLICATION_DATE = "publication_date"
    PAGINATION = "pagination"
    ABSTRACT = "abstract"
    # Leaf frames: nothing below them is routed.
    SCALAR = "scalar"
    IGNORED = "ignored"


class EnterChild(NamedTuple):
    field: str
    kind: NodeKind


class SetScalar(NamedTuple):
    field: str


class SelectByAttribute(NamedTuple):
    """Same tag, different field depending on one attribute's value.

    A missing attribute, or a value not in ``field_map``, selects
    ``default_field``.
    """

    attribute: str
    field_map: Mapping[str, str]
    default_field: str

    def resolve(self, attrib: Mapping[str, str]) -> SetScalar:
        value = attrib.get(self.attribute)
        return SetScalar(self.field_map.get(value, self.default_field))


class PassThrough:
    __slots__ = ()

    def __repr__(self) -> str:
        return "PassThrough()"


class Ignore:
    __slots__ = ()

    def __repr__(self) -> str:
        return "Ignore()"


PASS_THROUGH = PassThrough()
IGNORE = Ignore()

Action = Union[EnterChild, SetScalar, PassThrough, Ignore]
RouteEntry = Union[EnterChild, SetScalar, SelectByAttribute, PassThrough]


_DATE_PARTS: dict[str, RouteEntry] = {
    "Year": SetScalar("year"),
    "Month": SetScalar("month"),
    "Day": SetScalar("day"),
}

ROUTES: dict[NodeKind, dict[str, RouteEntry]] = {
    NodeKind.CITATION_SET: {
        CITATION_TAG: EnterChild("citations", NodeKind.CITATION),
        PUBMED_ARTICLE_TAG: PASS_THROUGH,
    },
    NodeKind.CITATION: {
        "PMID": SetScalar("pmid"),
        "DateCreated": EnterChild("created_on", NodeKind.DATE),
        "DateCompleted": EnterChild("completed_on", NodeKind.DATE),
        "Article": EnterChild("article", NodeKind.ARTICLE),
    },
    NodeKind.DATE: _DATE_PARTS,
    NodeKind.ARTICLE: {
        "ArticleTitle": SetScalar("title"),
        "Journal": EnterChild("journal", NodeKind.JOURNAL),
        "Pagination": EnterChild("pagination", NodeKind.PAGINATION),
        "Abstract": EnterChild("abstract", NodeKind.ABSTRACT),
    },
    NodeKind.JOURNAL: {
        "Title": SetScalar("title"),
        "ISOAbbreviation": SetScalar("iso_abbreviation"),
        "JournalIssue": EnterChild("journal_issue", NodeKind.JOURNAL_ISSUE),
    },
    NodeKind.JOURNAL_ISSUE: {
        "Volume": SetScalar("volume"),
        "Issue": SetScalar("issue"),
        "PubDate": EnterChild("publication_date", NodeKind.PUBLICATION_DATE),
    },
    NodeKind.PUBLICATION_DATE: {
        "MedlineDate": SetScalar("medline_date"),
        **_DATE_PARTS,
    },
    NodeKind.PAGINATION: {
        "MedlinePgn": SetScalar("medline_pagination"),
    },
    NodeKind.ABSTRACT: {
        ABSTRACT_TEXT_TAG: SelectByAttribute(
            ABSTRACT_LABEL_ATTR, ABSTRACT_LABEL_FIELDS, ABSTRACT_UNLABELED_FIELD
        ),
    },
}


def route(kind: NodeKind, tag: str, attrib: Mapping[str, str]) -> Action:
    """Decide what to do with an opening tag seen while building ``kind``."""
    if kind in (NodeKind.SCALAR, NodeKind.IGNORED):
        return IGNORE
    entry = ROUTES.get(kind, {}).get(tag)
    if entry is None:
        return IGNORE
    if isinstance(entry, SelectByAttribute):
        return entry.resolve(attrib)
    return entry
