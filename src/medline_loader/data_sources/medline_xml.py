"""
Streaming reader for MEDLINE citation XML.

Baseline files hold ~30,000 citations and run to well over 100MB, so the
document is read as a stream of start/end events and never as a tree. A
stack of frames mirrors the citation's nesting; each completed
MedlineCitation is yielded as soon as its closing tag is seen, after which
the parsed elements are dropped.

Two layouts are accepted:

    <MedlineCitationSet><MedlineCitation>...</MedlineCitation>...</MedlineCitationSet>
    <PubmedArticleSet><PubmedArticle><MedlineCitation>...</MedlineCitation>
        ...</PubmedArticle>...</PubmedArticleSet>
"""

from __future__ import annotations

import gzip
import logging
import xml.etree.ElementTree as ET
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator

from pydantic import BaseModel

from medline_loader.data_sources.element_router import (
    EnterChild,
    NodeKind,
    PassThrough,
    SetScalar,
    route,
)
from medline_loader.errors import FatalParseError
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

logger = logging.getLogger(__name__)

_MODELS: dict[NodeKind, type[BaseModel]] = {
    NodeKind.CITATION: Citation,
    NodeKind.DATE: CitationDate,
    NodeKind.ARTICLE: Article,
    NodeKind.JOURNAL: Journal,
    NodeKind.JOURNAL_ISSUE: JournalIssue,
    NodeKind.PUBLICATION_DATE: PublicationDate,
    NodeKind.PAGINATION: Pagination,
    NodeKind.ABSTRACT: Abstract,
}


class _Frame:
    """An element being built. ``field`` is where it lands on its parent."""

    __slots__ = ("kind", "field", "values", "passthrough")

    def __init__(
        self,
        kind: NodeKind,
        field: str | None = None,
        values: dict[str, Any] | None = None,
        passthrough: bool = False,
    ):
        self.kind = kind
        self.field = field
        self.values = values if values is not None else {}
        self.passthrough = passthrough


def _element_text(elem: ET.Element) -> str:
    # AbstractText and ArticleTitle may hold inline markup (<i>, <sup>, ...).
    return "".join(elem.itertext()).strip()


class MedlineXmlReader:
    """Iterate over the citations in a MEDLINE XML byte stream.

    The reader is single-pass: iterating a second time needs a freshly
    opened stream.
    """

    def __init__(self, stream: IO[bytes], name: str = "<stream>") -> None:
        self.stream = stream
        self.name = name

    def __iter__(self) -> Iterator[Citation]:
        stack: list[_Frame] = []
        root: ET.Element | None = None
        count = 0

        try:
            for event, elem in ET.iterparse(self.stream, events=("start", "end")):
                if event == "start":
                    if root is None:
                        root = elem
                        stack.append(_Frame(NodeKind.CITATION_SET))
                    else:
                        self._push(stack, elem)
                    continue

                if elem is root:
                    continue

                citation = self._pop(stack, elem)
                if citation is not None:
                    count += 1
                    yield citation
                if len(stack) == 1:
                    # A top-level record has closed; let go of its elements.
                    root.clear()
        except ET.ParseError as e:
            line, column = e.position
            raise FatalParseError(
                self.name, f"Failed to parse XML: {e}", line, column
            ) from e
        except (EOFError, zlib.error, gzip.BadGzipFile) as e:
            raise FatalParseError(self.name, f"Failed to decompress: {e}") from e

        logger.debug("Read %d citations from %s", count, self.name)

    @staticmethod
    def _push(stack: list[_Frame], elem: ET.Element) -> None:
        top = stack[-1]
        action = route(top.kind, elem.tag, elem.attrib)

        if isinstance(action, EnterChild):
            stack.append(_Frame(action.kind, action.field))
        elif isinstance(action, SetScalar):
            stack.append(_Frame(NodeKind.SCALAR, action.field))
        elif isinstance(action, PassThrough):
            stack.append(_Frame(top.kind, values=top.values, passthrough=True))
        else:
            stack.append(_Frame(NodeKind.IGNORED))

    @staticmethod
    def _pop(stack: list[_Frame], elem: ET.Element) -> Citation | None:
        """Close the top frame. Returns the citation when one is complete."""
        frame = stack.pop()
        parent = stack[-1]

        if frame.kind is NodeKind.IGNORED or frame.passthrough:
            return None

        if frame.kind is NodeKind.SCALAR:
            text = _element_text(elem)
            if text:
                parent.values.setdefault(frame.field, text)
            return None

        node = _MODELS[frame.kind](**frame.values)
        if frame.kind is NodeKind.CITATION:
            return node
        parent.values.setdefault(frame.field, node)
        return None


@contextmanager
def open_document(path: Path) -> Iterator[IO[bytes]]:
    """Open a citation file for binary reading. ``.gz`` files are decompressed."""
    path = Path(path)
    if path.suffix == ".gz":
        handle: IO[bytes] = gzip.open(path, "rb")
    else:
        handle = path.open("rb")
    try:
        yield handle
    finally:
        handle.close()


def iter_citations(path: Path) -> Iterator[Citation]:
    """Yield the citations in the file at ``path`` in document order.

    Raises:
        FatalParseError: the document is malformed. Citations already yielded
            came from the same broken document and should be discarded.
    """
    with open_document(path) as stream:
        yield from MedlineXmlReader(stream, name=str(path))


def read_citation_set(stream: IO[bytes], name: str = "<stream>") -> CitationSet:
    """Read every citation into memory. Fine for tests and small documents."""
    return CitationSet(citations=list(MedlineXmlReader(stream, name=name)))
