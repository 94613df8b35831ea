"""Pytest configuration and fixtures."""

from typing import Callable

import pytest
from sqlalchemy.orm import Session

from medline_loader.db.session import create_tables, make_engine

# Every optional element sits on its own line so tests can drop one at a time.
FULL_CITATION = """\
<MedlineCitation Owner="NLM" Status="MEDLINE">
<PMID Version="1">10540283</PMID>
<DateCreated><Year>1999</Year><Month>12</Month><Day>17</Day></DateCreated>
<DateCompleted><Year>2000</Year><Month>02</Month><Day>29</Day></DateCompleted>
<Article PubModel="Print">
<Journal>
<ISSN IssnType="Print">0950-382X</ISSN>
<JournalIssue CitedMedium="Print">
<Volume>34</Volume>
<Issue>1</Issue>
<PubDate><MedlineDate>1999 Oct-Nov</MedlineDate></PubDate>
</JournalIssue>
<Title>Molecular microbiology</Title>
<ISOAbbreviation>Mol. Microbiol.</ISOAbbreviation>
</Journal>
<ArticleTitle>A <i>lux</i> operon in marine bacteria.</ArticleTitle>
<Pagination><MedlinePgn>1-12</MedlinePgn></Pagination>
<Abstract>
<AbstractText Label="OBJECTIVE" NlmCategory="OBJECTIVE">To find the operon.</AbstractText>
<AbstractText Label="METHODS" NlmCategory="METHODS">We sequenced it.</AbstractText>
<AbstractText Label="RESULTS" NlmCategory="RESULTS">It was found.</AbstractText>
<AbstractText Label="CONCLUSIONS" NlmCategory="CONCLUSIONS">Operons exist.</AbstractText>
<AbstractText>Unlabeled summary.</AbstractText>
</Abstract>
<AuthorList CompleteYN="Y"><Author><LastName>Smith</LastName></Author></AuthorList>
</Article>
<CommentsCorrectionsList>
<CommentsCorrections RefType="CommentIn"><PMID Version="1">99999999</PMID></CommentsCorrections>
</CommentsCorrectionsList>
</MedlineCitation>
"""

MINIMAL_CITATION = """\
<MedlineCitation>
<PMID>{pmid}</PMID>
<Article><Journal><Title>{journal}</Title></Journal><ArticleTitle>{title}</ArticleTitle></Article>
</MedlineCitation>
"""


@pytest.fixture
def full_citation() -> str:
    """A MedlineCitation carrying every field the loader maps."""
    return FULL_CITATION


@pytest.fixture
def minimal_citation() -> Callable[..., str]:
    """Build a citation holding only PMID, journal title and article title."""

    def _build(pmid="1", journal="J Test", title="Title") -> str:
        return MINIMAL_CITATION.format(pmid=pmid, journal=journal, title=title)

    return _build


@pytest.fixture
def make_document() -> Callable[..., bytes]:
    """Wrap citation snippets in a root element and encode them."""

    def _build(*citations: str, root: str = "MedlineCitationSet") -> bytes:
        body = "".join(citations)
        return f'<?xml version="1.0" encoding="UTF-8"?>\n<{root}>\n{body}</{root}>\n'.encode(
            "utf-8"
        )

    return _build


@pytest.fixture
def engine():
    """In-memory SQLite engine with the citations table created."""
    eng = make_engine("sqlite://", echo=False)
    create_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db_session(engine):
    session = Session(engine, expire_on_commit=False)
    yield session
    session.close()
