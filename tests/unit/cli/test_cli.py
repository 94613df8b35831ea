"""Unit tests for the click CLI."""

import pytest
from click.testing import CliRunner
from sqlalchemy import create_engine, text

from medline_loader.cli.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'citations.db'}"


def _pmids(database_url) -> list[int]:
    engine = create_engine(database_url)
    with engine.connect() as conn:
        rows = conn.execute(text("SELECT pmid FROM citations ORDER BY pmid")).fetchall()
    engine.dispose()
    return [row[0] for row in rows]


def test_init_db(runner, database_url):
    result = runner.invoke(main, ["init-db", "--database-url", database_url])
    assert result.exit_code == 0, result.output
    assert "Tables ready" in result.output
    assert _pmids(database_url) == []


def test_load_prints_progress_and_failures(
    runner, tmp_path, database_url, make_document, minimal_citation
):
    path = tmp_path / "medline.xml"
    path.write_bytes(
        make_document(
            minimal_citation(pmid="1"),
            "<MedlineCitation><PMID>2</PMID></MedlineCitation>",
            minimal_citation(pmid="3"),
        )
    )

    result = runner.invoke(
        main, ["load", str(path), "--database-url", database_url, "--create-tables"]
    )

    assert result.exit_code == 0, result.output
    # A dot per stored row, a line per failure, then the summary.
    assert ".\n2: missing Article\n.\n2 loaded, 1 failed" in result.output
    assert _pmids(database_url) == [1, 3]


def test_load_malformed_file_exits_non_zero(
    runner, tmp_path, database_url, make_document, minimal_citation
):
    path = tmp_path / "broken.xml"
    data = make_document(minimal_citation(pmid="1"))
    path.write_bytes(data[: data.rindex(b"</MedlineCitationSet>")])
    runner.invoke(main, ["init-db", "--database-url", database_url])

    result = runner.invoke(main, ["load", str(path), "--database-url", database_url])

    assert result.exit_code == 1
    assert "Nothing loaded" in result.output
    assert _pmids(database_url) == []


def test_load_missing_file(runner, tmp_path):
    result = runner.invoke(main, ["load", str(tmp_path / "nope.xml")])
    assert result.exit_code == 2
