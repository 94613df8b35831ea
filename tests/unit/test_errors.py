"""Unit tests for the loader's exception types."""

import pytest

from medline_loader.errors import (
    FatalParseError,
    LoaderError,
    RecordError,
    SinkError,
    StructuralError,
)


def test_fatal_parse_error_keeps_position():
    err = FatalParseError(
        "a.xml", "Failed to parse XML: no element found: line 12, column 3", 12, 3
    )
    assert str(err) == "[a.xml] Failed to parse XML: no element found: line 12, column 3"
    assert (err.source, err.line, err.column) == ("a.xml", 12, 3)


def test_fatal_parse_error_without_position():
    assert str(FatalParseError("a.xml.gz", "Failed to decompress")) == (
        "[a.xml.gz] Failed to decompress"
    )


@pytest.mark.parametrize("cls, kind", [(StructuralError, "structural"), (SinkError, "sink")])
def test_record_errors_carry_pmid_and_reason(cls, kind):
    err = cls(123, "boom")
    assert isinstance(err, RecordError)
    assert isinstance(err, LoaderError)
    assert err.pmid == "123"
    assert err.reason == "boom"
    assert err.kind == kind
    assert str(err) == "123: boom"


def test_record_error_without_pmid_is_unknown():
    assert StructuralError(None, "missing or non-numeric PMID").pmid == "unknown"
