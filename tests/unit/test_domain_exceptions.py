"""Tests for domain exceptions (error_code, message, details)."""

from family_circles.domain.exceptions import (
    FamilyCirclesException,
    MalformedRecordException,
    MissingSearchTermException,
    RecordAccessDeniedException,
    RecordNotFoundException,
    TreeNotFoundException,
    UnsupportedIdentifierException,
)


def test_base_exception_default_error_code() -> None:
    """Base exception uses class name as error_code when not provided."""
    exc = FamilyCirclesException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "FamilyCirclesException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_base_exception_custom_error_code_and_details() -> None:
    exc = FamilyCirclesException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}


def test_unsupported_identifier() -> None:
    exc = UnsupportedIdentifierException("X1")
    assert exc.message == "id 'X1' not supported"
    assert exc.error_code == "UNSUPPORTED_IDENTIFIER"
    assert exc.details == {"id": "X1"}


def test_missing_search_term() -> None:
    exc = MissingSearchTermException()
    assert exc.message == "must specify search term"
    assert exc.error_code == "MISSING_SEARCH_TERM"


def test_not_found_exceptions() -> None:
    assert TreeNotFoundException("demo").error_code == "TREE_NOT_FOUND"
    exc = RecordNotFoundException("family", "F1")
    assert exc.message == "family 'F1' not found"
    assert exc.details == {"record_type": "family", "xref": "F1"}


def test_access_denied() -> None:
    exc = RecordAccessDeniedException("individual", "I1")
    assert exc.error_code == "ACCESS_DENIED"
    assert "I1" in exc.message


def test_malformed_record() -> None:
    exc = MalformedRecordException("F3", "HUSB @I99@ does not exist")
    assert exc.error_code == "MALFORMED_RECORD"
    assert exc.message == "record 'F3' is malformed: HUSB @I99@ does not exist"
