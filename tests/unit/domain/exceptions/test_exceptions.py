"""Tests for domain/exceptions.py.

Tests:
- Hierarchy: every error is a DeepEqError
- Protocol violations are AssertionErrors (fatal programming errors)
- Messages and attributes
"""

import pytest

from deepeq.domain.exceptions import (
    DeepEqError,
    DeepEqualityError,
    DuplicateVerdictError,
    EmptyPathError,
    EmptyPathPopError,
    InvalidVerdictError,
    NonLeafReportError,
    ProtocolViolationError,
)


class TestHierarchy:
    """Tests for exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            EmptyPathPopError,
            EmptyPathError,
            DuplicateVerdictError,
            NonLeafReportError,
        ],
    )
    def test_protocol_violations(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, ProtocolViolationError)
        assert issubclass(exc_type, AssertionError)
        assert issubclass(exc_type, DeepEqError)

    def test_invalid_verdict_is_type_error(self) -> None:
        assert issubclass(InvalidVerdictError, TypeError)
        assert issubclass(InvalidVerdictError, DeepEqError)
        assert not issubclass(InvalidVerdictError, ProtocolViolationError)

    def test_deep_equality_error_is_assertion_error(self) -> None:
        assert issubclass(DeepEqualityError, AssertionError)
        assert not issubclass(DeepEqualityError, ProtocolViolationError)


class TestMessages:
    """Tests for messages and attributes."""

    def test_empty_path_pop(self) -> None:
        assert "empty path" in str(EmptyPathPopError())

    def test_empty_path_keeps_operation(self) -> None:
        err = EmptyPathError("report()")
        assert err.operation == "report()"
        assert "report()" in str(err)

    def test_duplicate_verdict_keeps_depth(self) -> None:
        err = DuplicateVerdictError(3)
        assert err.depth == 3
        assert "depth 3" in str(err)

    def test_non_leaf_keeps_depth(self) -> None:
        err = NonLeafReportError(2)
        assert err.depth == 2
        assert "not a leaf" in str(err)

    def test_invalid_verdict_names_type(self) -> None:
        err = InvalidVerdictError(str)
        assert err.got is str
        assert str(err) == "verdict must be Verdict, got str"


class TestDeepEqualityError:
    """Tests for DeepEqualityError."""

    def test_default_header(self) -> None:
        err = DeepEqualityError("{int}:\n\t-: 1\n\t+: 2\n")
        assert str(err).startswith("values are not deeply equal:\n{int}:")
        assert err.report == "{int}:\n\t-: 1\n\t+: 2\n"

    def test_custom_header(self) -> None:
        err = DeepEqualityError("report", msg="orders differ")
        assert str(err) == "orders differ:\nreport"

    def test_empty_report_raises(self) -> None:
        with pytest.raises(ValueError, match="non-empty report"):
            DeepEqualityError("")
