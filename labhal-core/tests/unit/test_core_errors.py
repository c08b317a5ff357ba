"""Tests for the labhal error hierarchy."""

from __future__ import annotations

import pytest

from labhal_core.errors import (
    EmptyReply,
    FieldCountMismatch,
    FieldParseError,
    LabhalError,
    ParseError,
    TransportError,
    UnknownEnumValue,
)


class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "error",
        [
            EmptyReply(),
            FieldCountMismatch(10, 9),
            FieldParseError(2, "abc", "float"),
            UnknownEnumValue("mode", "7"),
        ],
    )
    def test_parse_errors(self, error: ParseError) -> None:
        assert isinstance(error, ParseError)
        assert isinstance(error, LabhalError)
        assert isinstance(error, ValueError)

    def test_transport_error_is_not_parse_error(self) -> None:
        error = TransportError("timeout")
        assert isinstance(error, LabhalError)
        assert not isinstance(error, ParseError)


class TestAttributes:
    """Tests for the data carried by each error."""

    def test_field_count_mismatch(self) -> None:
        error = FieldCountMismatch(expected=10, actual=9, raw="1,2")
        assert error.expected == 10
        assert error.actual == 9
        assert error.raw == "1,2"
        assert "Expected 10 fields, got 9" in str(error)

    def test_field_parse_error(self) -> None:
        error = FieldParseError(3, "1.2.3", "int")
        assert error.index == 3
        assert error.raw == "1.2.3"
        assert error.target == "int"

    def test_unknown_enum_value(self) -> None:
        error = UnknownEnumValue("WaveformMode", "9", index=1)
        assert error.field == "WaveformMode"
        assert error.raw == "9"
        assert error.index == 1

    def test_empty_reply(self) -> None:
        error = EmptyReply()
        assert error.index is None
        assert error.raw == ""
        assert str(error) == "Empty reply"
