"""Tests for positional reply parsing."""

from __future__ import annotations

from enum import Enum, IntEnum

import pytest

from labhal_core.errors import EmptyReply, FieldCountMismatch, FieldParseError, UnknownEnumValue
from labhal_scpi.reply import (
    ReplyFormat,
    bool_field,
    enum_field,
    float_field,
    int_field,
    parse_enum_field,
    parse_token,
    split_fields,
    token_field,
)


class _Ordinal(IntEnum):
    ZERO = 0
    ONE = 1
    TWO = 2


class _Token(Enum):
    CURRENT = "CURR"
    VOLTAGE = "VOLT"


_ALIASES = {"CC": _Token.CURRENT, "CV": _Token.VOLTAGE}


# ---------------------------------------------------------------------------
# split_fields
# ---------------------------------------------------------------------------


class TestSplitFields:
    """Tests for split_fields."""

    def test_strips_fields(self) -> None:
        assert split_fields(" a , b,c ") == ["a", "b", "c"]

    def test_expected_count(self) -> None:
        assert split_fields("1,2", 2) == ["1", "2"]

    def test_too_few(self) -> None:
        with pytest.raises(FieldCountMismatch) as exc_info:
            split_fields("1,2", 3)
        assert (exc_info.value.expected, exc_info.value.actual) == (3, 2)

    def test_too_many_not_ignored(self) -> None:
        with pytest.raises(FieldCountMismatch) as exc_info:
            split_fields("1,2,3,4", 3)
        assert exc_info.value.actual == 4

    def test_empty_before_split(self) -> None:
        with pytest.raises(EmptyReply):
            split_fields("", 3)

    def test_custom_delimiter(self) -> None:
        assert split_fields("a;b", delimiter=";") == ["a", "b"]


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class TestParseEnumField:
    """Tests for ordinal enumeration fields."""

    def test_member(self) -> None:
        assert parse_enum_field("2", 0, _Ordinal) is _Ordinal.TWO

    def test_out_of_range(self) -> None:
        with pytest.raises(UnknownEnumValue) as exc_info:
            parse_enum_field("7", 1, _Ordinal)
        assert exc_info.value.field == "_Ordinal"
        assert exc_info.value.raw == "7"
        assert exc_info.value.index == 1

    def test_not_numeric(self) -> None:
        with pytest.raises(FieldParseError):
            parse_enum_field("TWO", 0, _Ordinal)


class TestParseToken:
    """Tests for protocol-token enumeration parsing."""

    def test_value_match(self) -> None:
        assert parse_token("CURR", _Token) is _Token.CURRENT

    def test_case_and_quotes(self) -> None:
        assert parse_token(' "volt" ', _Token) is _Token.VOLTAGE

    def test_alias(self) -> None:
        assert parse_token("CC", _Token, aliases=_ALIASES) is _Token.CURRENT

    def test_display_name_is_not_a_token(self) -> None:
        with pytest.raises(UnknownEnumValue):
            parse_token("CURRENT", _Token)

    def test_empty(self) -> None:
        with pytest.raises(EmptyReply):
            parse_token("", _Token)


# ---------------------------------------------------------------------------
# ReplyFormat
# ---------------------------------------------------------------------------


_FORMAT = ReplyFormat(
    enum_field("mode", _Ordinal),
    int_field("count", allow_float=True),
    float_field("level"),
    bool_field("enabled"),
    token_field("function", _Token, _ALIASES),
)


class TestReplyFormat:
    """Tests for ReplyFormat.parse."""

    def test_parse(self) -> None:
        assert _FORMAT.parse("1,1.2E+03,-4.8E-06,ON,CV") == {
            "mode": _Ordinal.ONE,
            "count": 1200,
            "level": -4.8e-06,
            "enabled": True,
            "function": _Token.VOLTAGE,
        }

    def test_deterministic(self) -> None:
        reply = "0,3,1.5,0,CURR"
        assert _FORMAT.parse(reply) == _FORMAT.parse(reply)

    def test_names_and_len(self) -> None:
        assert _FORMAT.names == ("mode", "count", "level", "enabled", "function")
        assert len(_FORMAT) == 5

    def test_count_mismatch(self) -> None:
        with pytest.raises(FieldCountMismatch) as exc_info:
            _FORMAT.parse("1,2,3,4")
        assert (exc_info.value.expected, exc_info.value.actual) == (5, 4)

    def test_empty_field(self) -> None:
        with pytest.raises(FieldParseError) as exc_info:
            _FORMAT.parse("1,,3,0,CURR")
        assert exc_info.value.index == 1

    def test_bad_float_reports_index(self) -> None:
        with pytest.raises(FieldParseError) as exc_info:
            _FORMAT.parse("1,2,abc,0,CURR")
        assert exc_info.value.index == 2
        assert exc_info.value.raw == "abc"

    def test_unknown_token_reports_index(self) -> None:
        with pytest.raises(UnknownEnumValue) as exc_info:
            _FORMAT.parse("1,2,3,0,CP")
        assert exc_info.value.index == 4

    def test_requires_fields(self) -> None:
        with pytest.raises(ValueError):
            ReplyFormat()
