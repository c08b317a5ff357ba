"""Positional parsing of delimited SCPI replies.

A reply to one query is a single line of comma-separated fields. Record
shaped replies are parsed by position into typed values with a
:class:`ReplyFormat`::

    PREAMBLE = ReplyFormat(
        enum_field("format", WaveformFormat),
        int_field("points", allow_float=True),
        float_field("x_increment"),
    )
    values = PREAMBLE.parse("2,1200,8.0E-09")

Parsing is strict. An empty reply raises :class:`EmptyReply` before any
splitting, a reply with the wrong number of fields raises
:class:`FieldCountMismatch`, and a field that cannot be converted raises
:class:`FieldParseError` or :class:`UnknownEnumValue` carrying the field
index and the raw text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable, Mapping, TypeVar

from labhal_core.errors import EmptyReply, FieldCountMismatch, FieldParseError, UnknownEnumValue

from labhal_scpi.number import parse_bool, parse_int, parse_number

E = TypeVar("E", bound=Enum)
IE = TypeVar("IE", bound=IntEnum)


def split_fields(reply: str, expected: int | None = None, *, delimiter: str = ",") -> list[str]:
    """Split a reply into stripped fields.

    Args:
        reply: The reply payload, without its line terminator.
        expected: Required number of fields, or None to accept any count.
        delimiter: Field delimiter.

    Returns:
        The fields with surrounding whitespace removed.

    Raises:
        EmptyReply: If *reply* is blank.
        FieldCountMismatch: If *expected* is given and the count differs.
    """
    text = reply.strip()
    if not text:
        raise EmptyReply()
    fields = [part.strip() for part in text.split(delimiter)]
    if expected is not None and len(fields) != expected:
        raise FieldCountMismatch(expected, len(fields), reply)
    return fields


def parse_int_field(text: str, index: int, *, allow_float: bool = False) -> int:
    """Parse an integer field, optionally accepting float-styled integers."""
    if not text.strip():
        raise FieldParseError(index, text, "int")
    return parse_int(text, allow_float=allow_float, index=index)


def parse_float_field(text: str, index: int) -> float:
    """Parse a floating-point field (scientific notation accepted)."""
    if not text.strip():
        raise FieldParseError(index, text, "float")
    return parse_number(text, index=index)


def parse_bool_field(text: str, index: int) -> bool:
    """Parse a ``1``/``0``/``ON``/``OFF`` field."""
    if not text.strip():
        raise FieldParseError(index, text, "bool")
    return parse_bool(text, index=index)


def parse_enum_field(text: str, index: int, enum_cls: type[IE]) -> IE:
    """Parse an integer ordinal field into an :class:`IntEnum` member.

    Raises:
        FieldParseError: If the field is not an integer.
        UnknownEnumValue: If no member has that ordinal.
    """
    ordinal = parse_int_field(text, index)
    try:
        return enum_cls(ordinal)
    except ValueError:
        raise UnknownEnumValue(enum_cls.__name__, text, index=index) from None


def parse_token(
    text: str,
    enum_cls: type[E],
    *,
    aliases: Mapping[str, E] | None = None,
    index: int | None = None,
) -> E:
    """Map a protocol token to the enumeration member whose value it is.

    Matching is case-insensitive and ignores surrounding quotes. *aliases*
    covers replies that spell a member differently from the token used in
    commands (``CC`` for ``SOUR:FUNC CURR``).

    Raises:
        EmptyReply: If *text* is blank.
        UnknownEnumValue: If the token names no member.
    """
    token = text.strip().strip('"').upper()
    if not token:
        raise EmptyReply()
    if aliases is not None and token in aliases:
        return aliases[token]
    for member in enum_cls:
        if str(member.value).upper() == token:
            return member
    raise UnknownEnumValue(enum_cls.__name__, text, index=index)


# ---------------------------------------------------------------------------
# Declarative record formats
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ReplyField:
    """One positional field of a record-shaped reply.

    Attributes:
        name: Key under which the parsed value is returned.
        convert: Callable taking the field text and its index.
    """

    name: str
    convert: Callable[[str, int], Any]


def int_field(name: str, *, allow_float: bool = False) -> ReplyField:
    """Integer field; *allow_float* accepts ``"1.2E+03"`` style integers."""
    return ReplyField(
        name, lambda text, index: parse_int_field(text, index, allow_float=allow_float)
    )


def float_field(name: str) -> ReplyField:
    """Floating-point field."""
    return ReplyField(name, parse_float_field)


def bool_field(name: str) -> ReplyField:
    """Boolean field."""
    return ReplyField(name, parse_bool_field)


def enum_field(name: str, enum_cls: type[IntEnum]) -> ReplyField:
    """Integer-ordinal enumeration field."""
    return ReplyField(name, lambda text, index: parse_enum_field(text, index, enum_cls))


def token_field(
    name: str, enum_cls: type[Enum], aliases: Mapping[str, Any] | None = None
) -> ReplyField:
    """Protocol-token enumeration field."""
    return ReplyField(
        name, lambda text, index: parse_token(text, enum_cls, aliases=aliases, index=index)
    )


class ReplyFormat:
    """Fixed sequence of fields making up a record-shaped reply.

    Args:
        *fields: The fields in protocol order.
        delimiter: Field delimiter.
    """

    def __init__(self, *fields: ReplyField, delimiter: str = ",") -> None:
        if not fields:
            raise ValueError("A reply format needs at least one field")
        self._fields = fields
        self._delimiter = delimiter

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def names(self) -> tuple[str, ...]:
        """Field names in protocol order."""
        return tuple(f.name for f in self._fields)

    def parse(self, reply: str) -> dict[str, Any]:
        """Parse *reply* into a mapping of field name to typed value.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldCountMismatch: If the field count differs from this format.
            FieldParseError: If a field cannot be converted.
            UnknownEnumValue: If an enumerated field has no matching member.
        """
        raw_fields = split_fields(reply, len(self._fields), delimiter=self._delimiter)
        values: dict[str, Any] = {}
        for index, (field, text) in enumerate(zip(self._fields, raw_fields)):
            if not text:
                raise FieldParseError(index, text, field.name)
            values[field.name] = field.convert(text, index)
        return values
