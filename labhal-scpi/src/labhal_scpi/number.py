"""SCPI number parsing and formatting utilities.

Handles NR1 (integer), NR2 (fixed-point), and NR3 (scientific notation)
numeric formats as well as the special values defined by SCPI (NAN, INF,
NINF, MIN, MAX, DEF). Quoted string data is handled by
:func:`format_string` and :func:`parse_string`.

Parsers raise :class:`~labhal_core.errors.EmptyReply` for blank input and
:class:`~labhal_core.errors.FieldParseError` for anything else they cannot
read. Both are ``ValueError`` subclasses. The optional ``index`` argument
names the position of the field inside a multi-field reply.
"""

from __future__ import annotations

import math
import re
from enum import Enum

from labhal_core.errors import EmptyReply, FieldParseError


class ScpiSpecial(Enum):
    """SCPI special parameter values."""

    MIN = "MIN"
    MAX = "MAX"
    DEF = "DEF"
    NAN = "NAN"
    INF = "INF"
    NINF = "NINF"


_SPECIAL_FLOAT_MAP: dict[str, float] = {
    "NAN": float("nan"),
    "INF": float("inf"),
    "NINF": float("-inf"),
    "-INF": float("-inf"),
}

_SPECIAL_KEYWORDS: dict[str, ScpiSpecial] = {
    "MIN": ScpiSpecial.MIN,
    "MINIMUM": ScpiSpecial.MIN,
    "MAX": ScpiSpecial.MAX,
    "MAXIMUM": ScpiSpecial.MAX,
    "DEF": ScpiSpecial.DEF,
    "DEFAULT": ScpiSpecial.DEF,
}

# NR1 integers and NR2/NR3 decimals. Digit separators and words are rejected.
_NR1_RE = re.compile(r"[+-]?[0-9]+")
_NRF_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_TRUE_TOKENS = frozenset({"1", "ON", "YES"})
_FALSE_TOKENS = frozenset({"0", "OFF", "NO"})


def _token(text: str) -> str:
    token = text.strip()
    if not token:
        raise EmptyReply()
    return token


def parse_number(text: str, *, index: int = 0) -> float:
    """Parse a SCPI numeric value into a float.

    Accepts NR1 (``"42"``), NR2 (``"1.23"``), NR3 (``"1.23E+4"``), and the
    special tokens ``NAN``, ``INF``, ``NINF``, and ``-INF``.

    Args:
        text: The raw text (leading/trailing whitespace is stripped).
        index: Field position reported on failure.

    Returns:
        The parsed float value.

    Raises:
        EmptyReply: If *text* is blank.
        FieldParseError: If *text* cannot be parsed as a SCPI number.
    """
    token = _token(text).upper()
    special = _SPECIAL_FLOAT_MAP.get(token)
    if special is not None:
        return special
    if _NRF_RE.fullmatch(token) is None:
        raise FieldParseError(index, text, "number")
    return float(token)


def parse_numbers(text: str) -> tuple[float, ...]:
    """Parse a comma-separated list of SCPI numbers.

    Args:
        text: Comma-separated numeric values (e.g. ``"1.0,2.0,3.0"``).

    Returns:
        A tuple of parsed float values.

    Raises:
        EmptyReply: If *text* is blank.
        FieldParseError: If any element cannot be parsed.
    """
    _token(text)
    return tuple(parse_number(part, index=i) for i, part in enumerate(text.split(",")))


def parse_int(text: str, *, allow_float: bool = False, index: int = 0) -> int:
    """Parse a SCPI NR1 (integer) value.

    Some instruments report counts in NR2/NR3 form (``"1.200000E+03"``).
    With *allow_float* such values are accepted as long as they are integral.

    Args:
        text: The raw text.
        allow_float: Accept float-styled integers.
        index: Field position reported on failure.

    Returns:
        The parsed integer.

    Raises:
        EmptyReply: If *text* is blank.
        FieldParseError: If *text* is not a valid integer.
    """
    token = _token(text)
    if _NR1_RE.fullmatch(token) is not None:
        return int(token)
    if not allow_float or _NRF_RE.fullmatch(token) is None:
        raise FieldParseError(index, text, "int")
    value = float(token)
    if not math.isfinite(value) or not value.is_integer():
        raise FieldParseError(index, text, "int")
    return int(value)


def parse_bool(text: str, *, index: int = 0) -> bool:
    """Parse a SCPI boolean value.

    Accepts ``"1"`` / ``"0"``, ``"ON"`` / ``"OFF"`` and ``"YES"`` / ``"NO"``
    (case-insensitive). Alarm queries on Rigol supplies answer ``YES``/``NO``.

    Raises:
        EmptyReply: If *text* is blank.
        FieldParseError: If *text* is not a recognized boolean token.
    """
    token = _token(text).upper()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise FieldParseError(index, text, "bool")


def parse_special(text: str, *, index: int = 0) -> float | ScpiSpecial:
    """Parse a SCPI value that may be numeric or a special keyword.

    Returns a :class:`ScpiSpecial` member for ``MIN``, ``MAX``, and ``DEF``
    (long forms included). Numeric values (including ``NAN``, ``INF``,
    ``NINF``) are returned as ``float``.

    Raises:
        EmptyReply: If *text* is blank.
        FieldParseError: If *text* cannot be parsed.
    """
    keyword = _SPECIAL_KEYWORDS.get(_token(text).upper())
    if keyword is not None:
        return keyword
    return parse_number(text, index=index)


def format_number(value: float) -> str:
    """Format a float for use in a SCPI command.

    ``nan``, ``inf``, and ``-inf`` are rendered as ``NAN``, ``INF``, and
    ``NINF`` respectively. Finite values use Python's default ``str()``
    representation.
    """
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "NINF" if value < 0 else "INF"
    return str(value)


def format_fixed(value: float, decimals: int) -> str:
    """Format a float in fixed-point notation with *decimals* digits.

    Several instruments only accept fixed notation (``"5.0000"``), never an
    exponent.

    Example:
        >>> format_fixed(5, 4)
        '5.0000'
    """
    if not math.isfinite(value):
        return format_number(value)
    return f"{value:.{decimals}f}"


def format_bool(value: bool) -> str:
    """Format a boolean as ``"1"`` or ``"0"``."""
    return "1" if value else "0"


def format_on_off(value: bool) -> str:
    """Format a boolean as ``"ON"`` or ``"OFF"``."""
    return "ON" if value else "OFF"


def format_level(value: float | Enum, decimals: int) -> str:
    """Format a numeric level or a keyword token such as ``MIN``.

    Enumeration members are sent as their value, which must be the protocol
    token. Numbers are sent in fixed notation.

    Example:
        >>> format_level(ScpiSpecial.MAX, 4)
        'MAX'
        >>> format_level(1.5, 4)
        '1.5000'
    """
    if isinstance(value, Enum):
        return str(value.value)
    return format_fixed(value, decimals)


def format_string(text: str) -> str:
    """Quote *text* as SCPI string data, doubling embedded quotes.

    Example:
        >>> format_string('say "hi" twice')
        '"say ""hi"" twice"'
    """
    return '"' + text.replace('"', '""') + '"'


def parse_string(text: str) -> str:
    """Unquote a SCPI string reply.

    Single or double quoted replies lose their quotes and doubled quotes are
    collapsed. Unquoted replies are returned stripped.
    """
    token = text.strip()
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"'":
        quote = token[0]
        return token[1:-1].replace(quote * 2, quote)
    return token
