"""Exception types for labhal-core.

This module defines the exception hierarchy used throughout labhal. All
labhal exceptions inherit from LabhalError, allowing consumers to catch all
library-specific errors with a single except clause.

Exception hierarchy:
    LabhalError (base)
    +-- ParseError: A reply could not be turned into a typed value
    |   +-- EmptyReply: The reply carried no payload
    |   +-- FieldCountMismatch: Wrong number of delimited fields
    |   +-- FieldParseError: A field could not be converted to its type
    |   +-- UnknownEnumValue: A field names no member of its enumeration
    +-- TransportError: Communication with the instrument failed

Parse errors also derive from :class:`ValueError` so that callers treating
malformed replies as bad values keep working.
"""

from __future__ import annotations


class LabhalError(Exception):
    """Base exception for all labhal errors.

    This is the root of the labhal exception hierarchy. Catch this to handle
    any library-specific error.
    """


class ParseError(LabhalError, ValueError):
    """Raised when an instrument reply cannot be parsed.

    Attributes:
        index: Zero-based index of the offending field, or None when the
            failure concerns the reply as a whole.
        raw: The raw text that failed to parse.
    """

    def __init__(self, message: str, *, index: int | None = None, raw: str = "") -> None:
        self.index = index
        self.raw = raw
        super().__init__(message)


class EmptyReply(ParseError):
    """Raised when a query returned no usable payload."""

    def __init__(self, what: str = "reply") -> None:
        super().__init__(f"Empty {what}", raw="")


class FieldCountMismatch(ParseError):
    """Raised when a reply has the wrong number of delimited fields.

    Attributes:
        expected: Number of fields the record shape requires.
        actual: Number of fields found in the reply.
    """

    def __init__(self, expected: int, actual: int, raw: str = "") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} fields, got {actual}: {raw!r}", raw=raw)


class FieldParseError(ParseError):
    """Raised when a field's text cannot be converted to its target type.

    Attributes:
        target: Name of the type the field was being converted to.
    """

    def __init__(self, index: int, raw: str, target: str) -> None:
        self.target = target
        super().__init__(
            f"Field {index}: cannot parse {raw!r} as {target}", index=index, raw=raw
        )


class UnknownEnumValue(ParseError):
    """Raised when a field names no member of its enumeration.

    Attributes:
        field: Name of the field (or enumeration) being parsed.
    """

    def __init__(self, field: str, raw: str, index: int | None = None) -> None:
        self.field = field
        super().__init__(f"Unknown {field} value: {raw!r}", index=index, raw=raw)


class TransportError(LabhalError):
    """Raised when communication with an instrument fails.

    Covers connection loss, timeouts, closed resources and errors reported by
    the instrument itself. The command layer never interprets or retries these.
    """
