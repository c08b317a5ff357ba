"""Core library for labhal instrument control.

This package provides the foundational types and error hierarchy shared by
every labhal package. It has no external dependencies so that it can serve as
the base layer for the SCPI transport and the vendor drivers.

Key components:
    - Types: Instrument identity and type, bit-flag status registers.
    - Errors: Parse errors for malformed replies and transport errors.

Example:
    >>> from labhal_core import BitRegister
    >>> class Status(BitRegister):
    ...     READY = 1
    ...     FAULT = 2
    >>> sorted(Status(3).decompose())
    ['FAULT', 'READY']
"""

from labhal_core.errors import (
    EmptyReply,
    FieldCountMismatch,
    FieldParseError,
    LabhalError,
    ParseError,
    TransportError,
    UnknownEnumValue,
)
from labhal_core.types import BitRegister, InstrumentIdentity, InstrumentType, format_plain

__all__ = [
    # Errors
    "EmptyReply",
    "FieldCountMismatch",
    "FieldParseError",
    "LabhalError",
    "ParseError",
    "TransportError",
    "UnknownEnumValue",
    # Types
    "BitRegister",
    "InstrumentIdentity",
    "InstrumentType",
    "format_plain",
]
