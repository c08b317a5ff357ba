"""SCPI protocol library for labhal instrument control.

This package provides the command/response marshalling layer shared by all
labhal instrument drivers:

- Transport abstraction for SCPI message passing
- PyVISA-backed transport for real instruments
- Connection with optional error queue checking and typed queries
- Number parsing and formatting utilities
- Positional reply parsers for record-shaped replies
- IEEE 488.2 common commands and the instrument facade base class

Typical usage::

    from labhal_scpi import CommonCommands, open_connection

    conn = open_connection("TCPIP::192.168.1.50::5555::SOCKET")
    identity = CommonCommands(conn).get_identity()
    print(f"Connected to {identity.manufacturer} {identity.model}")
    conn.close()
"""

from labhal_scpi.common import CommonCommands, EventStatus, StatusByte, parse_idn_response
from labhal_scpi.connection import ScpiConnection
from labhal_scpi.errors import ScpiCommandError, ScpiError, ScpiInstrumentError
from labhal_scpi.instrument import Instrument, open_connection
from labhal_scpi.number import (
    ScpiSpecial,
    format_bool,
    format_fixed,
    format_level,
    format_number,
    format_on_off,
    format_string,
    parse_bool,
    parse_int,
    parse_number,
    parse_numbers,
    parse_special,
    parse_string,
)
from labhal_scpi.reply import (
    ReplyField,
    ReplyFormat,
    bool_field,
    enum_field,
    float_field,
    int_field,
    parse_enum_field,
    parse_float_field,
    parse_int_field,
    parse_token,
    split_fields,
    token_field,
)
from labhal_scpi.subsystem import Subsystem
from labhal_scpi.transport import BlockTransport, ScpiTransport
from labhal_scpi.visa import VisaResource

__all__ = [
    # Common commands
    "CommonCommands",
    "EventStatus",
    "StatusByte",
    "parse_idn_response",
    # Connection
    "ScpiConnection",
    # Errors
    "ScpiCommandError",
    "ScpiError",
    "ScpiInstrumentError",
    # Facade
    "Instrument",
    "Subsystem",
    "open_connection",
    # Number parsing/formatting
    "ScpiSpecial",
    "format_bool",
    "format_fixed",
    "format_level",
    "format_number",
    "format_on_off",
    "format_string",
    "parse_bool",
    "parse_int",
    "parse_number",
    "parse_numbers",
    "parse_special",
    "parse_string",
    # Reply parsing
    "ReplyField",
    "ReplyFormat",
    "bool_field",
    "enum_field",
    "float_field",
    "int_field",
    "parse_enum_field",
    "parse_float_field",
    "parse_int_field",
    "parse_token",
    "split_fields",
    "token_field",
    # Transport
    "BlockTransport",
    "ScpiTransport",
    "VisaResource",
]
