"""SCPI connection with optional error queue checking.

:class:`ScpiConnection` is the transport handle every command subsystem
holds. It sends commands, reads replies, optionally drains ``SYST:ERR?``
after each exchange and offers typed query helpers.

Typical usage::

    from labhal_scpi import ScpiConnection, VisaResource

    transport = VisaResource("TCPIP::192.168.1.50::5555::SOCKET")
    transport.open()
    conn = ScpiConnection(transport)

    conn.command("APPL CH1,5.0000,1.0000")
    voltage = conn.query_number("MEAS? CH1")

    conn.close()
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, TypeVar

from labhal_core.errors import TransportError

from labhal_scpi.errors import ScpiCommandError, ScpiInstrumentError
from labhal_scpi.number import (
    ScpiSpecial,
    parse_bool,
    parse_int,
    parse_number,
    parse_numbers,
    parse_special,
)
from labhal_scpi.transport import BlockTransport

if TYPE_CHECKING:
    from labhal_core.types.register import BitRegister

    from labhal_scpi.transport import ScpiTransport

_R = TypeVar("_R", bound="BitRegister")

logger = logging.getLogger(__name__)

# Matches SCPI error responses: optional +/- code, comma, optional quoted message.
_ERROR_RE = re.compile(r"^\s*([+-]?\d+)\s*,\s*\"?([^\"]*)\"?\s*$")

# Upper bound on SYST:ERR? reads per drain.
_MAX_ERROR_READS = 32


class ScpiConnection:
    """Command/query handle wrapping a transport.

    The connection issues exactly one write per command and one write plus
    one read per query. It never retries and never caches. When error checking
    is enabled, every exchange is followed by draining the instrument error
    queue and :class:`ScpiCommandError` is raised if it was not empty.

    Args:
        transport: An open :class:`~labhal_scpi.transport.ScpiTransport`.
        check_errors: If True (default), drain ``SYST:ERR?`` after each
            command and query.

    Example:
        >>> conn = ScpiConnection(transport, check_errors=False)
        >>> conn.command("*RST")
        >>> volts = conn.query_number("MEAS:VOLT?")
    """

    def __init__(self, transport: ScpiTransport, *, check_errors: bool = True) -> None:
        self._transport = transport
        self._check_errors = check_errors

    @property
    def check_errors(self) -> bool:
        """Whether error queue checking is enabled by default."""
        return self._check_errors

    # -- Core operations -----------------------------------------------------

    def command(self, cmd: str, *, check: bool | None = None) -> None:
        """Send a SCPI command (no response expected).

        Args:
            cmd: The SCPI command string (e.g. ``"OUTP CH1,ON"``).
            check: Override the instance-level error check setting.

        Raises:
            TransportError: If the transport fails.
            ScpiCommandError: If the instrument reports errors.
        """
        logger.debug("-> %s", cmd)
        self._transport.write(cmd)
        self._check(cmd, check)

    def query(self, cmd: str, *, check: bool | None = None) -> str:
        """Send a SCPI query and return the response.

        Args:
            cmd: The SCPI query string (e.g. ``"MEAS:ALL? CH1"``).
            check: Override the instance-level error check setting.

        Returns:
            The instrument response with surrounding whitespace stripped.

        Raises:
            TransportError: If the transport fails.
            ScpiCommandError: If the instrument reports errors.
        """
        logger.debug("-> %s", cmd)
        self._transport.write(cmd)
        response = self._transport.read().strip()
        logger.debug("<- %s", response)
        self._check(cmd, check)
        return response

    # -- Typed query variants ------------------------------------------------

    def query_number(self, cmd: str, *, check: bool | None = None) -> float:
        """Query and parse the response as a SCPI number.

        Raises:
            EmptyReply: If the instrument returned nothing.
            FieldParseError: If the response is not a number.
        """
        return parse_number(self.query(cmd, check=check))

    def query_numbers(self, cmd: str, *, check: bool | None = None) -> tuple[float, ...]:
        """Query and parse the response as a comma-separated list of numbers."""
        return parse_numbers(self.query(cmd, check=check))

    def query_int(
        self, cmd: str, *, allow_float: bool = False, check: bool | None = None
    ) -> int:
        """Query and parse the response as an integer.

        Args:
            cmd: The SCPI query string.
            allow_float: Accept integral values written as floats.
            check: Override the instance-level error check setting.
        """
        return parse_int(self.query(cmd, check=check), allow_float=allow_float)

    def query_bool(self, cmd: str, *, check: bool | None = None) -> bool:
        """Query and parse the response as a boolean.

        Accepts ``"1"``/``"0"``, ``"ON"``/``"OFF"`` and ``"YES"``/``"NO"``.
        """
        return parse_bool(self.query(cmd, check=check))

    def query_special(self, cmd: str, *, check: bool | None = None) -> float | ScpiSpecial:
        """Query a value that may be a number or ``MIN``/``MAX``/``DEF``."""
        return parse_special(self.query(cmd, check=check))

    def query_register(
        self, cmd: str, register: type[_R], *, check: bool | None = None
    ) -> _R:
        """Query a status register and wrap the reply in *register*.

        Raises:
            EmptyReply: If the instrument returned nothing.
            FieldParseError: If the reply is not an integer that fits the
                register width.
        """
        return register.from_reply(self.query(cmd, check=check))

    def query_block(self, cmd: str, *, check: bool | None = None) -> bytes:
        """Send a query whose reply is an IEEE 488.2 definite-length block.

        Returns:
            The block payload, without its ``#<n><len>`` header.

        Raises:
            TransportError: If the transport cannot read binary blocks or
                the read fails.
            ScpiCommandError: If the instrument reports errors.
        """
        if not isinstance(self._transport, BlockTransport):
            raise TransportError(
                f"{type(self._transport).__name__} does not support binary block reads"
            )
        logger.debug("-> %s", cmd)
        self._transport.write(cmd)
        data = self._transport.read_block()
        logger.debug("<- <%d byte block>", len(data))
        self._check(cmd, check)
        return data

    # -- Error queue ---------------------------------------------------------

    def get_errors(self) -> tuple[ScpiInstrumentError, ...]:
        """Drain the instrument error queue.

        Repeatedly queries ``SYST:ERR?`` until the instrument returns a
        ``0,"No error"`` response.

        Returns:
            A tuple of :class:`ScpiInstrumentError` for every queued error.
        """
        errors: list[ScpiInstrumentError] = []
        for _ in range(_MAX_ERROR_READS):
            self._transport.write("SYST:ERR?")
            raw = self._transport.read().strip()
            error = self._parse_error_response(raw)
            if error is None:
                break
            errors.append(error)
        else:
            logger.warning("Error queue not empty after %d reads", _MAX_ERROR_READS)
        return tuple(errors)

    # -- Lifecycle -----------------------------------------------------------

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    # -- Private helpers -----------------------------------------------------

    def _check(self, cmd: str, override: bool | None) -> None:
        should_check = self._check_errors if override is None else override
        if not should_check:
            return
        errors = self.get_errors()
        if errors:
            logger.debug("Instrument errors after %s: %s", cmd, errors)
            raise ScpiCommandError(errors, command=cmd)

    @staticmethod
    def _parse_error_response(raw: str) -> ScpiInstrumentError | None:
        """Parse a ``SYST:ERR?`` response; ``None`` means no error."""
        match = _ERROR_RE.match(raw)
        if match is None:
            return None
        code = int(match.group(1))
        message = match.group(2).strip()
        if code == 0:
            return None
        return ScpiInstrumentError(code=code, message=message)
