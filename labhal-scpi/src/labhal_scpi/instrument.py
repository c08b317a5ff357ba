"""Instrument facade base class and connection factory."""

from __future__ import annotations

import logging
from typing import ClassVar

from labhal_core.types.common import InstrumentType

from labhal_scpi.common import CommonCommands
from labhal_scpi.connection import ScpiConnection
from labhal_scpi.visa import VisaResource

logger = logging.getLogger(__name__)


class Instrument:
    """One physical instrument of a known model.

    Subclasses build every command subsystem of the model in ``__init__``,
    each bound to the same connection, and expose them as attributes. The
    facade itself performs no SCPI I/O.

    Attributes:
        instrument_type: Broad class of the instrument.
        common: IEEE 488.2 common commands.

    Args:
        connection: An open connection to the instrument.
    """

    instrument_type: ClassVar[InstrumentType]

    def __init__(self, connection: ScpiConnection) -> None:
        self._conn = connection
        self.common = CommonCommands(connection)

    @property
    def connection(self) -> ScpiConnection:
        """The connection shared by all subsystems."""
        return self._conn

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> Instrument:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_connection(
    visa_address: str,
    *,
    timeout_ms: int = 5000,
    check_errors: bool = True,
) -> ScpiConnection:
    """Open a VISA resource and wrap it in a :class:`ScpiConnection`.

    Args:
        visa_address: VISA resource string.
        timeout_ms: I/O timeout in milliseconds.
        check_errors: Drain ``SYST:ERR?`` after every exchange.

    Returns:
        An open connection.

    Raises:
        TransportError: If the resource cannot be opened.
    """
    resource = VisaResource(visa_address, timeout_ms=timeout_ms)
    resource.open()
    logger.info("Connected to %s", visa_address)
    return ScpiConnection(resource, check_errors=check_errors)
