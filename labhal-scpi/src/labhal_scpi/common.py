"""IEEE 488.2 common commands.

Every SCPI instrument implements the starred common commands (``*IDN?``,
``*RST``, ``*ESR?`` ...). :class:`CommonCommands` wraps them once so each
instrument facade can expose them as its ``common`` subsystem.
"""

from __future__ import annotations

import logging
import time

from labhal_core.errors import FieldCountMismatch, TransportError
from labhal_core.types.common import InstrumentIdentity
from labhal_core.types.register import BitRegister

from labhal_scpi.number import parse_bool
from labhal_scpi.reply import split_fields
from labhal_scpi.subsystem import Subsystem

logger = logging.getLogger(__name__)


class EventStatus(BitRegister):
    """Standard Event Status Register (``*ESR?``, ``*ESE``)."""

    WIDTH = 8

    OPERATION_COMPLETE = 1
    QUERY_ERROR = 4
    DEVICE_ERROR = 8
    EXECUTION_ERROR = 16
    COMMAND_ERROR = 32
    USER_REQUEST = 64
    POWER_ON = 128


class StatusByte(BitRegister):
    """Status Byte Register (``*STB?``, ``*SRE``)."""

    WIDTH = 8

    ERROR_QUEUE = 4
    QUESTIONABLE_SUMMARY = 8
    MESSAGE_AVAILABLE = 16
    EVENT_SUMMARY = 32
    REQUEST_SERVICE = 64
    OPERATION_SUMMARY = 128


def parse_idn_response(response: str) -> InstrumentIdentity:
    """Parse a SCPI ``*IDN?`` response into an :class:`InstrumentIdentity`.

    The standard ``*IDN?`` response format is four comma-separated fields::

        manufacturer,model,serial_number,firmware_version

    If the response contains more than four comma-separated fields, the
    extra fields are joined into the firmware string.

    Raises:
        EmptyReply: If the response is blank.
        FieldCountMismatch: If the response has fewer than four fields.
    """
    parts = split_fields(response)
    if len(parts) < 4:
        raise FieldCountMismatch(4, len(parts), response)
    return InstrumentIdentity(
        manufacturer=parts[0],
        model=parts[1],
        serial=parts[2],
        firmware=",".join(parts[3:]),
    )


class CommonCommands(Subsystem):
    """IEEE 488.2 common commands shared by all instruments."""

    def identify(self) -> str:
        """Return the raw identification string (``*IDN?``)."""
        return self._conn.query("*IDN?")

    def get_identity(self) -> InstrumentIdentity:
        """Query and parse the identification string (``*IDN?``)."""
        return parse_idn_response(self.identify())

    def reset(self) -> None:
        """Reset the instrument to its power-on defaults (``*RST``)."""
        self._conn.command("*RST")

    def clear_status(self) -> None:
        """Clear status registers and the error queue (``*CLS``)."""
        self._conn.command("*CLS")

    # -- Event status --------------------------------------------------------

    def set_event_status_enable(self, mask: EventStatus) -> None:
        """Set the Standard Event Status Enable register (``*ESE``)."""
        self._conn.command(f"*ESE {mask.value}")

    def get_event_status_enable(self) -> EventStatus:
        """Query the Standard Event Status Enable register (``*ESE?``)."""
        return self._conn.query_register("*ESE?", EventStatus)

    def get_event_status(self) -> EventStatus:
        """Read and clear the Standard Event Status Register (``*ESR?``)."""
        return self._conn.query_register("*ESR?", EventStatus)

    # -- Operation complete --------------------------------------------------

    def operation_complete(self) -> None:
        """Set the OPC bit once pending operations finish (``*OPC``)."""
        self._conn.command("*OPC")

    def is_operation_complete(self) -> bool:
        """Query whether pending operations have finished (``*OPC?``).

        Error checking is disabled for this query since ``*OPC?`` may block
        until the instrument is ready.
        """
        return parse_bool(self._conn.query("*OPC?", check=False))

    def wait_for_operation_complete(self, timeout: float, poll_interval: float = 0.1) -> None:
        """Poll ``*OPC?`` until it reports completion.

        Args:
            timeout: Maximum time to wait in seconds.
            poll_interval: Delay between polls in seconds.

        Raises:
            TransportError: If the operation does not complete in time.
        """
        deadline = time.monotonic() + timeout
        while not self.is_operation_complete():
            if time.monotonic() >= deadline:
                raise TransportError(f"Operation did not complete within {timeout} s")
            time.sleep(poll_interval)

    # -- Service request -----------------------------------------------------

    def set_service_request_enable(self, mask: StatusByte) -> None:
        """Set the Service Request Enable register (``*SRE``)."""
        self._conn.command(f"*SRE {mask.value}")

    def get_service_request_enable(self) -> StatusByte:
        """Query the Service Request Enable register (``*SRE?``)."""
        return self._conn.query_register("*SRE?", StatusByte)

    def get_status_byte(self) -> StatusByte:
        """Read the Status Byte (``*STB?``)."""
        return self._conn.query_register("*STB?", StatusByte)

    # -- Miscellaneous -------------------------------------------------------

    def self_test(self) -> int:
        """Run the self test (``*TST?``); 0 means passed."""
        result = self._conn.query_int("*TST?", allow_float=True)
        if result != 0:
            logger.warning("Self test reported %d", result)
        return result

    def wait(self) -> None:
        """Hold off further commands until pending ones finish (``*WAI``)."""
        self._conn.command("*WAI")

    def trigger(self) -> None:
        """Send a bus trigger (``*TRG``)."""
        self._conn.command("*TRG")

    def get_options(self) -> tuple[str, ...]:
        """Query installed options (``*OPT?``)."""
        return tuple(split_fields(self._conn.query("*OPT?")))

    def save(self, slot: int) -> None:
        """Save the current setup to memory *slot* (``*SAV``)."""
        self._conn.command(f"*SAV {slot}")

    def recall(self, slot: int) -> None:
        """Recall the setup stored in memory *slot* (``*RCL``)."""
        self._conn.command(f"*RCL {slot}")
