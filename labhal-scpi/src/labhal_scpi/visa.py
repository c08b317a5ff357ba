"""PyVISA transport for SCPI instruments.

This module provides a VISA-based transport for SCPI instruments. PyVISA is
imported when the resource is opened so that the command layer, the emulators
and the tests work on machines without a VISA backend.

Typical resource strings:
- ``TCPIP::192.168.1.50::5555::SOCKET`` (raw LXI socket, Rigol DP800/DL3000/MSO5000)
- ``TCPIP::192.168.1.60::5025::SOCKET`` (raw socket, Rohde & Schwarz LCX)
- ``TCPIP::192.168.1.70::INSTR`` (VXI-11)
- ``USB0::0x1AB1::0x0E11::DP8C000000001::INSTR``
"""

from __future__ import annotations

import logging
from typing import Any

from labhal_core.errors import TransportError

logger = logging.getLogger(__name__)


class VisaResource:
    """SCPI transport backed by PyVISA.

    Implements the :class:`~labhal_scpi.transport.ScpiTransport` protocol.
    Every PyVISA failure is re-raised as :class:`TransportError`.

    Args:
        resource_string: VISA resource address.
        timeout_ms: I/O timeout in milliseconds (applied on open).
        read_termination: Character(s) that terminate read operations.
        write_termination: Character(s) appended to write operations.

    Example:
        >>> resource = VisaResource("TCPIP::192.168.1.50::5555::SOCKET")
        >>> resource.open()
        >>> resource.write("*IDN?")
        >>> print(resource.read())
        >>> resource.close()
    """

    def __init__(
        self,
        resource_string: str,
        *,
        timeout_ms: int = 5000,
        read_termination: str = "\n",
        write_termination: str = "\n",
    ) -> None:
        self._resource_string = resource_string
        self._timeout_ms = timeout_ms
        self._read_termination = read_termination
        self._write_termination = write_termination
        self._rm: Any = None
        self._resource: Any = None
        self._io_errors: tuple[type[BaseException], ...] = ()

    # -- Properties ----------------------------------------------------------

    @property
    def resource_string(self) -> str:
        """The VISA resource string."""
        return self._resource_string

    @property
    def timeout_ms(self) -> int:
        """The I/O timeout in milliseconds."""
        return self._timeout_ms

    @property
    def is_open(self) -> bool:
        """Return True if the resource is currently open."""
        return self._resource is not None

    # -- Lifecycle -----------------------------------------------------------

    def open(self) -> None:
        """Open the VISA resource.

        Does nothing if the resource is already open.

        Raises:
            TransportError: If ``pyvisa`` is not installed or the resource
                cannot be opened.
        """
        if self._resource is not None:
            return

        try:
            import pyvisa  # pylint: disable=import-outside-toplevel
        except ImportError as exc:
            raise TransportError(
                "pyvisa library is not installed. Install with: pip install pyvisa"
            ) from exc

        self._io_errors = (pyvisa.errors.VisaIOError, pyvisa.errors.InvalidSession, OSError)
        try:
            self._rm = pyvisa.ResourceManager()
            self._resource = self._rm.open_resource(
                self._resource_string,
                read_termination=self._read_termination,
                write_termination=self._write_termination,
            )
            self._resource.timeout = self._timeout_ms
        except Exception as exc:
            self._resource = None
            self._release_manager()
            raise TransportError(
                f"Failed to open VISA resource {self._resource_string!r}: {exc}"
            ) from exc
        logger.debug("Opened VISA resource %s", self._resource_string)

    def close(self) -> None:
        """Close the VISA resource and resource manager.

        Safe to call multiple times. Errors while closing are logged, not raised.
        """
        if self._resource is not None:
            try:
                self._resource.close()
            except self._io_errors as exc:
                logger.warning("Error closing VISA resource %s: %s", self._resource_string, exc)
            self._resource = None
        self._release_manager()

    def _release_manager(self) -> None:
        if self._rm is None:
            return
        try:
            self._rm.close()
        except self._io_errors as exc:
            logger.warning("Error closing VISA resource manager: %s", exc)
        self._rm = None

    # -- Transport interface -------------------------------------------------

    def write(self, message: str) -> None:
        """Send a message to the instrument.

        Args:
            message: The SCPI command or query string.

        Raises:
            TransportError: If the resource is not open or the write fails.
        """
        resource = self._require_open()
        try:
            resource.write(message)
        except self._io_errors as exc:
            raise TransportError(
                f"Write to {self._resource_string!r} failed: {exc}"
            ) from exc

    def read(self) -> str:
        """Read a response line from the instrument.

        Raises:
            TransportError: If the resource is not open or the read fails
                (including timeouts).
        """
        resource = self._require_open()
        try:
            result: str = resource.read()
        except self._io_errors as exc:
            raise TransportError(
                f"Read from {self._resource_string!r} failed: {exc}"
            ) from exc
        return result

    def read_block(self) -> bytes:
        """Read an IEEE 488.2 definite-length block (``#<n><len><data>``).

        PyVISA parses the block header and consumes the trailing terminator.

        Returns:
            The payload bytes.

        Raises:
            TransportError: If the resource is not open, the read fails or the
                block header is malformed.
        """
        resource = self._require_open()
        try:
            data: bytes = resource.read_binary_values(datatype="B", container=bytes)
        except (*self._io_errors, ValueError) as exc:
            raise TransportError(
                f"Block read from {self._resource_string!r} failed: {exc}"
            ) from exc
        return data

    def _require_open(self) -> Any:
        if self._resource is None:
            raise TransportError("VISA resource is not open")
        return self._resource
