"""SCPI transport protocol.

A transport moves one line of text to the instrument and one line back. It
knows nothing about SCPI syntax; framing, timeouts and connection handling
are its own business. :class:`~labhal_scpi.visa.VisaResource` is the
production implementation, and the vendor emulators implement it in-process.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScpiTransport(Protocol):
    """Line-oriented message transport to a SCPI instrument.

    Implementations raise :class:`labhal_core.errors.TransportError` on
    failure.
    """

    def write(self, message: str) -> None:
        """Send one message, without its line terminator."""
        ...

    def read(self) -> str:
        """Read one reply line."""
        ...

    def close(self) -> None:
        """Release the underlying resource."""
        ...


@runtime_checkable
class BlockTransport(ScpiTransport, Protocol):
    """Transport that can also read IEEE 488.2 definite-length binary blocks.

    Screenshots and other binary payloads arrive as ``#<n><length><bytes>``.
    Implementations return only the payload bytes.
    """

    def read_block(self) -> bytes:
        """Read one definite-length block and return its payload."""
        ...
