"""SCPI protocol error types.

Errors reported by the instrument itself are transport-level failures from the
point of view of the command subsystems: they propagate unchanged to the
caller. Both classes therefore derive from
:class:`labhal_core.errors.TransportError`.
"""

from __future__ import annotations

from dataclasses import dataclass

from labhal_core.errors import TransportError


class ScpiError(TransportError):
    """Base exception for SCPI protocol errors."""


@dataclass(frozen=True)
class ScpiInstrumentError:
    """Single entry from an instrument's error queue.

    Attributes:
        code: SCPI error code (negative for standard errors, positive for device-specific).
        message: Error description reported by the instrument.
    """

    code: int
    message: str

    def __str__(self) -> str:
        return f'{self.code},"{self.message}"'


class ScpiCommandError(ScpiError):
    """Raised when an instrument reports errors after a command or query.

    Attributes:
        command: The command or query that preceded the errors.
        errors: One or more errors drained from the instrument's error queue.

    Example:
        >>> try:
        ...     conn.command("OUTP:OCP:VAL CH4,1.00000")
        ... except ScpiCommandError as e:
        ...     for err in e.errors:
        ...         print(f"Error {err.code}: {err.message}")
    """

    def __init__(self, errors: tuple[ScpiInstrumentError, ...], command: str = "") -> None:
        self.errors = errors
        self.command = command
        messages = "; ".join(str(e) for e in errors)
        if command:
            super().__init__(f"SCPI instrument error(s) after {command!r}: {messages}")
        else:
            super().__init__(f"SCPI instrument error(s): {messages}")
