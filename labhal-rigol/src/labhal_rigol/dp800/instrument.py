"""Rigol DP800 power supply facade."""

from __future__ import annotations

from labhal_core.types.common import InstrumentType
from labhal_scpi.connection import ScpiConnection
from labhal_scpi.instrument import Instrument, open_connection

from labhal_rigol.dp800.emulator import make_dp811_emulator, make_dp832_emulator
from labhal_rigol.dp800.subsystems import (
    ChannelCommands,
    MeasureCommands,
    OutputCommands,
    SourceCommands,
)
from labhal_rigol.status import QuestionableStatusSubsystem


class RigolDP800(Instrument):
    """Rigol DP811/DP821/DP831/DP832 programmable DC power supply.

    Attributes:
        channels: Channel selection and ``APPL``.
        measure: Output measurements.
        output: Output state, tracking, OCP and OVP.
        current: ``CURR`` setpoints and protection.
        voltage: ``VOLT`` setpoints and protection.
        status: Questionable status register.
    """

    instrument_type = InstrumentType.POWER_SUPPLY

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection)
        self.channels = ChannelCommands(connection)
        self.measure = MeasureCommands(connection)
        self.output = OutputCommands(connection)
        self.current = SourceCommands(connection, "CURR")
        self.voltage = SourceCommands(connection, "VOLT")
        self.status = QuestionableStatusSubsystem(connection)


def create_instrument(visa_address: str, **kwargs: object) -> RigolDP800:
    """Create a DP800 driver from a VISA address.

    Standard factory entry point for the bench and programmatic use.

    Args:
        visa_address: VISA resource string
            (e.g. ``"TCPIP::192.168.1.50::5555::SOCKET"``).
        **kwargs: Passed to :func:`~labhal_scpi.instrument.open_connection`
            (``timeout_ms``, ``check_errors``).

    Returns:
        Connected power supply facade.
    """
    return RigolDP800(open_connection(visa_address, **kwargs))  # type: ignore[arg-type]


_EMULATORS = {
    "DP832": make_dp832_emulator,
    "DP811": make_dp811_emulator,
}


def create_emulated_instrument(model: str = "DP832", serial: str | None = None) -> RigolDP800:
    """Create a DP800 driver backed by the in-process emulator.

    Drop-in replacement for :func:`create_instrument` in bench files used
    without hardware.

    Args:
        model: ``"DP832"`` or ``"DP811"``.
        serial: Serial number reported by ``*IDN?``; the emulator default
            when omitted.

    Raises:
        ValueError: If no emulator exists for *model*.
    """
    try:
        factory = _EMULATORS[model.upper()]
    except KeyError:
        raise ValueError(f"No emulator for model {model!r}") from None
    emulator = factory() if serial is None else factory(serial)
    return RigolDP800(ScpiConnection(emulator))
