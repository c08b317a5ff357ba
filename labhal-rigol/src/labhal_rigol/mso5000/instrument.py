"""Rigol MSO5000 oscilloscope facade."""

from __future__ import annotations

from labhal_core.types.common import InstrumentType
from labhal_scpi.connection import ScpiConnection
from labhal_scpi.instrument import Instrument, open_connection

from labhal_rigol.mso5000.subsystems import (
    ChannelCommands,
    ControlCommands,
    DisplayCommands,
    MeasureCommands,
    TimebaseCommands,
    TriggerCommands,
    WaveformCommands,
)
from labhal_rigol.mso5000.types import ScopeChannel


class RigolMSO5000(Instrument):
    """Rigol MSO5072/5074/5104/5204/5354 mixed-signal oscilloscope.

    Attributes:
        control: Run control and front-panel keys.
        channels: One vertical subsystem per analog input, CH1 first.
        timebase: Horizontal settings.
        display: Screen settings.
        trigger: Trigger system with edge, pulse and slope children.
        measure: Automatic measurements.
        waveform: Waveform readout.
    """

    instrument_type = InstrumentType.OSCILLOSCOPE

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection)
        self.control = ControlCommands(connection)
        self.channels = tuple(ChannelCommands(connection, channel) for channel in ScopeChannel)
        self.timebase = TimebaseCommands(connection)
        self.display = DisplayCommands(connection)
        self.trigger = TriggerCommands(connection)
        self.measure = MeasureCommands(connection)
        self.waveform = WaveformCommands(connection)

    def channel(self, channel: ScopeChannel | int) -> ChannelCommands:
        """Return the subsystem of one analog input.

        Raises:
            ValueError: If *channel* is not 1 to 4.
        """
        return self.channels[ScopeChannel(channel) - 1]


def create_instrument(visa_address: str, **kwargs: object) -> RigolMSO5000:
    """Create an MSO5000 driver from a VISA address.

    Args:
        visa_address: VISA resource string
            (e.g. ``"TCPIP::192.168.1.60::5555::SOCKET"``).
        **kwargs: Passed to :func:`~labhal_scpi.instrument.open_connection`.

    Returns:
        Connected oscilloscope facade.
    """
    return RigolMSO5000(open_connection(visa_address, **kwargs))  # type: ignore[arg-type]
