"""Rohde & Schwarz LCX LCR meter facade."""

from __future__ import annotations

from labhal_core.types.common import InstrumentType
from labhal_scpi.connection import ScpiConnection
from labhal_scpi.instrument import Instrument, open_connection

from labhal_rohde.lcx.subsystems import (
    BiasCommands,
    BinningCommands,
    CorrectionCommands,
    DataCommands,
    DisplayCommands,
    DynamicImpedanceCommands,
    FunctionCommands,
    HardcopyCommands,
    LogCommands,
    MeasurementCommands,
    SignalCommands,
    StatusCommands,
    SystemCommands,
)


class RohdeLCX(Instrument):
    """Rohde & Schwarz LCX100/LCX200 LCR meter.

    Attributes:
        bias: Internal and external DC bias.
        correction: Open, short and load compensation.
        data: Log file management.
        dynamic_impedance: Dynamic impedance sweeps.
        display: Display brightness and messages.
        function: Measurement type and impedance range.
        binning: Component binning handler.
        hardcopy: Screenshot settings.
        log: Measurement logging.
        measurement: Triggering and reading results.
        status: Operation and questionable status registers.
        system: General instrument settings.
        test_signal: Test signal level, frequency and aperture.
    """

    instrument_type = InstrumentType.LCR_METER

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection)
        self.bias = BiasCommands(connection)
        self.correction = CorrectionCommands(connection)
        self.data = DataCommands(connection)
        self.dynamic_impedance = DynamicImpedanceCommands(connection)
        self.display = DisplayCommands(connection)
        self.function = FunctionCommands(connection)
        self.binning = BinningCommands(connection)
        self.hardcopy = HardcopyCommands(connection)
        self.log = LogCommands(connection)
        self.measurement = MeasurementCommands(connection)
        self.status = StatusCommands(connection)
        self.system = SystemCommands(connection)
        self.test_signal = SignalCommands(connection)


def create_instrument(visa_address: str, **kwargs: object) -> RohdeLCX:
    """Create an LCX driver from a VISA address.

    Args:
        visa_address: VISA resource string
            (e.g. ``"TCPIP::192.168.1.70::hislip0::INSTR"``).
        **kwargs: Passed to :func:`~labhal_scpi.instrument.open_connection`.

    Returns:
        Connected LCR meter facade.
    """
    return RohdeLCX(open_connection(visa_address, **kwargs))  # type: ignore[arg-type]
