"""Siglent SDG function generator facade."""

from __future__ import annotations

from labhal_core.types.common import InstrumentType
from labhal_scpi.connection import ScpiConnection
from labhal_scpi.instrument import Instrument, open_connection

from labhal_siglent.sdg.subsystems import (
    ArbCommands,
    BasicWaveCommands,
    BurstCommands,
    CouplingCommands,
    FrequencyCounterCommands,
    HarmonicCommands,
    IqCommands,
    ModulationCommands,
    OutputCommands,
    SweepCommands,
    SystemCommands,
)


class SiglentSDG(Instrument):
    """Siglent SDG1000X/SDG2000X/SDG6000X two-channel function generator.

    Attributes:
        output: Output switch, load and polarity.
        system: Buzzer, reference clock, routing and front panel keys.
        basic_wave: Basic waveform parameters.
        harmonic: Harmonics added to a sine output.
        arb: Arbitrary waveform playback mode and sample rate.
        burst: Burst output.
        sweep: Frequency sweep.
        modulation: AM/FM/PM/PWM and keyed modulation.
        iq: IQ modulation (SDG6000X).
        coupling: Channel coupling and tracking.
        counter: Built-in frequency counter.
    """

    instrument_type = InstrumentType.FUNCTION_GENERATOR

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection)
        self.output = OutputCommands(connection)
        self.system = SystemCommands(connection)
        self.basic_wave = BasicWaveCommands(connection)
        self.harmonic = HarmonicCommands(connection)
        self.arb = ArbCommands(connection)
        self.burst = BurstCommands(connection)
        self.sweep = SweepCommands(connection)
        self.modulation = ModulationCommands(connection)
        self.iq = IqCommands(connection)
        self.coupling = CouplingCommands(connection)
        self.counter = FrequencyCounterCommands(connection)


def create_instrument(visa_address: str, **kwargs: object) -> SiglentSDG:
    """Create an SDG driver from a VISA address.

    Args:
        visa_address: VISA resource string
            (e.g. ``"TCPIP::192.168.1.80::INSTR"``).
        **kwargs: Passed to :func:`~labhal_scpi.instrument.open_connection`.

    Returns:
        Connected function generator facade.
    """
    return SiglentSDG(open_connection(visa_address, **kwargs))  # type: ignore[arg-type]
