"""Siglent SDG series arbitrary function generators.

Modules:
    types: Channel, polarity and waveform enumerations.
    data: Value objects parsed from replies.
    subsystems: Command subsystems.
    instrument: The :class:`SiglentSDG` facade and its factory.
"""

from labhal_siglent.sdg.data import (
    BasicWave,
    Harmonic,
    ModeSettings,
    OutputState,
    SampleRate,
    strip_header,
)
from labhal_siglent.sdg.instrument import SiglentSDG, create_instrument
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
from labhal_siglent.sdg.types import (
    BurstMode,
    ClockSource,
    CounterCoupling,
    Edge,
    GatePolarity,
    HarmonicType,
    HarmonicUnit,
    Interpolation,
    IqWaveform,
    ModulationShape,
    ModulationSource,
    ModulationType,
    PhaseMode,
    Polarity,
    SampleRateMode,
    SDGChannel,
    SweepDirection,
    SweepMode,
    TriggerOutput,
    TriggerSource,
    VirtualKey,
    WaveParameter,
    WaveType,
)

__all__ = [
    # Types
    "BurstMode",
    "ClockSource",
    "CounterCoupling",
    "Edge",
    "GatePolarity",
    "HarmonicType",
    "HarmonicUnit",
    "Interpolation",
    "IqWaveform",
    "ModulationShape",
    "ModulationSource",
    "ModulationType",
    "PhaseMode",
    "Polarity",
    "SampleRateMode",
    "SDGChannel",
    "SweepDirection",
    "SweepMode",
    "TriggerOutput",
    "TriggerSource",
    "VirtualKey",
    "WaveParameter",
    "WaveType",
    # Value objects
    "BasicWave",
    "Harmonic",
    "ModeSettings",
    "OutputState",
    "SampleRate",
    "strip_header",
    # Subsystems
    "ArbCommands",
    "BasicWaveCommands",
    "BurstCommands",
    "CouplingCommands",
    "FrequencyCounterCommands",
    "HarmonicCommands",
    "IqCommands",
    "ModulationCommands",
    "OutputCommands",
    "SweepCommands",
    "SystemCommands",
    # Facade
    "SiglentSDG",
    "create_instrument",
]
