"""Enumerations for the Siglent SDG series.

Member values are the tokens the instrument sends and accepts.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class SDGChannel(IntEnum):
    """Output channel. The name is the ``Cn`` command header."""

    C1 = 1
    C2 = 2


class Polarity(Enum):
    """Output polarity (``PLRT``)."""

    NORMAL = "NOR"
    INVERTED = "INVT"


class ClockSource(Enum):
    """Reference clock source (``ROSC``)."""

    INTERNAL = "INT"
    EXTERNAL = "EXT"


class PhaseMode(Enum):
    """Phase relation between the two channels (``MODE``)."""

    PHASE_LOCKED = "PHASE-LOCKED"
    INDEPENDENT = "INDEPENDENT"


class WaveType(Enum):
    """Basic waveform type (``BSWV WVTP``)."""

    SINE = "SINE"
    SQUARE = "SQUARE"
    RAMP = "RAMP"
    PULSE = "PULSE"
    NOISE = "NOISE"
    ARB = "ARB"
    DC = "DC"
    PRBS = "PRBS"


class WaveParameter(Enum):
    """Parameter keys of the ``BSWV`` command and its reply."""

    WAVE_TYPE = "WVTP"
    FREQUENCY = "FRQ"
    PERIOD = "PERI"
    AMPLITUDE = "AMP"
    AMPLITUDE_VRMS = "AMPVRMS"
    AMPLITUDE_DBM = "AMPDBM"
    OFFSET = "OFST"
    SYMMETRY = "SYM"
    DUTY = "DUTY"
    PHASE = "PHSE"
    STANDARD_DEVIATION = "STDEV"
    MEAN = "MEAN"
    WIDTH = "WIDTH"
    RISE = "RISE"
    FALL = "FALL"
    DELAY = "DLY"
    HIGH_LEVEL = "HLEV"
    LOW_LEVEL = "LLEV"
    BAND_STATE = "BANDSTATE"
    BANDWIDTH = "BANDWIDTH"
    LENGTH = "LENGTH"
    EDGE = "EDGE"
    DIFF_STATE = "DIFFSTATE"
    BIT_RATE = "BITRATE"


class VirtualKey(IntEnum):
    """Front panel key codes for ``VKEY``."""

    WAVES = 4
    PARAMETER = 5
    ARB = 9
    UTILITY = 11
    HELP = 12
    NOISE = 14
    MOD = 15
    SWEEP = 16
    BURST = 17
    PULSE = 19
    RAMP = 24
    SQUARE = 29
    SINE = 34
    FUNC6 = 3
    FUNC5 = 8
    FUNC4 = 13
    FUNC3 = 18
    FUNC2 = 23
    FUNC1 = 28
    DOWN = 39
    RIGHT = 40
    NEGATIVE = 43
    LEFT = 44
    UP = 45
    POINT = 46
    NUMBER_0 = 48
    NUMBER_1 = 49
    NUMBER_2 = 50
    NUMBER_3 = 51
    NUMBER_4 = 52
    NUMBER_5 = 53
    NUMBER_6 = 54
    NUMBER_7 = 55
    NUMBER_8 = 56
    NUMBER_9 = 57
    STORE_RECALL = 70
    CHANNEL = 72
    OUTPUT2 = 152
    OUTPUT1 = 153
    KNOB_RIGHT = 175
    KNOB_DOWN = 176
    KNOB_LEFT = 177


class SampleRateMode(Enum):
    """Arbitrary waveform playback mode (``SRATE MODE``)."""

    DDS = "DDS"
    TRUE_ARB = "TARB"


class Interpolation(Enum):
    """TrueArb interpolation between samples (``SRATE INTER``)."""

    LINEAR = "LINE"
    HOLD = "HOLD"


class TriggerSource(Enum):
    """Trigger source of burst, sweep and IQ output."""

    INTERNAL = "INT"
    EXTERNAL = "EXT"
    MANUAL = "MAN"


class Edge(Enum):
    """Active edge of the external trigger input."""

    RISE = "RISE"
    FALL = "FALL"


class TriggerOutput(Enum):
    """Burst trigger output (``BTWV TRMD``)."""

    RISE = "RISE"
    FALL = "FALL"
    OFF = "OFF"


class BurstMode(Enum):
    """Gated or N-cycle burst (``BTWV GATE_NCYC``)."""

    GATE = "GATE"
    N_CYCLE = "NCYC"


class GatePolarity(Enum):
    """Level of the external gate that enables a gated burst (``BTWV PLRT``)."""

    POSITIVE = "POS"
    NEGATIVE = "NEG"


class SweepMode(Enum):
    """Frequency progression of a sweep (``SWWV SWMD``)."""

    LINEAR = "LINE"
    LOG = "LOG"


class SweepDirection(Enum):
    UP = "UP"
    DOWN = "DOWN"


class ModulationType(Enum):
    """Modulation type (``MDWV``)."""

    AM = "AM"
    DSB_AM = "DSBAM"
    FM = "FM"
    PM = "PM"
    PWM = "PWM"
    ASK = "ASK"
    FSK = "FSK"
    PSK = "PSK"


class ModulationSource(Enum):
    INTERNAL = "INT"
    EXTERNAL = "EXT"


class ModulationShape(Enum):
    """Shape of the internal modulating signal (``MDSP``)."""

    SINE = "SINE"
    SQUARE = "SQUARE"
    TRIANGLE = "TRIANGLE"
    UP_RAMP = "UPRAMP"
    DOWN_RAMP = "DNRAMP"
    NOISE = "NOISE"
    ARB = "ARB"


class HarmonicType(Enum):
    """Which harmonics are added to the fundamental (``HARMTYPE``)."""

    EVEN = "EVEN"
    ODD = "ODD"
    ALL = "ALL"


class HarmonicUnit(Enum):
    """Unit of the harmonic level. The value is the key that carries it."""

    VOLTS = "HARMAMP"
    DBC = "HARMDBC"


class IqWaveform(Enum):
    """Built-in IQ modulation waveforms (``IQ:WAVE:BUIL``)."""

    ASK2 = "2ASK"
    ASK4 = "4ASK"
    ASK8 = "8ASK"
    BPSK = "BPSK"
    PSK4 = "4PSK"
    PSK8 = "8PSK"
    DBPSK = "DBPSK"
    DPSK4 = "4DPSK"
    DPSK8 = "8DPSK"
    QAM8 = "8QAM"
    QAM16 = "16QAM"
    QAM32 = "32QAM"
    QAM64 = "64QAM"
    QAM128 = "128QAM"
    QAM256 = "256QAM"


class CounterCoupling(Enum):
    """Input coupling of the frequency counter (``FCNT MODE``)."""

    AC = "AC"
    DC = "DC"
