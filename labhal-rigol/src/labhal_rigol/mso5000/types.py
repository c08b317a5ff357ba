"""Enumerations for the Rigol MSO5000 series.

Member values are the SCPI tokens. The preamble ordinals
(:class:`WaveformFormat`, :class:`WaveformMode`) and the measurement
category are integer enumerations because the instrument exchanges them as
numbers.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class ScopeChannel(IntEnum):
    """Analog input channel; the value is the ``CHANn`` number."""

    CH1 = 1
    CH2 = 2
    CH3 = 3
    CH4 = 4


class Coupling(Enum):
    AC = "AC"
    DC = "DC"
    GND = "GND"


class ChannelUnits(Enum):
    VOLT = "VOLT"
    WATT = "WATT"
    AMP = "AMP"
    UNKNOWN = "UNKN"


class ChannelBandwidth(Enum):
    """Channel bandwidth limit (``CHANn:BWL``)."""

    BW_20M = "20M"
    BW_100M = "100M"
    BW_200M = "200M"
    OFF = "OFF"


class ScopeKey(Enum):
    """Front-panel keys accepted by ``SYST:KEY:PRES``."""

    CH1 = "CH1"
    CH2 = "CH2"
    CH3 = "CH3"
    CH4 = "CH4"
    MATH = "MATH"
    REF = "REF"
    LA = "LA"
    DECODE = "DEC"
    MOFF = "MOFF"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    NAVIGATE_PREVIOUS = "NPR"
    NAVIGATE_NEXT = "NNEX"
    NAVIGATE_STOP = "NST"
    VERTICAL_OFFSET1 = "VOFF1"
    VERTICAL_OFFSET2 = "VOFF2"
    VERTICAL_OFFSET3 = "VOFF3"
    VERTICAL_OFFSET4 = "VOFF4"
    VERTICAL_SCALE1 = "VSC1"
    VERTICAL_SCALE2 = "VSC2"
    VERTICAL_SCALE3 = "VSC3"
    VERTICAL_SCALE4 = "VSC4"
    HORIZONTAL_SCALE = "HSC"
    HORIZONTAL_POSITION = "HPOS"
    KNOB_FUNCTION = "KFUN"
    TRIGGER_LEVEL = "TLEV"
    TRIGGER_MENU = "TMEN"
    TRIGGER_MODE = "TMOD"
    DEFAULT = "DEF"
    CLEAR = "CLE"
    AUTO = "AUTO"
    RUN_STOP = "RST"
    SINGLE = "SING"
    QUICK = "QUIC"
    MEASURE = "MEAS"
    ACQUIRE = "ACQ"
    STORAGE = "STOR"
    CURSOR = "CURS"
    DISPLAY = "DISP"
    UTILITY = "UTIL"
    FORCE = "FORC"
    GENERATOR1 = "GEN1"
    GENERATOR2 = "GEN2"
    BACK = "BACK"
    TOUCH = "TOUC"
    ZOOM = "ZOOM"
    SEARCH = "SEAR"


# -- Waveform ----------------------------------------------------------------


class WaveformSource(Enum):
    CHAN1 = "CHAN1"
    CHAN2 = "CHAN2"
    CHAN3 = "CHAN3"
    CHAN4 = "CHAN4"
    D0 = "D0"
    D1 = "D1"
    D2 = "D2"
    D3 = "D3"
    D4 = "D4"
    D5 = "D5"
    D6 = "D6"
    D7 = "D7"
    D8 = "D8"
    D9 = "D9"
    D10 = "D10"
    D11 = "D11"
    D12 = "D12"
    D13 = "D13"
    D14 = "D14"
    D15 = "D15"
    MATH1 = "MATH1"
    MATH2 = "MATH2"
    MATH3 = "MATH3"
    MATH4 = "MATH4"


class WaveformMode(IntEnum):
    """Waveform read mode; the preamble reports the ordinal."""

    NORM = 0
    MAX = 1
    RAW = 2


class WaveformFormat(IntEnum):
    """Waveform data format; the preamble reports the ordinal."""

    BYTE = 0
    WORD = 1
    ASC = 2


# -- Timebase and display ----------------------------------------------------


class TimebaseMode(Enum):
    MAIN = "MAIN"
    XY = "XY"
    ROLL = "ROLL"


class HorizontalReference(Enum):
    """Anchor kept fixed when the horizontal scale changes."""

    CENTER = "CENT"
    LEFT_BORDER = "LB"
    RIGHT_BORDER = "RB"
    TRIGGER = "TRIG"
    USER = "USER"


class DisplayType(Enum):
    VECTORS = "VECT"
    DOTS = "DOTS"


# -- Trigger -----------------------------------------------------------------


class TriggerMode(Enum):
    EDGE = "EDGE"
    PULSE = "PULS"
    SLOPE = "SLOP"
    VIDEO = "VID"
    PATTERN = "PATT"
    DURATION = "DUR"
    TIMEOUT = "TIM"
    RUNT = "RUNT"
    WINDOW = "WIND"
    DELAY = "DEL"
    SETUP_HOLD = "SET"
    NTH_EDGE = "NEDG"
    RS232 = "RS232"
    IIC = "IIC"
    SPI = "SPI"
    CAN = "CAN"
    FLEXRAY = "FLEX"
    LIN = "LIN"
    IIS = "IIS"
    M1553 = "M1553"


class TriggerCoupling(Enum):
    AC = "AC"
    DC = "DC"
    LF_REJECT = "LFR"
    HF_REJECT = "HFR"


class TriggerStatus(Enum):
    TRIGGERED = "TD"
    WAIT = "WAIT"
    RUN = "RUN"
    AUTO = "AUTO"
    STOP = "STOP"


class TriggerSweep(Enum):
    AUTO = "AUTO"
    NORMAL = "NORM"
    SINGLE = "SING"


class EdgeSource(Enum):
    CHAN1 = "CHAN1"
    CHAN2 = "CHAN2"
    CHAN3 = "CHAN3"
    CHAN4 = "CHAN4"
    D0 = "D0"
    D1 = "D1"
    D2 = "D2"
    D3 = "D3"
    D4 = "D4"
    D5 = "D5"
    D6 = "D6"
    D7 = "D7"
    D8 = "D8"
    D9 = "D9"
    D10 = "D10"
    D11 = "D11"
    D12 = "D12"
    D13 = "D13"
    D14 = "D14"
    D15 = "D15"
    AC_LINE = "ACL"


class EdgeSlope(Enum):
    POSITIVE = "POS"
    NEGATIVE = "NEG"
    EITHER = "RFAL"


class PulseSource(Enum):
    D0 = "D0"
    D1 = "D1"
    D2 = "D2"
    D3 = "D3"
    D4 = "D4"
    D5 = "D5"
    D6 = "D6"
    D7 = "D7"
    D8 = "D8"
    D9 = "D9"
    D10 = "D10"
    D11 = "D11"
    D12 = "D12"
    D13 = "D13"
    D14 = "D14"
    D15 = "D15"
    CHAN1 = "CHAN1"
    CHAN2 = "CHAN2"
    CHAN3 = "CHAN3"
    CHAN4 = "CHAN4"


class PulseCondition(Enum):
    GREATER = "GRE"
    LESS = "LESS"
    BETWEEN = "GLES"


class SlopeSource(Enum):
    CHAN1 = "CHAN1"
    CHAN2 = "CHAN2"
    CHAN3 = "CHAN3"
    CHAN4 = "CHAN4"


class SlopeCondition(Enum):
    GREATER = "GRE"
    LESS = "LESS"
    BETWEEN = "GLES"


class SlopeWindow(Enum):
    """Which level(s) the slope trigger compares against."""

    UPPER = "TA"
    LOWER = "TB"
    BOTH = "TAB"


# -- Measure -----------------------------------------------------------------


class MeasureChannel(Enum):
    CHAN1 = "CHAN1"
    CHAN2 = "CHAN2"
    CHAN3 = "CHAN3"
    CHAN4 = "CHAN4"
    D0 = "D0"
    D1 = "D1"
    D2 = "D2"
    D3 = "D3"
    D4 = "D4"
    D5 = "D5"
    D6 = "D6"
    D7 = "D7"
    D8 = "D8"
    D9 = "D9"
    D10 = "D10"
    D11 = "D11"
    D12 = "D12"
    D13 = "D13"
    D14 = "D14"
    D15 = "D15"
    MATH1 = "MATH1"
    MATH2 = "MATH2"
    MATH3 = "MATH3"
    MATH4 = "MATH4"
    OFF = "OFF"


class MeasureItem(Enum):
    ITEM1 = "ITEM1"
    ITEM2 = "ITEM2"
    ITEM3 = "ITEM3"
    ITEM4 = "ITEM4"
    ITEM5 = "ITEM5"
    ITEM6 = "ITEM6"
    ITEM7 = "ITEM7"
    ITEM8 = "ITEM8"
    ITEM9 = "ITEM9"
    ITEM10 = "ITEM10"
    ALL = "ALL"


class MeasureFunction(Enum):
    """Automatic measurement parameters (``MEAS:ITEM``)."""

    VMAX = "VMAX"
    VMIN = "VMIN"
    VPP = "VPP"
    VTOP = "VTOP"
    VBASE = "VBAS"
    VAMP = "VAMP"
    VAVG = "VAVG"
    VRMS = "VRMS"
    OVERSHOOT = "OVER"
    PRESHOOT = "PRES"
    AREA = "MAR"
    PERIOD_AREA = "MPAR"
    PERIOD = "PER"
    FREQUENCY = "FREQ"
    RISE_TIME = "RTIM"
    FALL_TIME = "FTIM"
    POSITIVE_WIDTH = "PWID"
    NEGATIVE_WIDTH = "NWID"
    POSITIVE_DUTY = "PDUT"
    NEGATIVE_DUTY = "NDUT"
    TIME_AT_VMAX = "TVMAX"
    TIME_AT_VMIN = "TVMIN"
    POSITIVE_SLEW_RATE = "PSL"
    NEGATIVE_SLEW_RATE = "NSL"
    VUPPER = "VUPP"
    VMID = "VMID"
    VLOWER = "VLOW"
    VARIANCE = "VAR"
    PERIOD_VRMS = "PVRM"
    POSITIVE_PULSES = "PPUL"
    NEGATIVE_PULSES = "NPUL"
    POSITIVE_EDGES = "PEDG"
    NEGATIVE_EDGES = "NEDG"
    DELAY_RISE_RISE = "RRD"
    DELAY_RISE_FALL = "RFD"
    DELAY_FALL_RISE = "FRD"
    DELAY_FALL_FALL = "FFD"
    PHASE_RISE_RISE = "RRPH"
    PHASE_RISE_FALL = "RFPH"
    PHASE_FALL_RISE = "FRPH"
    PHASE_FALL_FALL = "FFPH"


class MeasureType(Enum):
    """Statistic reported by ``MEAS:STAT:ITEM?``."""

    MAXIMUM = "MAX"
    MINIMUM = "MIN"
    CURRENT = "CURR"
    AVERAGE = "AVER"
    DEVIATION = "DEV"
    COUNT = "CNT"


class MeasureArea(Enum):
    MAIN = "MAIN"
    ZOOM = "ZOOM"
    CURSOR = "CURS"


class MeasureCategory(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1
    OTHER = 2


class MeasureMode(Enum):
    NORMAL = "NORM"
    PRECISION = "PREC"


# Replies that spell a member differently from the command token.
CHANNEL_UNITS_ALIASES: dict[str, ChannelUnits] = {
    "VOLTAGE": ChannelUnits.VOLT,
    "AMPERE": ChannelUnits.AMP,
    "UNKNOWN": ChannelUnits.UNKNOWN,
}

MEASURE_MODE_ALIASES: dict[str, MeasureMode] = {
    "NORMAL": MeasureMode.NORMAL,
    "PRECISION": MeasureMode.PRECISION,
}

# The waveform mode and format are sent by name but reported by ordinal in
# the preamble.
WAVEFORM_MODE_TOKENS: dict[str, WaveformMode] = {member.name: member for member in WaveformMode}
WAVEFORM_FORMAT_TOKENS: dict[str, WaveformFormat] = {
    **{member.name: member for member in WaveformFormat},
    "ASCII": WaveformFormat.ASC,
}
