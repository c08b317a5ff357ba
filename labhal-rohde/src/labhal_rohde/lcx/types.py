"""Enumerations for the Rohde & Schwarz LCX series.

Member values are the SCPI short-form tokens. The instrument answers queries
with the short form, so the ``*_ALIASES`` tables only cover long forms that
some firmware versions return.
"""

from __future__ import annotations

from enum import Enum

from labhal_core.types.register import BitRegister


class ImpedanceSource(Enum):
    """Source impedance of the test signal (``FUNC:IMP:SOUR``)."""

    LOW = "LOW"
    HIGH = "HIGH"


class ImpedanceFunction(Enum):
    """Primary and secondary parameter pair (``FUNC:IMP:TYPE``).

    The first letters name the primary quantity and the equivalent circuit,
    ``CPD`` is parallel capacitance with dissipation factor.
    """

    CPD = "CPD"
    CPQ = "CPQ"
    CPG = "CPG"
    CPRP = "CPRP"
    CSD = "CSD"
    CSQ = "CSQ"
    CSRS = "CSRS"
    LPD = "LPD"
    LPQ = "LPQ"
    LPG = "LPG"
    LPRP = "LPRP"
    LSD = "LSD"
    LSQ = "LSQ"
    LSRS = "LSRS"
    RX = "RX"
    RPB = "RPB"
    RDC = "RDC"
    MTD = "MTD"
    NTD = "NTD"
    ZTD = "ZTD"
    ZTR = "ZTR"
    GB = "GB"
    YTD = "YTD"
    YTR = "YTR"


class MeasurementFunction(Enum):
    """Component class measured in automatic mode (``FUNC:MEAS:TYPE``)."""

    INDUCTANCE = "L"
    CAPACITANCE = "C"
    RESISTANCE = "R"
    TRANSFORMER = "T"


class MeasurementMode(Enum):
    CONTINUOUS = "CONT"
    TRIGGERED = "TRIG"


class MeasurementTime(Enum):
    """Measurement aperture (``APER``)."""

    SHORT = "SHOR"
    MEDIUM = "MED"
    LONG = "LONG"
    DEFAULT = "DEF"


class IntervalType(Enum):
    """How the dynamic impedance sweep is subdivided (``DIM:INT:TYPE``)."""

    STEP = "STEP"
    POINTS = "POIN"


class SweepParameter(Enum):
    """Quantity swept in a dynamic impedance measurement (``DIM:SWE:PAR``)."""

    VOLTAGE = "VOLT"
    FREQUENCY = "FREQ"
    BIAS_VOLTAGE = "VBI"
    BIAS_CURRENT = "IBI"


class LogMode(Enum):
    """When measurement logging stops (``LOG:MODE``)."""

    UNLIMITED = "UNL"
    COUNT = "COUN"
    DURATION = "DUR"
    SPAN = "SPAN"


class UsbClass(Enum):
    CDC = "CDC"
    TMC = "TMC"


class HardcopyFormat(Enum):
    PNG = "PNG"


MEASUREMENT_MODE_ALIASES: dict[str, MeasurementMode] = {
    "CONTINUOUS": MeasurementMode.CONTINUOUS,
    "TRIGGERED": MeasurementMode.TRIGGERED,
}

MEASUREMENT_TIME_ALIASES: dict[str, MeasurementTime] = {
    "SHORT": MeasurementTime.SHORT,
    "MEDIUM": MeasurementTime.MEDIUM,
    "DEFAULT": MeasurementTime.DEFAULT,
}

INTERVAL_TYPE_ALIASES: dict[str, IntervalType] = {"POINTS": IntervalType.POINTS}

LOG_MODE_ALIASES: dict[str, LogMode] = {
    "UNLIMITED": LogMode.UNLIMITED,
    "COUNT": LogMode.COUNT,
    "DURATION": LogMode.DURATION,
}


class OperationStatus(BitRegister):
    """STATus:OPERation register.

    Bit names follow the SCPI 1999 layout. Instrument-specific bits above
    bit 7 are reported by :meth:`unnamed_bits`.
    """

    CALIBRATING = 1
    SETTLING = 2
    RANGING = 4
    SWEEPING = 8
    MEASURING = 16
    WAITING_FOR_TRIGGER = 32
    WAITING_FOR_ARM = 64
    CORRECTING = 128


class QuestionableStatus(BitRegister):
    """STATus:QUEStionable register, SCPI 1999 layout."""

    VOLTAGE = 1
    CURRENT = 2
    TIME = 4
    POWER = 8
    TEMPERATURE = 16
    FREQUENCY = 32
    PHASE = 64
    MODULATION = 128
    CALIBRATION = 256
