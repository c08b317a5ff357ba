"""Rohde & Schwarz LCX series LCR meters.

Example:
    Measure a capacitor as Cp and D at 1 kHz::

        from labhal_rohde.lcx import ImpedanceFunction, create_instrument

        meter = create_instrument("TCPIP::192.168.1.70::hislip0::INSTR")
        meter.function.set_impedance_function(ImpedanceFunction.CPD)
        meter.test_signal.set_frequency(1000)
        print(meter.measurement.read())
"""

from labhal_rohde.lcx.data import ValuePair
from labhal_rohde.lcx.instrument import RohdeLCX, create_instrument
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
    StatusRegisterCommands,
    SystemCommands,
)
from labhal_rohde.lcx.types import (
    HardcopyFormat,
    ImpedanceFunction,
    ImpedanceSource,
    IntervalType,
    LogMode,
    MeasurementFunction,
    MeasurementMode,
    MeasurementTime,
    OperationStatus,
    QuestionableStatus,
    SweepParameter,
    UsbClass,
)

__all__ = [
    # Facade
    "RohdeLCX",
    "create_instrument",
    # Data
    "ValuePair",
    # Subsystems
    "BiasCommands",
    "BinningCommands",
    "CorrectionCommands",
    "DataCommands",
    "DisplayCommands",
    "DynamicImpedanceCommands",
    "FunctionCommands",
    "HardcopyCommands",
    "LogCommands",
    "MeasurementCommands",
    "SignalCommands",
    "StatusCommands",
    "StatusRegisterCommands",
    "SystemCommands",
    # Types
    "HardcopyFormat",
    "ImpedanceFunction",
    "ImpedanceSource",
    "IntervalType",
    "LogMode",
    "MeasurementFunction",
    "MeasurementMode",
    "MeasurementTime",
    "OperationStatus",
    "QuestionableStatus",
    "SweepParameter",
    "UsbClass",
]
