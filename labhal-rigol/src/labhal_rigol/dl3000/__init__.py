"""Rigol DL3000 series DC electronic loads.

Example::

    from labhal_rigol.dl3000 import SourceFunction, create_instrument

    load = create_instrument("TCPIP::192.168.1.51::INSTR")
    load.source.set_function(SourceFunction.CURRENT)
    load.source.current.set_level(0.5)
    load.source.enable()
    print(load.measure.power())
"""

from labhal_rigol.dl3000.instrument import RigolDL3000, create_instrument
from labhal_rigol.dl3000.subsystems import (
    ConstantCurrent,
    ConstantMode,
    MeasureCommands,
    RangedConstantMode,
    SourceCommands,
    TransientCommands,
    parse_level,
)
from labhal_rigol.dl3000.types import DL3000Range, FunctionMode, SourceFunction, TransientMode

__all__ = [
    "ConstantCurrent",
    "ConstantMode",
    "DL3000Range",
    "FunctionMode",
    "MeasureCommands",
    "RangedConstantMode",
    "RigolDL3000",
    "SourceCommands",
    "SourceFunction",
    "TransientCommands",
    "TransientMode",
    "create_instrument",
    "parse_level",
]
