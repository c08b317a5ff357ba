"""Rigol MSO5000 series mixed-signal oscilloscopes.

Example:
    Read channel 1 as timed samples::

        from labhal_rigol.mso5000 import WaveformSource, create_instrument

        scope = create_instrument("TCPIP::192.168.1.60::5555::SOCKET")
        scope.control.single()
        for point in scope.waveform.data(WaveformSource.CHAN1):
            print(point)
"""

from labhal_rigol.mso5000.data import (
    WaveformDataPoint,
    WaveformPreamble,
    parse_waveform_data,
    strip_block_header,
)
from labhal_rigol.mso5000.instrument import RigolMSO5000, create_instrument
from labhal_rigol.mso5000.subsystems import (
    ChannelCommands,
    ControlCommands,
    DisplayCommands,
    EdgeTrigger,
    MeasureCommands,
    PulseTrigger,
    SlopeTrigger,
    TimebaseCommands,
    TriggerCommands,
    WaveformCommands,
)
from labhal_rigol.mso5000.types import (
    ChannelBandwidth,
    ChannelUnits,
    Coupling,
    DisplayType,
    EdgeSlope,
    EdgeSource,
    HorizontalReference,
    MeasureArea,
    MeasureCategory,
    MeasureChannel,
    MeasureFunction,
    MeasureItem,
    MeasureMode,
    MeasureType,
    PulseCondition,
    PulseSource,
    ScopeChannel,
    ScopeKey,
    SlopeCondition,
    SlopeSource,
    SlopeWindow,
    TimebaseMode,
    TriggerCoupling,
    TriggerMode,
    TriggerStatus,
    TriggerSweep,
    WaveformFormat,
    WaveformMode,
    WaveformSource,
)

__all__ = [
    # Facade
    "RigolMSO5000",
    "create_instrument",
    # Data
    "WaveformDataPoint",
    "WaveformPreamble",
    "parse_waveform_data",
    "strip_block_header",
    # Subsystems
    "ChannelCommands",
    "ControlCommands",
    "DisplayCommands",
    "EdgeTrigger",
    "MeasureCommands",
    "PulseTrigger",
    "SlopeTrigger",
    "TimebaseCommands",
    "TriggerCommands",
    "WaveformCommands",
    # Types
    "ChannelBandwidth",
    "ChannelUnits",
    "Coupling",
    "DisplayType",
    "EdgeSlope",
    "EdgeSource",
    "HorizontalReference",
    "MeasureArea",
    "MeasureCategory",
    "MeasureChannel",
    "MeasureFunction",
    "MeasureItem",
    "MeasureMode",
    "MeasureType",
    "PulseCondition",
    "PulseSource",
    "ScopeChannel",
    "ScopeKey",
    "SlopeCondition",
    "SlopeSource",
    "SlopeWindow",
    "TimebaseMode",
    "TriggerCoupling",
    "TriggerMode",
    "TriggerStatus",
    "TriggerSweep",
    "WaveformFormat",
    "WaveformMode",
    "WaveformSource",
]
