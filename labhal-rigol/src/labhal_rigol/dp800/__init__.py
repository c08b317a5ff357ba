"""Rigol DP800 series programmable DC power supplies.

Modules:
    types: Channel and regulation mode enumerations.
    data: Value objects parsed from replies.
    subsystems: Command subsystems.
    instrument: The :class:`RigolDP800` facade and its factory.
    emulator: In-process SCPI emulator for testing without hardware.

Example:
    Drive the emulator through the facade::

        from labhal_scpi import ScpiConnection
        from labhal_rigol.dp800 import DP800Channel, RigolDP800, make_dp832_emulator

        psu = RigolDP800(ScpiConnection(make_dp832_emulator()))
        psu.channels.apply(DP800Channel.CH1, 5.0, 1.0)
        print(psu.channels.settings(DP800Channel.CH1))
"""

from labhal_rigol.dp800.data import ChannelRatings, ChannelSettings, OutputReading
from labhal_rigol.dp800.emulator import (
    DP800Emulator,
    DP800EmulatorConfig,
    make_dp811_emulator,
    make_dp832_emulator,
)
from labhal_rigol.dp800.instrument import (
    RigolDP800,
    create_emulated_instrument,
    create_instrument,
)
from labhal_rigol.dp800.subsystems import (
    ChannelCommands,
    MeasureCommands,
    OutputCommands,
    SourceCommands,
)
from labhal_rigol.dp800.types import DP800Channel, OutputMode

__all__ = [
    # Types
    "DP800Channel",
    "OutputMode",
    # Value objects
    "ChannelRatings",
    "ChannelSettings",
    "OutputReading",
    # Subsystems
    "ChannelCommands",
    "MeasureCommands",
    "OutputCommands",
    "SourceCommands",
    # Facade
    "RigolDP800",
    "create_instrument",
    "create_emulated_instrument",
    # Emulator
    "DP800Emulator",
    "DP800EmulatorConfig",
    "make_dp811_emulator",
    "make_dp832_emulator",
]
