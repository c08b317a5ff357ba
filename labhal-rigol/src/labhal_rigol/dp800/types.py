"""Enumerations for the Rigol DP800 series."""

from __future__ import annotations

from enum import Enum, IntEnum


class DP800Channel(IntEnum):
    """Output channel. The value is the channel number used by ``INST:NSEL``
    and ``SOURn``; the name is the token used in ``CHn`` arguments."""

    CH1 = 1
    CH2 = 2
    CH3 = 3


class OutputMode(Enum):
    """Regulation mode reported by ``OUTP:MODE?``."""

    CONSTANT_VOLTAGE = "CV"
    CONSTANT_CURRENT = "CC"
    UNREGULATED = "UR"
