"""Enumerations for the Rigol DL3000 series.

Member values are the tokens sent in commands. Queries sometimes answer with
a different spelling (``CC`` for ``CURR``, ``MAXIMUM`` for ``MAX``); the
``*_ALIASES`` tables map those replies back to members.
"""

from __future__ import annotations

from enum import Enum


class DL3000Range(Enum):
    """Keyword levels accepted wherever a numeric level is."""

    MINIMUM = "MIN"
    MAXIMUM = "MAX"
    DEFAULT = "DEF"


class SourceFunction(Enum):
    """Static operating mode (``SOUR:FUNC``)."""

    CURRENT = "CURR"
    RESISTANCE = "RES"
    VOLTAGE = "VOLT"
    POWER = "POW"


class FunctionMode(Enum):
    """Input regulation mode (``SOUR:FUNC:MODE``)."""

    FIXED = "FIX"
    LIST = "LIST"
    WAVE = "WAV"
    BATTERY = "BATT"


class TransientMode(Enum):
    """Constant-current transient mode (``SOUR:CURR:TRAN:MODE``)."""

    CONTINUOUS = "CONT"
    PULSE = "PULS"
    TOGGLE = "TOGG"


RANGE_ALIASES: dict[str, DL3000Range] = {
    "MINIMUM": DL3000Range.MINIMUM,
    "MAXIMUM": DL3000Range.MAXIMUM,
    "DEFAULT": DL3000Range.DEFAULT,
}

SOURCE_FUNCTION_ALIASES: dict[str, SourceFunction] = {
    "CC": SourceFunction.CURRENT,
    "CR": SourceFunction.RESISTANCE,
    "CV": SourceFunction.VOLTAGE,
    "CP": SourceFunction.POWER,
    "CURRENT": SourceFunction.CURRENT,
    "RESISTANCE": SourceFunction.RESISTANCE,
    "VOLTAGE": SourceFunction.VOLTAGE,
    "POWER": SourceFunction.POWER,
}

FUNCTION_MODE_ALIASES: dict[str, FunctionMode] = {
    "FIXED": FunctionMode.FIXED,
    "WAVE": FunctionMode.WAVE,
    "BATTERY": FunctionMode.BATTERY,
}

TRANSIENT_MODE_ALIASES: dict[str, TransientMode] = {
    "CONTINUOUS": TransientMode.CONTINUOUS,
    "PULSE": TransientMode.PULSE,
    "TOGGLE": TransientMode.TOGGLE,
}
