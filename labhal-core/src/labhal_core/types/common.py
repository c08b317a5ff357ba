"""Common types used across labhal modules.

Classes:
    InstrumentType: The broad class of instrument a facade drives.
    InstrumentIdentity: Instrument identification metadata.

Functions:
    format_plain: Render a number for diagnostics without a trailing ``.0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InstrumentType(Enum):
    """Kinds of instrument supported by labhal."""

    LCR_METER = "lcr_meter"
    LOAD = "load"
    OSCILLOSCOPE = "oscilloscope"
    POWER_SUPPLY = "power_supply"
    FUNCTION_GENERATOR = "function_generator"


@dataclass(frozen=True)
class InstrumentIdentity:
    """Instrument identification metadata.

    Represents the four standard fields returned by the SCPI ``*IDN?`` query.
    Used by the bench to verify that connected instruments match the expected
    configuration.

    Attributes:
        manufacturer: Instrument manufacturer name (e.g., "RIGOL TECHNOLOGIES").
        model: Instrument model number or name (e.g., "DP832").
        serial: Serial number string.
        firmware: Firmware or hardware version string.

    Example:
        >>> identity = InstrumentIdentity(
        ...     manufacturer="RIGOL TECHNOLOGIES",
        ...     model="DP832",
        ...     serial="DP8C000000001",
        ...     firmware="00.01.16"
        ... )
    """

    manufacturer: str
    model: str
    serial: str
    firmware: str


def format_plain(value: float) -> str:
    """Format a number the shortest way that still reads back exactly.

    Integral values lose their trailing ``.0`` so ``5.0`` renders as ``5``.
    Used for human-readable renderings only, never for SCPI commands.

    Args:
        value: The number to format.

    Returns:
        The formatted string.
    """
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text
