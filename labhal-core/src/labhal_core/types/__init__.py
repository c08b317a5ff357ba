"""Core data types for labhal.

Submodules:
    common: Instrument identity and type, diagnostic number formatting
    register: Bit-flag status register base class

All types are exported from this package for convenience.
"""

from labhal_core.types.common import InstrumentIdentity, InstrumentType, format_plain
from labhal_core.types.register import BitRegister

__all__ = [
    "BitRegister",
    "InstrumentIdentity",
    "InstrumentType",
    "format_plain",
]
