"""Bit-flag status registers.

Instrument status registers are fixed-width integers where each bit carries an
independent condition. :class:`BitRegister` keeps the raw integer and lets a
subclass name its bits as plain integer class constants::

    class QuestionableStatus(BitRegister):
        VOLTAGE_FAULT = 1
        OVERVOLTAGE = 4096

    status = QuestionableStatus(4097)
    status.is_set(QuestionableStatus.OVERVOLTAGE)   # True
    status.decompose()                              # {"VOLTAGE_FAULT", "OVERVOLTAGE"}
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from labhal_core.errors import EmptyReply, FieldParseError

_R = TypeVar("_R", bound="BitRegister")

_REGISTER_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class BitRegister:
    """Immutable snapshot of a bit-flag register.

    Subclasses declare named bits as upper-case integer class attributes. Bits
    without a name are kept in :attr:`value` and reported by
    :meth:`unnamed_bits`.

    Attributes:
        value: Raw register contents.
    """

    value: int

    WIDTH: ClassVar[int] = 16
    _bits: ClassVar[dict[str, int]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        bits = dict(cls._bits)
        for name, bit in vars(cls).items():
            if name == "WIDTH" or not name.isupper():
                continue
            if isinstance(bit, int) and not isinstance(bit, bool):
                if bit <= 0 or bit & (bit - 1):
                    raise ValueError(f"{cls.__name__}.{name} must be a single bit, got {bit}")
                bits[name] = bit
        cls._bits = bits

    def __post_init__(self) -> None:
        if not 0 <= self.value < (1 << self.WIDTH):
            raise ValueError(
                f"{type(self).__name__} value {self.value} does not fit in {self.WIDTH} bits"
            )

    @classmethod
    def from_reply(cls: type[_R], reply: str, *, index: int = 0) -> _R:
        """Parse a register query reply such as ``"4097"``.

        Args:
            reply: Decimal register contents as sent by the instrument.
            index: Field position reported on failure.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldParseError: If *reply* is not a non-negative integer that
                fits in :attr:`WIDTH` bits.
        """
        text = reply.strip()
        if not text:
            raise EmptyReply()
        if _REGISTER_RE.fullmatch(text) is None:
            raise FieldParseError(index, reply, cls.__name__)
        value = int(text)
        if value >= 1 << cls.WIDTH:
            raise FieldParseError(index, reply, cls.__name__)
        return cls(value)

    @classmethod
    def of(cls: type[_R], *bits: int) -> _R:
        """Build a register with the given bits set.

        Args:
            *bits: Bit constants of this register.

        Returns:
            A register whose value is the union of *bits*.
        """
        value = 0
        for bit in bits:
            value |= bit
        return cls(value)

    @classmethod
    def bit_names(cls) -> dict[str, int]:
        """Return the named bits of this register, keyed by name."""
        return dict(cls._bits)

    def is_set(self, bit: int) -> bool:
        """Return True if every bit in *bit* is set."""
        return bit != 0 and self.value & bit == bit

    def decompose(self) -> frozenset[str]:
        """Return the names of all active named bits."""
        return frozenset(name for name, bit in self._bits.items() if self.value & bit)

    def unnamed_bits(self) -> int:
        """Return the active bits that have no name in this register."""
        named = 0
        for bit in self._bits.values():
            named |= bit
        return self.value & ~named

    def render(self) -> str:
        """Diagnostic rendering listing the active bit names in bit order.

        This is not a wire format.
        """
        active = sorted(self.decompose(), key=self._bits.__getitem__)
        if not active:
            return f"{type(self).__name__}(0)"
        return f"{type(self).__name__}({'|'.join(active)})"

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.render()
