"""Value objects parsed from LCX replies."""

from __future__ import annotations

from dataclasses import dataclass

from labhal_core.types.common import format_plain
from labhal_scpi.reply import ReplyFormat, float_field

_PAIR = ReplyFormat(float_field("primary"), float_field("secondary"))


@dataclass(frozen=True)
class ValuePair:
    """Primary and secondary measurement result.

    ``READ?`` and ``FETC?`` report the two quantities of the selected
    impedance function, e.g. capacitance and dissipation factor for
    :attr:`~labhal_rohde.lcx.types.ImpedanceFunction.CPD`. ``MEAS:ACC?``
    reports the accuracy of both in the same shape.

    NaN results are kept as NaN.

    Attributes:
        primary: First value of the reply.
        secondary: Second value of the reply.
    """

    primary: float
    secondary: float

    @classmethod
    def from_reply(cls, reply: str) -> ValuePair:
        """Parse an ``a,b`` reply.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldCountMismatch: If *reply* does not hold two fields.
            FieldParseError: If a field is not a number.
        """
        return cls(**_PAIR.parse(reply))

    def render(self) -> str:
        """Diagnostic rendering such as ``1e-06, 0.002``; not a wire format."""
        return f"{format_plain(self.primary)}, {format_plain(self.secondary)}"

    def __str__(self) -> str:
        return self.render()
