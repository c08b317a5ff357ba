"""Value objects parsed from DP800 replies.

Each object can be built directly from typed fields or from a raw reply with
``from_reply()``. ``render()`` produces a short human-readable summary for
logs and the command line; it is not the wire format and cannot be parsed
back.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from labhal_core.errors import FieldParseError, UnknownEnumValue
from labhal_core.types.common import format_plain
from labhal_scpi.reply import ReplyFormat, float_field, parse_float_field, split_fields

from labhal_rigol.dp800.types import DP800Channel

# CH1:30V/3A
_RATINGS_RE = re.compile(r"CH(\d+):(-?\d+(?:\.\d+)?)V/(\d+(?:\.\d+)?)A", re.IGNORECASE)

_READING = ReplyFormat(float_field("voltage"), float_field("current"), float_field("power"))


def _parse_ratings(text: str, index: int) -> tuple[DP800Channel, float, float]:
    match = _RATINGS_RE.fullmatch(text.strip())
    if match is None:
        raise FieldParseError(index, text, "channel ratings")
    number = int(match.group(1))
    try:
        channel = DP800Channel(number)
    except ValueError:
        raise UnknownEnumValue("DP800Channel", text, index=index) from None
    return channel, float(match.group(2)), float(match.group(3))


@dataclass(frozen=True)
class ChannelRatings:
    """Rated limits of one output channel (``INST?``).

    Attributes:
        channel: The channel.
        max_voltage: Rated voltage in volts.
        max_current: Rated current in amps.
    """

    channel: DP800Channel
    max_voltage: float
    max_current: float

    @classmethod
    def from_reply(cls, reply: str) -> ChannelRatings:
        """Parse a ``CH1:30V/3A`` reply.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldCountMismatch: If *reply* holds more than one field.
            FieldParseError: If the field does not have the ``CHn:xV/yA`` shape.
            UnknownEnumValue: If the channel number is not 1 to 3.
        """
        (text,) = split_fields(reply, 1)
        channel, max_voltage, max_current = _parse_ratings(text, 0)
        return cls(channel, max_voltage, max_current)

    def render(self) -> str:
        """Diagnostic rendering such as ``CH1: 30V 3A``.

        The rendering is for display only and is not accepted by
        :meth:`from_reply`.
        """
        return (
            f"{self.channel.name}: {format_plain(self.max_voltage)}V "
            f"{format_plain(self.max_current)}A"
        )

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ChannelSettings:
    """Programmed voltage and current of one channel (``APPL? CHn``).

    Attributes:
        channel: The channel.
        voltage: Voltage setpoint in volts.
        current: Current setpoint in amps.
        max_voltage: Rated voltage in volts.
        max_current: Rated current in amps.
    """

    channel: DP800Channel
    voltage: float
    current: float
    max_voltage: float
    max_current: float

    @classmethod
    def from_reply(cls, reply: str) -> ChannelSettings:
        """Parse a ``CH1:30V/3A,5.000,1.000`` reply.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldCountMismatch: If *reply* does not hold three fields.
            FieldParseError: If a field cannot be converted.
            UnknownEnumValue: If the channel number is not 1 to 3.
        """
        fields = split_fields(reply, 3)
        channel, max_voltage, max_current = _parse_ratings(fields[0], 0)
        voltage = parse_float_field(fields[1], 1)
        current = parse_float_field(fields[2], 2)
        return cls(channel, voltage, current, max_voltage, max_current)

    def render(self) -> str:
        """Diagnostic rendering such as ``CH1: 5V [30V MAX] 1A [3A MAX]``.

        The rendering is for display only and is not accepted by
        :meth:`from_reply`.
        """
        return (
            f"{self.channel.name}: {format_plain(self.voltage)}V "
            f"[{format_plain(self.max_voltage)}V MAX] {format_plain(self.current)}A "
            f"[{format_plain(self.max_current)}A MAX]"
        )

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class OutputReading:
    """Measured output of one channel (``MEAS:ALL?``)."""

    voltage: float
    current: float
    power: float

    @classmethod
    def from_reply(cls, reply: str) -> OutputReading:
        """Parse a ``voltage,current,power`` reply."""
        return cls(**_READING.parse(reply))

    def render(self) -> str:
        """Diagnostic rendering such as ``5V 1A 5W``; not a wire format."""
        return (
            f"{format_plain(self.voltage)}V {format_plain(self.current)}A "
            f"{format_plain(self.power)}W"
        )

    def __str__(self) -> str:
        return self.render()
