"""Waveform value objects for the MSO5000 series."""

from __future__ import annotations

from dataclasses import dataclass

from labhal_core.errors import EmptyReply, FieldParseError
from labhal_core.types.common import format_plain
from labhal_scpi.number import parse_numbers
from labhal_scpi.reply import ReplyFormat, enum_field, float_field, int_field

from labhal_rigol.mso5000.types import WaveformFormat, WaveformMode

_PREAMBLE = ReplyFormat(
    enum_field("format", WaveformFormat),
    enum_field("mode", WaveformMode),
    int_field("points", allow_float=True),
    int_field("averages", allow_float=True),
    float_field("x_increment"),
    float_field("x_origin"),
    float_field("x_reference"),
    float_field("y_increment"),
    int_field("y_origin", allow_float=True),
    int_field("y_reference", allow_float=True),
)


@dataclass(frozen=True)
class WaveformPreamble:
    """Scaling information for a waveform read (``WAV:PRE?``).

    Attributes:
        format: Data format of ``WAV:DATA?``.
        mode: Read mode (screen, maximum or raw memory).
        points: Number of points in the read.
        averages: Number of averages in average acquisition mode.
        x_increment: Time between two points in seconds.
        x_origin: Time of the first point relative to the trigger.
        x_reference: Reference point index for the X axis.
        y_increment: Voltage per ADC code.
        y_origin: Vertical offset in ADC codes.
        y_reference: Vertical reference in ADC codes.
    """

    format: WaveformFormat
    mode: WaveformMode
    points: int
    averages: int
    x_increment: float
    x_origin: float
    x_reference: float
    y_increment: float
    y_origin: int
    y_reference: int

    @classmethod
    def from_reply(cls, reply: str) -> WaveformPreamble:
        """Parse the ten comma-separated preamble fields.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldCountMismatch: If *reply* does not hold ten fields.
            FieldParseError: If a numeric field cannot be converted.
            UnknownEnumValue: If the format or mode ordinal is out of range.
        """
        return cls(**_PREAMBLE.parse(reply))

    def render(self) -> str:
        """Diagnostic one-line rendering of ``key=value`` pairs.

        The rendering is for display only and is not accepted by
        :meth:`from_reply`.
        """
        return (
            f"format={self.format.name} mode={self.mode.name} points={self.points} "
            f"averages={self.averages} x_increment={format_plain(self.x_increment)} "
            f"x_origin={format_plain(self.x_origin)} "
            f"x_reference={format_plain(self.x_reference)} "
            f"y_increment={format_plain(self.y_increment)} "
            f"y_origin={self.y_origin} y_reference={self.y_reference}"
        )

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class WaveformDataPoint:
    """One sample of a waveform read."""

    time: float
    voltage: float

    def render(self) -> str:
        """Diagnostic rendering such as ``[0.001] 0.5``; not a wire format."""
        return f"[{format_plain(self.time)}] {format_plain(self.voltage)}"

    def __str__(self) -> str:
        return self.render()


def strip_block_header(reply: str) -> str:
    """Remove an IEEE 488.2 definite-length block header if present.

    ``#9000000023`` announces nine length digits followed by the payload
    length. A reply without a leading ``#`` is returned stripped.

    Raises:
        FieldParseError: If the header is truncated or malformed.
    """
    text = reply.strip()
    if not text.startswith("#"):
        return text
    if len(text) < 2 or not text[1].isdigit():
        raise FieldParseError(0, reply, "block header")
    digits = int(text[1])
    length_text = text[2 : 2 + digits]
    if len(length_text) != digits or not length_text.isdigit():
        raise FieldParseError(0, reply, "block header")
    payload = text[2 + digits :]
    if digits:
        payload = payload[: int(length_text)]
    return payload.strip()


def parse_waveform_data(reply: str, preamble: WaveformPreamble) -> tuple[WaveformDataPoint, ...]:
    """Convert an ASCII ``WAV:DATA?`` reply into timed samples.

    Time starts at ``preamble.x_origin`` and advances by
    ``preamble.x_increment`` per point.

    Raises:
        EmptyReply: If the reply holds no samples.
        FieldParseError: If a sample is not a number.
    """
    payload = strip_block_header(reply).rstrip(",")
    if not payload:
        raise EmptyReply()
    voltages = parse_numbers(payload)
    return tuple(
        WaveformDataPoint(preamble.x_origin + index * preamble.x_increment, voltage)
        for index, voltage in enumerate(voltages)
    )
