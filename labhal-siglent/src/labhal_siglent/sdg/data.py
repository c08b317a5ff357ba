"""Value objects parsed from SDG replies.

SDG replies echo the command header (``C1:OUTP ON,LOAD,HZ,PLRT,NOR``).
:func:`strip_header` removes it; replies without a header are accepted
unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from labhal_core.errors import EmptyReply, FieldCountMismatch, FieldParseError
from labhal_scpi.number import format_on_off
from labhal_scpi.reply import parse_bool_field, parse_int_field, parse_token, split_fields

from labhal_siglent.sdg.types import (
    HarmonicType,
    HarmonicUnit,
    Interpolation,
    ModulationType,
    Polarity,
    SampleRateMode,
    WaveParameter,
    WaveType,
)

E = TypeVar("E", bound=Enum)

# Leading number of a value with a unit suffix, e.g. 100HZ or 0.707Vrms.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def strip_header(reply: str) -> str:
    """Remove the echoed command header from *reply*.

    The header is the first space-delimited token when it holds no comma.
    """
    text = reply.strip()
    head, sep, rest = text.partition(" ")
    if sep and "," not in head:
        return rest.strip()
    return text


def _leading_number(text: str, index: int, what: str) -> float:
    if not text:
        raise EmptyReply(what)
    match = _NUMBER_RE.match(text)
    if match is None:
        raise FieldParseError(index, text, "number")
    return float(match.group(0))


def _expect_keyword(text: str, index: int, keyword: str) -> None:
    if text.upper() != keyword:
        raise FieldParseError(index, text, f"{keyword} keyword")


@dataclass(frozen=True)
class OutputState:
    """Output switch, load setting and polarity of one channel (``Cn:OUTP?``).

    Attributes:
        enabled: True if the output is on.
        load: ``HZ`` for high impedance, or the load in ohms as sent by the
            instrument.
        polarity: Output polarity.
    """

    enabled: bool
    load: str
    polarity: Polarity

    @classmethod
    def from_reply(cls, reply: str) -> OutputState:
        """Parse a ``C1:OUTP ON,LOAD,HZ,PLRT,NOR`` reply.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldCountMismatch: If the payload does not hold five fields.
            FieldParseError: If a field or keyword is malformed.
            UnknownEnumValue: If the polarity token is unknown.
        """
        fields = split_fields(strip_header(reply), 5)
        enabled = parse_bool_field(fields[0], 0)
        _expect_keyword(fields[1], 1, "LOAD")
        if not fields[2]:
            raise FieldParseError(2, fields[2], "load")
        _expect_keyword(fields[3], 3, "PLRT")
        polarity = parse_token(fields[4], Polarity, index=4)
        return cls(enabled, fields[2].upper(), polarity)

    def render(self) -> str:
        """Diagnostic rendering such as ``ON load=HZ polarity=NOR``; not a wire format."""
        return f"{format_on_off(self.enabled)} load={self.load} polarity={self.polarity.value}"

    def __str__(self) -> str:
        return self.render()


class BasicWave(Mapping[WaveParameter, str]):
    """Basic waveform settings of one channel (``Cn:BSWV?``).

    Maps each reported :class:`WaveParameter` to its raw value, which may
    carry a unit suffix (``100HZ``, ``2V``). Use :meth:`number` for the
    numeric part.
    """

    def __init__(self, values: Mapping[WaveParameter, str], *, offset: int = 0) -> None:
        self._values = dict(values)
        self._offset = offset

    @classmethod
    def from_reply(cls, reply: str) -> BasicWave:
        """Parse a ``C1:BSWV WVTP,SINE,FRQ,100HZ,...`` reply.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldCountMismatch: If the fields do not form key/value pairs.
            FieldParseError: If a key is repeated.
            UnknownEnumValue: If a key is not a known parameter.
        """
        return cls._from_fields(split_fields(strip_header(reply)), 0, reply)

    @classmethod
    def _from_fields(cls, fields: list[str], offset: int, raw: str) -> BasicWave:
        # offset is the reply index of fields[0], for error reporting.
        if len(fields) % 2:
            raise FieldCountMismatch(len(fields) + 1, len(fields), raw)
        values: dict[WaveParameter, str] = {}
        for position in range(0, len(fields), 2):
            index = offset + position
            parameter = parse_token(fields[position], WaveParameter, index=index)
            if parameter in values:
                raise FieldParseError(index, fields[position], "unique parameter")
            values[parameter] = fields[position + 1]
        return cls(values, offset=offset)

    def __getitem__(self, parameter: WaveParameter) -> str:
        return self._values[parameter]

    def __iter__(self) -> Iterator[WaveParameter]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"BasicWave({self._values!r})"

    @property
    def wave_type(self) -> WaveType:
        """The waveform type (``WVTP``).

        Raises:
            KeyError: If the reply did not report a wave type.
            UnknownEnumValue: If the type is unknown.
        """
        return parse_token(self[WaveParameter.WAVE_TYPE], WaveType)

    def number(self, parameter: WaveParameter) -> float:
        """Return the numeric part of a value, ignoring its unit suffix.

        Raises:
            KeyError: If *parameter* was not reported.
            EmptyReply: If the value is blank.
            FieldParseError: If the value does not start with a number.
        """
        text = self[parameter]
        index = self._offset + 2 * list(self._values).index(parameter) + 1
        return _leading_number(text, index, parameter.value)

    def render(self) -> str:
        """Diagnostic rendering such as ``WVTP=SINE FRQ=100HZ``; not a wire format."""
        return " ".join(f"{key.value}={value}" for key, value in self._values.items())

    def __str__(self) -> str:
        return self.render()


_MODULATION_TOKENS = frozenset(member.value for member in ModulationType)


class ModeSettings(Mapping[str, str]):
    """Settings reported by a ``KEY,value`` list reply.

    Burst (``Cn:BTWV?``), sweep (``Cn:SWWV?``), modulation (``Cn:MDWV?``),
    harmonic, sample rate, coupling and counter replies all have this shape.
    Keys are upper-cased and values kept raw. Fields after a ``CARR`` key
    describe the carrier and are parsed into :attr:`carrier`. A bare
    modulation type in a key position (``STATE,ON,AM,MDSP,SINE``) is kept
    as :attr:`modulation`.

    Attributes:
        carrier: Carrier waveform settings, or None if the reply had none.
        modulation: Modulation type, or None if the reply had none.
    """

    def __init__(
        self,
        values: Mapping[str, str],
        *,
        carrier: BasicWave | None = None,
        modulation: ModulationType | None = None,
        indices: Mapping[str, int] | None = None,
    ) -> None:
        self._values = {key.upper(): value for key, value in values.items()}
        self._indices = dict(indices or {})
        self.carrier = carrier
        self.modulation = modulation

    @classmethod
    def from_reply(cls, reply: str) -> ModeSettings:
        """Parse a reply such as ``C1:BTWV STATE,ON,PRD,0.01S,CARR,WVTP,SINE``.

        Raises:
            EmptyReply: If *reply* is blank.
            FieldCountMismatch: If a key has no value.
            FieldParseError: If a key is blank or repeated.
            UnknownEnumValue: If a carrier key is not a known parameter.
        """
        fields = split_fields(strip_header(reply))
        values: dict[str, str] = {}
        indices: dict[str, int] = {}
        carrier = None
        modulation = None
        position = 0
        while position < len(fields):
            key = fields[position].upper()
            if key == "CARR":
                carrier = BasicWave._from_fields(fields[position + 1 :], position + 1, reply)
                break
            if modulation is None and key in _MODULATION_TOKENS:
                modulation = ModulationType(key)
                position += 1
                continue
            if position + 1 == len(fields):
                raise FieldCountMismatch(len(fields) + 1, len(fields), reply)
            if not key or key in values:
                raise FieldParseError(position, fields[position], "unique key")
            values[key] = fields[position + 1]
            indices[key] = position + 1
            position += 2
        return cls(values, carrier=carrier, modulation=modulation, indices=indices)

    def __getitem__(self, key: str) -> str:
        return self._values[key.upper()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ModeSettings({self._values!r}, carrier={self.carrier!r})"

    def _field(self, key: str) -> tuple[str, int]:
        key = key.upper()
        if key not in self._values:
            raise EmptyReply(f"{key} field")
        return self._values[key], self._indices.get(key, 0)

    def number(self, key: str) -> float:
        """Numeric part of a value, ignoring its unit suffix.

        Raises:
            EmptyReply: If *key* was not reported or its value is blank.
            FieldParseError: If the value does not start with a number.
        """
        text, index = self._field(key)
        return _leading_number(text, index, key)

    def integer(self, key: str) -> int:
        text, index = self._field(key)
        return parse_int_field(text, index)

    def flag(self, key: str) -> bool:
        """Parse an ``ON``/``OFF`` value."""
        text, index = self._field(key)
        return parse_bool_field(text, index)

    def token(self, key: str, enum_cls: type[E]) -> E:
        text, index = self._field(key)
        return parse_token(text, enum_cls, index=index)

    def render(self) -> str:
        """Diagnostic rendering such as ``STATE=ON PRD=0.01S``; not a wire format."""
        parts = [f"{key}={value}" for key, value in self._values.items()]
        if self.modulation is not None:
            parts.insert(0, self.modulation.value)
        if self.carrier is not None:
            parts.append(f"CARR[{self.carrier.render()}]")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class SampleRate:
    """Arbitrary waveform playback settings (``Cn:SRATE?``).

    Attributes:
        mode: DDS or TrueArb playback.
        rate: TrueArb sample rate in Sa/s, None in DDS mode.
        interpolation: TrueArb interpolation, None in DDS mode.
    """

    mode: SampleRateMode
    rate: float | None = None
    interpolation: Interpolation | None = None

    @classmethod
    def from_reply(cls, reply: str) -> SampleRate:
        """Parse ``C1:SRATE MODE,TARB,VALUE,1000000Sa/s,INTER,HOLD``."""
        settings = ModeSettings.from_reply(reply)
        mode = settings.token("MODE", SampleRateMode)
        if mode is SampleRateMode.DDS:
            return cls(mode)
        return cls(mode, settings.number("VALUE"), settings.token("INTER", Interpolation))

    def render(self) -> str:
        if self.mode is SampleRateMode.DDS:
            return "DDS"
        interpolation = self.interpolation.value if self.interpolation else "?"
        return f"TARB {self.rate}Sa/s {interpolation}"


@dataclass(frozen=True)
class Harmonic:
    """Harmonic content added to a sine output (``Cn:HARM``).

    Attributes:
        enabled: True if harmonics are switched on.
        type: Even, odd or all harmonics.
        order: Highest harmonic order.
        level: Harmonic amplitude.
        phase: Harmonic phase in degrees.
        unit: Whether :attr:`level` is in volts or dBc.
    """

    enabled: bool
    type: HarmonicType
    order: int
    level: float
    phase: float = 0.0
    unit: HarmonicUnit = HarmonicUnit.VOLTS

    @classmethod
    def from_reply(cls, reply: str) -> Harmonic:
        """Parse ``C1:HARM HARMSTATE,ON,HARMTYPE,EVEN,HARMORDER,2,HARMAMP,0.1V,...``.

        The level key (``HARMAMP`` or ``HARMDBC``) selects the unit.

        Raises:
            EmptyReply: If the reply or one of its fields is missing.
            FieldParseError: If a field is malformed.
            UnknownEnumValue: If the harmonic type is unknown.
        """
        settings = ModeSettings.from_reply(reply)
        unit = HarmonicUnit.DBC if HarmonicUnit.DBC.value in settings else HarmonicUnit.VOLTS
        return cls(
            enabled=settings.flag("HARMSTATE"),
            type=settings.token("HARMTYPE", HarmonicType),
            order=settings.integer("HARMORDER"),
            level=settings.number(unit.value),
            phase=settings.number("HARMPHASE"),
            unit=unit,
        )

    def render(self) -> str:
        """Diagnostic rendering such as ``ON EVEN order=2 HARMAMP=0.1``."""
        return (
            f"{format_on_off(self.enabled)} {self.type.value} order={self.order} "
            f"{self.unit.value}={self.level} phase={self.phase}"
        )
