"""Rigol DP800 power supply emulator.

Provides an in-process SCPI emulator implementing the ``ScpiTransport``
protocol, so a :class:`~labhal_rigol.dp800.instrument.RigolDP800` can be
driven without hardware::

    from labhal_scpi import ScpiConnection
    from labhal_rigol.dp800 import RigolDP800, make_dp832_emulator

    psu = RigolDP800(ScpiConnection(make_dp832_emulator()))
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from labhal_core.types.common import format_plain

from labhal_rigol.status import QuestionableStatus

# ---------------------------------------------------------------------------
# Long-form -> short-form SCPI keyword map
# ---------------------------------------------------------------------------

_LONG_TO_SHORT: dict[str, str] = {
    "VOLTAGE": "VOLT",
    "CURRENT": "CURR",
    "OUTPUT": "OUTP",
    "MEASURE": "MEAS",
    "INSTRUMENT": "INST",
    "LEVEL": "LEV",
    "IMMEDIATE": "IMM",
    "AMPLITUDE": "AMPL",
    "SYSTEM": "SYST",
    "ERROR": "ERR",
    "PROTECTION": "PROT",
    "APPLY": "APPL",
    "NSELECT": "NSEL",
    "POWER": "POWE",
    "TRACK": "TRAC",
    "ALARM": "ALAR",
    "VALUE": "VAL",
    "TRIGGERED": "TRIG",
    "TRIPPED": "TRIP",
    "CLEAR": "CLE",
    "STATUS": "STAT",
    "STATE": "STAT",
    "QUESTIONABLE": "QUES",
    "CONDITION": "COND",
    "ENABLE": "ENAB",
    "EVENT": "EVEN",
    "PRESET": "PRES",
}

# Segments that are optional and dropped during normalization
_OPTIONAL_SEGMENTS: set[str] = {"LEV", "IMM", "AMPL", "EVEN", "SCAL"}

# Leading SOURce[n] node carrying an explicit channel number
_SOURCE_RE = re.compile(r"^:?SOUR(?:CE)?(\d*):", re.IGNORECASE)

_CHANNEL_RE = re.compile(r"^CH(\d+)$", re.IGNORECASE)


def _normalize_header(header: str) -> str:
    """Normalize a SCPI header to canonical short form.

    1. Uppercase
    2. Strip leading colon
    3. Split on ``:``
    4. Map long forms to short forms
    5. Drop optional segments
    6. Rejoin with ``:``
    """
    upper = header.upper()
    if upper.startswith(":"):
        upper = upper[1:]
    segments = upper.split(":")
    short_segments = [_LONG_TO_SHORT.get(seg, seg) for seg in segments]
    filtered = [seg for seg in short_segments if seg not in _OPTIONAL_SEGMENTS]
    return ":".join(filtered)


class _ParameterError(Exception):
    """Raised by handlers on an unusable argument."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DP800EmulatorConfig:
    """Configuration for a DP800 emulator instance.

    Args:
        identity: ``*IDN?`` response string.
        ratings: ``(max_voltage, max_current)`` for each channel, CH1 first.
    """

    identity: str
    ratings: tuple[tuple[float, float], ...]

    def __post_init__(self) -> None:
        if not self.identity:
            raise ValueError("identity must be non-empty")
        if not 1 <= len(self.ratings) <= 3:
            raise ValueError("ratings must describe 1 to 3 channels")
        for max_voltage, max_current in self.ratings:
            if max_voltage == 0:
                raise ValueError("max_voltage must be non-zero")
            if max_current <= 0:
                raise ValueError("max_current must be > 0")

    @property
    def num_channels(self) -> int:
        """Number of output channels."""
        return len(self.ratings)


# ---------------------------------------------------------------------------
# Internal channel state
# ---------------------------------------------------------------------------


@dataclass
class _ChannelState:
    max_voltage: float
    max_current: float
    voltage: float = 0.0
    current: float = 0.0
    voltage_step: float = 0.001
    current_step: float = 0.001
    voltage_triggered: float = 0.0
    current_triggered: float = 0.0
    output_enabled: bool = False
    tracking: bool = False
    ovp_enabled: bool = False
    ovp_value: float = 0.0
    ovp_tripped: bool = False
    ocp_enabled: bool = False
    ocp_value: float = 0.0
    ocp_tripped: bool = False
    measured_voltage: float | None = None
    measured_current: float | None = None

    def __post_init__(self) -> None:
        self.ovp_value = abs(self.max_voltage) * 1.1
        self.ocp_value = self.max_current * 1.1

    def ratings(self, number: int) -> str:
        return f"CH{number}:{format_plain(self.max_voltage)}V/{format_plain(self.max_current)}A"

    def output_voltage(self) -> float:
        if self.measured_voltage is not None:
            return self.measured_voltage
        return self.voltage if self.output_enabled else 0.0

    def output_current(self) -> float:
        if self.measured_current is not None:
            return self.measured_current
        return 0.0


# ---------------------------------------------------------------------------
# Emulator
# ---------------------------------------------------------------------------


class DP800Emulator:
    """In-process DP800 emulator implementing ``ScpiTransport``.

    Protection is evaluated whenever a setpoint, threshold or measurement
    override changes: an enabled OVP or OCP whose threshold is exceeded by
    an enabled output trips, switches the output off and latches the
    matching questionable status bit.

    Args:
        config: Emulator configuration specifying model characteristics.
    """

    def __init__(self, config: DP800EmulatorConfig) -> None:
        self._config = config
        self._channels: list[_ChannelState] = []
        self._selected_channel: int = 1
        self._response_buffer: str = ""
        self._error_queue: list[tuple[int, str]] = []
        self._ques_enable: int = 0
        self._ques_event: int = 0
        self._reset()

        # Build dispatch tables; handlers take (channel, args)
        self._set_handlers: dict[str, Callable[[int | None, str], None]] = {
            "INST:NSEL": self._set_selected,
            "APPL": self._set_apply,
            "OUTP": self._set_output,
            "OUTP:TRAC": self._set_tracking,
            "OUTP:OVP": self._set_ovp_enabled,
            "OUTP:OVP:VAL": self._set_ovp_value,
            "OUTP:OVP:CLE": self._clear_ovp,
            "OUTP:OCP": self._set_ocp_enabled,
            "OUTP:OCP:VAL": self._set_ocp_value,
            "OUTP:OCP:CLE": self._clear_ocp,
            "VOLT": self._set_voltage,
            "CURR": self._set_current,
            "VOLT:STEP": self._set_voltage_step,
            "CURR:STEP": self._set_current_step,
            "VOLT:TRIG": self._set_voltage_triggered,
            "CURR:TRIG": self._set_current_triggered,
            "VOLT:PROT": self._set_ovp_value,
            "CURR:PROT": self._set_ocp_value,
            "VOLT:PROT:STAT": self._set_ovp_enabled,
            "CURR:PROT:STAT": self._set_ocp_enabled,
            "VOLT:PROT:CLE": self._clear_ovp,
            "CURR:PROT:CLE": self._clear_ocp,
            "STAT:QUES:ENAB": self._set_ques_enable,
            "STAT:PRES": self._preset,
        }

        self._query_handlers: dict[str, Callable[[int | None, str], str]] = {
            "INST:NSEL?": self._get_selected,
            "INST?": self._get_ratings,
            "APPL?": self._get_apply,
            "MEAS?": self._measure_voltage,
            "MEAS:VOLT?": self._measure_voltage,
            "MEAS:CURR?": self._measure_current,
            "MEAS:POWE?": self._measure_power,
            "MEAS:ALL?": self._measure_all,
            "OUTP?": self._get_output,
            "OUTP:MODE?": self._get_mode,
            "OUTP:TRAC?": self._get_tracking,
            "OUTP:OVP?": self._get_ovp_enabled,
            "OUTP:OVP:VAL?": self._get_ovp_value,
            "OUTP:OVP:ALAR?": self._get_ovp_tripped,
            "OUTP:OCP?": self._get_ocp_enabled,
            "OUTP:OCP:VAL?": self._get_ocp_value,
            "OUTP:OCP:ALAR?": self._get_ocp_tripped,
            "VOLT?": self._get_voltage,
            "CURR?": self._get_current,
            "VOLT:STEP?": self._get_voltage_step,
            "CURR:STEP?": self._get_current_step,
            "VOLT:TRIG?": self._get_voltage_triggered,
            "CURR:TRIG?": self._get_current_triggered,
            "VOLT:PROT?": self._get_ovp_value,
            "CURR:PROT?": self._get_ocp_value,
            "VOLT:PROT:STAT?": self._get_ovp_enabled,
            "CURR:PROT:STAT?": self._get_ocp_enabled,
            "VOLT:PROT:TRIP?": self._get_ovp_tripped,
            "CURR:PROT:TRIP?": self._get_ocp_tripped,
            "STAT:QUES:COND?": self._get_ques_condition,
            "STAT:QUES:ENAB?": self._get_ques_enable,
            "STAT:QUES?": self._get_ques_event,
        }

    # -- Transport interface ------------------------------------------------

    def write(self, message: str) -> None:
        """Process a SCPI command or query string."""
        line = message.strip()
        if not line:
            return

        channel, line = self._strip_source(line)
        is_query, header, args = self._parse_line(line)

        if self._handle_common_command(header, is_query):
            return

        self._dispatch(header, args, is_query, channel)

    def read(self) -> str:
        """Return and clear the buffered response."""
        resp = self._response_buffer
        self._response_buffer = ""
        return resp

    def close(self) -> None:
        """Close the emulator (no-op for in-process transport)."""

    # -- Test helpers -------------------------------------------------------

    def set_measured_voltage(self, value: float, channel: int = 1) -> None:
        """Override the voltage reported by ``MEAS?`` for *channel*."""
        self._get_channel_state(channel).measured_voltage = value
        self._check_protection(channel)

    def set_measured_current(self, value: float, channel: int = 1) -> None:
        """Override the current reported by ``MEAS:CURR?`` for *channel*."""
        self._get_channel_state(channel).measured_current = value
        self._check_protection(channel)

    @property
    def selected_channel(self) -> int:
        """The channel targeted by channel-less commands."""
        return self._selected_channel

    # -- Line parsing -------------------------------------------------------

    def _strip_source(self, line: str) -> tuple[int | None, str]:
        """Remove a leading ``SOURn:`` node and return its channel number."""
        match = _SOURCE_RE.match(line)
        if match is None:
            return None, line
        number = int(match.group(1)) if match.group(1) else None
        return number, line[match.end() :]

    def _parse_line(self, line: str) -> tuple[bool, str, str]:
        """Parse a SCPI line into (is_query, header, args)."""
        is_query = "?" in line
        if is_query:
            qmark_idx = line.index("?")
            header = line[: qmark_idx + 1]
            args = line[qmark_idx + 1 :].strip()
        else:
            parts = line.split(None, 1)
            header = parts[0]
            args = parts[1] if len(parts) > 1 else ""
        return is_query, header, args

    def _handle_common_command(self, header: str, is_query: bool) -> bool:
        """Handle IEEE 488.2 and SYST:ERR? commands. Returns True if handled."""
        upper_header = header.upper()
        ieee_handlers: dict[str, str] = {
            "*IDN?": self._config.identity,
            "*OPC?": "1",
            "*TST?": "0",
        }
        if upper_header in ieee_handlers:
            self._response_buffer = ieee_handlers[upper_header]
            return True
        if upper_header == "*RST":
            self._reset()
            return True
        if upper_header == "*CLS":
            self._error_queue.clear()
            self._ques_event = 0
            return True
        if is_query and _normalize_header(header.rstrip("?")) == "SYST:ERR":
            self._response_buffer = self._pop_error()
            return True
        return False

    def _dispatch(self, header: str, args: str, is_query: bool, channel: int | None) -> None:
        """Dispatch a normalized command or query to handler tables."""
        if is_query:
            norm_key = _normalize_header(header.rstrip("?")) + "?"
            handler = self._query_handlers.get(norm_key)
        else:
            norm_key = _normalize_header(header)
            handler = self._set_handlers.get(norm_key)  # type: ignore[assignment]
        if handler is None:
            self._error_queue.append((-113, "Undefined header"))
            return
        if channel is not None and not 1 <= channel <= self._config.num_channels:
            self._error_queue.append((-221, "Settings conflict"))
            return
        try:
            result = handler(channel, args)
        except _ParameterError:
            self._error_queue.append((-224, "Illegal parameter value"))
            return
        if is_query:
            self._response_buffer = str(result)

    # -- Private helpers ----------------------------------------------------

    def _get_channel_state(self, channel: int) -> _ChannelState:
        if channel < 1 or channel > self._config.num_channels:
            raise ValueError(f"Channel {channel} out of range (1-{self._config.num_channels})")
        return self._channels[channel - 1]

    def _split_channel(self, channel: int | None, args: str) -> tuple[int, str]:
        """Resolve the target channel from ``SOURn``, a ``CHn`` argument or the selection.

        Returns:
            The channel number and the remaining arguments.
        """
        parts = [p.strip() for p in args.split(",", 1)] if args else [""]
        match = _CHANNEL_RE.match(parts[0])
        if match is not None:
            channel = int(match.group(1))
            args = parts[1] if len(parts) > 1 else ""
        if channel is None:
            channel = self._selected_channel
        if not 1 <= channel <= self._config.num_channels:
            raise _ParameterError(args)
        return channel, args

    def _target(self, channel: int | None, args: str) -> tuple[_ChannelState, str]:
        number, rest = self._split_channel(channel, args)
        return self._channels[number - 1], rest

    @staticmethod
    def _float(args: str) -> float:
        try:
            return float(args.strip())
        except ValueError:
            raise _ParameterError(args) from None

    @staticmethod
    def _bool(args: str) -> bool:
        token = args.strip().upper()
        if token in ("ON", "1"):
            return True
        if token in ("OFF", "0"):
            return False
        raise _ParameterError(args)

    def _reset(self) -> None:
        """Reset all channels to defaults."""
        self._channels = [
            _ChannelState(max_voltage=v, max_current=i) for v, i in self._config.ratings
        ]
        self._selected_channel = 1

    def _pop_error(self) -> str:
        if self._error_queue:
            code, msg = self._error_queue.pop(0)
            return f'{code},"{msg}"'
        return '0,"No error"'

    def _check_protection(self, number: int) -> None:
        ch = self._channels[number - 1]
        if not ch.output_enabled:
            return
        if ch.ovp_enabled and abs(ch.output_voltage()) > ch.ovp_value:
            ch.ovp_tripped = True
            ch.output_enabled = False
            self._ques_event |= QuestionableStatus.OVERVOLTAGE
        elif ch.ocp_enabled and ch.output_current() > ch.ocp_value:
            ch.ocp_tripped = True
            ch.output_enabled = False
            self._ques_event |= QuestionableStatus.OVERCURRENT

    # -- Set handlers -------------------------------------------------------

    def _set_selected(self, channel: int | None, args: str) -> None:
        try:
            number = int(args.strip())
        except ValueError:
            raise _ParameterError(args) from None
        if not 1 <= number <= self._config.num_channels:
            raise _ParameterError(args)
        self._selected_channel = number

    def _set_apply(self, channel: int | None, args: str) -> None:
        """Parse ``APPL CHn,<v>,<i>``."""
        number, rest = self._split_channel(channel, args)
        parts = [p.strip() for p in rest.split(",")]
        if len(parts) != 2:
            raise _ParameterError(args)
        ch = self._channels[number - 1]
        ch.voltage = self._float(parts[0])
        ch.current = self._float(parts[1])
        self._check_protection(number)

    def _set_output(self, channel: int | None, args: str) -> None:
        number, rest = self._split_channel(channel, args)
        ch = self._channels[number - 1]
        enabled = self._bool(rest)
        if enabled and (ch.ovp_tripped or ch.ocp_tripped):
            self._error_queue.append((-221, "Settings conflict"))
            return
        ch.output_enabled = enabled
        self._check_protection(number)

    def _set_tracking(self, channel: int | None, args: str) -> None:
        ch, rest = self._target(channel, args)
        ch.tracking = self._bool(rest)

    def _set_ovp_enabled(self, channel: int | None, args: str) -> None:
        number, rest = self._split_channel(channel, args)
        self._channels[number - 1].ovp_enabled = self._bool(rest)
        self._check_protection(number)

    def _set_ovp_value(self, channel: int | None, args: str) -> None:
        number, rest = self._split_channel(channel, args)
        self._channels[number - 1].ovp_value = self._float(rest)
        self._check_protection(number)

    def _clear_ovp(self, channel: int | None, args: str) -> None:
        ch, _ = self._target(channel, args)
        ch.ovp_tripped = False

    def _set_ocp_enabled(self, channel: int | None, args: str) -> None:
        number, rest = self._split_channel(channel, args)
        self._channels[number - 1].ocp_enabled = self._bool(rest)
        self._check_protection(number)

    def _set_ocp_value(self, channel: int | None, args: str) -> None:
        number, rest = self._split_channel(channel, args)
        self._channels[number - 1].ocp_value = self._float(rest)
        self._check_protection(number)

    def _clear_ocp(self, channel: int | None, args: str) -> None:
        ch, _ = self._target(channel, args)
        ch.ocp_tripped = False

    def _set_voltage(self, channel: int | None, args: str) -> None:
        number, rest = self._split_channel(channel, args)
        self._channels[number - 1].voltage = self._float(rest)
        self._check_protection(number)

    def _set_current(self, channel: int | None, args: str) -> None:
        number, rest = self._split_channel(channel, args)
        self._channels[number - 1].current = self._float(rest)
        self._check_protection(number)

    def _set_voltage_step(self, channel: int | None, args: str) -> None:
        ch, rest = self._target(channel, args)
        ch.voltage_step = self._float(rest)

    def _set_current_step(self, channel: int | None, args: str) -> None:
        ch, rest = self._target(channel, args)
        ch.current_step = self._float(rest)

    def _set_voltage_triggered(self, channel: int | None, args: str) -> None:
        ch, rest = self._target(channel, args)
        ch.voltage_triggered = self._float(rest)

    def _set_current_triggered(self, channel: int | None, args: str) -> None:
        ch, rest = self._target(channel, args)
        ch.current_triggered = self._float(rest)

    def _set_ques_enable(self, channel: int | None, args: str) -> None:
        try:
            self._ques_enable = int(args.strip())
        except ValueError:
            raise _ParameterError(args) from None

    def _preset(self, channel: int | None, args: str) -> None:
        self._ques_enable = 0
        self._ques_event = 0

    # -- Query handlers -----------------------------------------------------

    def _get_selected(self, channel: int | None, args: str) -> str:
        return str(self._selected_channel)

    def _get_ratings(self, channel: int | None, args: str) -> str:
        number = self._selected_channel
        return self._channels[number - 1].ratings(number)

    def _get_apply(self, channel: int | None, args: str) -> str:
        number, _ = self._split_channel(channel, args)
        ch = self._channels[number - 1]
        return f"{ch.ratings(number)},{ch.voltage:.3f},{ch.current:.3f}"

    def _measure_voltage(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.output_voltage():.4f}"

    def _measure_current(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.output_current():.4f}"

    def _measure_power(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.output_voltage() * ch.output_current():.4f}"

    def _measure_all(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        v = ch.output_voltage()
        i = ch.output_current()
        return f"{v:.4f},{i:.4f},{v * i:.4f}"

    def _get_output(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return "ON" if ch.output_enabled else "OFF"

    def _get_mode(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        if not ch.output_enabled:
            return "UR"
        if ch.current > 0 and ch.output_current() >= ch.current:
            return "CC"
        return "CV"

    def _get_tracking(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return "ON" if ch.tracking else "OFF"

    def _get_ovp_enabled(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return "ON" if ch.ovp_enabled else "OFF"

    def _get_ovp_value(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.ovp_value:.3f}"

    def _get_ovp_tripped(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return "YES" if ch.ovp_tripped else "NO"

    def _get_ocp_enabled(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return "ON" if ch.ocp_enabled else "OFF"

    def _get_ocp_value(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.ocp_value:.3f}"

    def _get_ocp_tripped(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return "YES" if ch.ocp_tripped else "NO"

    def _get_voltage(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.voltage:.3f}"

    def _get_current(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.current:.3f}"

    def _get_voltage_step(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.voltage_step:.3f}"

    def _get_current_step(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.current_step:.3f}"

    def _get_voltage_triggered(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.voltage_triggered:.3f}"

    def _get_current_triggered(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        return f"{ch.current_triggered:.3f}"

    def _get_ques_condition(self, channel: int | None, args: str) -> str:
        ch, _ = self._target(channel, args)
        condition = 0
        if ch.ovp_tripped:
            condition |= QuestionableStatus.OVERVOLTAGE
        if ch.ocp_tripped:
            condition |= QuestionableStatus.OVERCURRENT
        return str(condition)

    def _get_ques_enable(self, channel: int | None, args: str) -> str:
        return str(self._ques_enable)

    def _get_ques_event(self, channel: int | None, args: str) -> str:
        event = self._ques_event
        self._ques_event = 0
        return str(event)


# ---------------------------------------------------------------------------
# Factory functions
# ---------------------------------------------------------------------------


def make_dp832_emulator(serial: str = "DP8C000000001") -> DP800Emulator:
    """Create a DP832 triple-output emulator (30 V/3 A, 30 V/3 A, 5 V/3 A).

    Args:
        serial: Serial number for the ``*IDN?`` response.
    """
    config = DP800EmulatorConfig(
        identity=f"RIGOL TECHNOLOGIES,DP832,{serial},00.01.16",
        ratings=((30.0, 3.0), (30.0, 3.0), (5.0, 3.0)),
    )
    return DP800Emulator(config)


def make_dp811_emulator(serial: str = "DP8A000000001") -> DP800Emulator:
    """Create a DP811 single-output emulator (20 V/10 A range).

    Args:
        serial: Serial number for the ``*IDN?`` response.
    """
    config = DP800EmulatorConfig(
        identity=f"RIGOL TECHNOLOGIES,DP811,{serial},00.01.16",
        ratings=((20.0, 10.0),),
    )
    return DP800Emulator(config)
