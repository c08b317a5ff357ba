"""Command subsystems of the Rigol DL3000 series.

The source tree is split by static mode: constant current (CC), voltage (CV),
resistance (CR) and power (CP) each get a :class:`ConstantMode` bound to the
matching ``SOUR`` node. Level setters accept either a number, sent with four
decimals, or a :class:`DL3000Range` keyword.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from labhal_scpi.number import format_bool, format_level, format_on_off, parse_number
from labhal_scpi.reply import parse_token
from labhal_scpi.subsystem import Subsystem

from labhal_rigol.dl3000.types import (
    FUNCTION_MODE_ALIASES,
    RANGE_ALIASES,
    SOURCE_FUNCTION_ALIASES,
    TRANSIENT_MODE_ALIASES,
    DL3000Range,
    FunctionMode,
    SourceFunction,
    TransientMode,
)

if TYPE_CHECKING:
    from labhal_scpi.connection import ScpiConnection

Level = Union[float, DL3000Range]


def parse_level(reply: str) -> Level:
    """Parse a reply that is either a number or a range keyword.

    Raises:
        EmptyReply: If *reply* is blank.
        FieldParseError: If *reply* is neither a number nor a keyword.
    """
    token = reply.strip().upper()
    for member in DL3000Range:
        if token == member.value:
            return member
    if token in RANGE_ALIASES:
        return RANGE_ALIASES[token]
    return parse_number(reply)


class _TreeSubsystem(Subsystem):
    """Subsystem whose commands all live under one ``SOUR`` node."""

    def __init__(self, connection: ScpiConnection, tree: str) -> None:
        super().__init__(connection)
        self._tree = tree

    @property
    def tree(self) -> str:
        """The command node, e.g. ``"SOUR:CURR"``."""
        return self._tree

    def _set(self, suffix: str, value: Level) -> None:
        self._conn.command(f"{self._tree}{suffix} {format_level(value, 4)}")

    def _get(self, suffix: str) -> float:
        return self._conn.query_number(f"{self._tree}{suffix}?")


class ConstantMode(_TreeSubsystem):
    """Setpoint and limits of one static mode.

    Args:
        connection: The instrument connection.
        tree: Mode keyword, ``"CURR"``, ``"VOLT"``, ``"RES"`` or ``"POW"``.
    """

    def __init__(self, connection: ScpiConnection, tree: str) -> None:
        super().__init__(connection, f"SOUR:{tree}")

    def set_level(self, value: Level) -> None:
        """Set the setpoint of this mode."""
        self._set("", value)

    def get_level(self) -> float:
        """Query the setpoint of this mode."""
        return self._get("")

    def set_voltage_limit(self, value: Level) -> None:
        """Set the voltage limit (``VLIM``)."""
        self._set(":VLIM", value)

    def get_voltage_limit(self) -> float:
        """Query the voltage limit."""
        return self._get(":VLIM")

    def set_current_limit(self, value: Level) -> None:
        """Set the current limit (``ILIM``)."""
        self._set(":ILIM", value)

    def get_current_limit(self) -> float:
        """Query the current limit."""
        return self._get(":ILIM")


class RangedConstantMode(ConstantMode):
    """A static mode that also has a selectable measurement range."""

    def set_range(self, value: Level) -> None:
        """Select the range (``RANG``)."""
        self._set(":RANG", value)

    def get_range(self) -> Level:
        """Query the range; a keyword reply is returned as :class:`DL3000Range`."""
        return parse_level(self._conn.query(f"{self._tree}:RANG?"))


class TransientCommands(_TreeSubsystem):
    """Constant-current transient settings (``SOUR:CURR:TRAN``)."""

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection, "SOUR:CURR:TRAN")

    def set_mode(self, mode: TransientMode) -> None:
        self._conn.command(f"{self._tree}:MODE {mode.value}")

    def get_mode(self) -> TransientMode:
        reply = self._conn.query(f"{self._tree}:MODE?")
        return parse_token(reply, TransientMode, aliases=TRANSIENT_MODE_ALIASES)

    def set_a_level(self, amps: Level) -> None:
        self._set(":ALEV", amps)

    def get_a_level(self) -> float:
        return self._get(":ALEV")

    def set_b_level(self, amps: Level) -> None:
        self._set(":BLEV", amps)

    def get_b_level(self) -> float:
        return self._get(":BLEV")

    def set_a_width(self, ms: Level) -> None:
        self._set(":AWID", ms)

    def get_a_width(self) -> float:
        return self._get(":AWID")

    def set_b_width(self, ms: Level) -> None:
        self._set(":BWID", ms)

    def get_b_width(self) -> float:
        return self._get(":BWID")

    def set_frequency(self, hz: Level) -> None:
        self._set(":FREQ", hz)

    def get_frequency(self) -> float:
        return self._get(":FREQ")

    def set_period(self, ms: Level) -> None:
        self._set(":PER", ms)

    def get_period(self) -> float:
        return self._get(":PER")

    def set_duty(self, percent: Level) -> None:
        """Set the A-level duty cycle in percent (``ADUT``)."""
        self._set(":ADUT", percent)

    def get_duty(self) -> float:
        return self._get(":ADUT")


class ConstantCurrent(RangedConstantMode):
    """Constant-current mode with slew rates, Von and transients.

    Attributes:
        transient: Transient settings.
    """

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection, "CURR")
        self.transient = TransientCommands(connection)

    def set_slew(self, amps_per_us: Level) -> None:
        """Set both rising and falling slew rates (``SLEW``)."""
        self._set(":SLEW", amps_per_us)

    def get_slew(self) -> float:
        return self._get(":SLEW")

    def set_positive_slew(self, amps_per_us: Level) -> None:
        self._set(":SLEW:POS", amps_per_us)

    def get_positive_slew(self) -> float:
        return self._get(":SLEW:POS")

    def set_negative_slew(self, amps_per_us: Level) -> None:
        self._set(":SLEW:NEG", amps_per_us)

    def get_negative_slew(self) -> float:
        return self._get(":SLEW:NEG")

    def set_von(self, volts: Level) -> None:
        """Set the voltage at which the load starts sinking (``VON``)."""
        self._set(":VON", volts)

    def get_von(self) -> float:
        return self._get(":VON")


class SourceCommands(Subsystem):
    """Input state, operating mode and the four static modes (``SOUR``).

    Attributes:
        current: Constant-current mode.
        voltage: Constant-voltage mode.
        resistance: Constant-resistance mode.
        power: Constant-power mode.
    """

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection)
        self.current = ConstantCurrent(connection)
        self.voltage = RangedConstantMode(connection, "VOLT")
        self.resistance = RangedConstantMode(connection, "RES")
        self.power = ConstantMode(connection, "POW")

    def set_input_enabled(self, enabled: bool) -> None:
        """Switch the load input on or off (``SOUR:INP``)."""
        self._conn.command(f"SOUR:INP {format_on_off(enabled)}")

    def enable(self) -> None:
        self.set_input_enabled(True)

    def disable(self) -> None:
        self.set_input_enabled(False)

    def is_input_enabled(self) -> bool:
        """Query the input state (``SOUR:INP?``)."""
        return self._conn.query_bool("SOUR:INP?")

    def set_function(self, function: SourceFunction) -> None:
        """Select the static operating mode (``SOUR:FUNC``)."""
        self._conn.command(f"SOUR:FUNC {function.value}")

    def get_function(self) -> SourceFunction:
        """Query the static operating mode; replies are ``CC``, ``CV``, ``CR`` or ``CP``."""
        reply = self._conn.query("SOUR:FUNC?")
        return parse_token(reply, SourceFunction, aliases=SOURCE_FUNCTION_ALIASES)

    def set_function_mode(self, mode: FunctionMode) -> None:
        """Select fixed, list, wave or battery operation (``SOUR:FUNC:MODE``)."""
        self._conn.command(f"SOUR:FUNC:MODE {mode.value}")

    def get_function_mode(self) -> FunctionMode:
        reply = self._conn.query("SOUR:FUNC:MODE?")
        return parse_token(reply, FunctionMode, aliases=FUNCTION_MODE_ALIASES)

    def set_transient_enabled(self, enabled: bool) -> None:
        """Enable or disable transient operation (``SOUR:TRAN:STAT``)."""
        self._conn.command(f"SOUR:TRAN:STAT {format_bool(enabled)}")

    def is_transient_enabled(self) -> bool:
        return self._conn.query_bool("SOUR:TRAN:STAT?")


class MeasureCommands(Subsystem):
    """Input measurements (``MEAS``)."""

    def voltage(self) -> float:
        return self._conn.query_number("MEAS:VOLT?")

    def voltage_max(self) -> float:
        return self._conn.query_number("MEAS:VOLT:MAX?")

    def voltage_min(self) -> float:
        return self._conn.query_number("MEAS:VOLT:MIN?")

    def current(self) -> float:
        return self._conn.query_number("MEAS:CURR?")

    def current_max(self) -> float:
        return self._conn.query_number("MEAS:CURR:MAX?")

    def current_min(self) -> float:
        return self._conn.query_number("MEAS:CURR:MIN?")

    def resistance(self) -> float:
        return self._conn.query_number("MEAS:RES?")

    def power(self) -> float:
        return self._conn.query_number("MEAS:POW?")

    def capacity(self) -> float:
        """Discharged capacity in battery mode, in mAh (``MEAS:CAP?``)."""
        return self._conn.query_number("MEAS:CAP?")

    def watt_hours(self) -> float:
        """Discharged energy in battery mode, in Wh (``MEAS:WATT?``)."""
        return self._conn.query_number("MEAS:WATT?")

    def discharge_time(self) -> float:
        """Discharge time in battery mode, in seconds (``MEAS:DISC?``)."""
        return self._conn.query_number("MEAS:DISC?")

    def elapsed_time(self) -> float:
        """Time since the input was switched on, in seconds (``MEAS:TIME?``)."""
        return self._conn.query_number("MEAS:TIME?")

    def wave_data(self) -> tuple[float, ...]:
        """Samples of the waveform display (``MEAS:WAV?``)."""
        return self._conn.query_numbers("MEAS:WAV?")
