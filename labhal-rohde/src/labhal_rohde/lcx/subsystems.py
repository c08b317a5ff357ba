"""Command subsystems of the Rohde & Schwarz LCX series.

Numbers are sent with Python's default float formatting. Setters that accept
a :class:`~labhal_scpi.number.ScpiSpecial` send its keyword (``MIN``,
``MAX``, ``DEF``) instead. File names, host names and display text are sent
as quoted string data.
"""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING, Union

from labhal_scpi.number import (
    ScpiSpecial,
    format_bool,
    format_number,
    format_on_off,
    format_string,
    parse_string,
)
from labhal_scpi.reply import parse_int_field, parse_token, split_fields
from labhal_scpi.subsystem import Subsystem

from labhal_rohde.lcx.data import ValuePair
from labhal_rohde.lcx.types import (
    INTERVAL_TYPE_ALIASES,
    LOG_MODE_ALIASES,
    MEASUREMENT_MODE_ALIASES,
    MEASUREMENT_TIME_ALIASES,
    HardcopyFormat,
    ImpedanceFunction,
    ImpedanceSource,
    IntervalType,
    LogMode,
    MeasurementFunction,
    MeasurementMode,
    MeasurementTime,
    OperationStatus,
    QuestionableStatus,
    SweepParameter,
    UsbClass,
)

if TYPE_CHECKING:
    from labhal_core.types.register import BitRegister
    from labhal_scpi.connection import ScpiConnection

logger = logging.getLogger(__name__)

Level = Union[float, ScpiSpecial]


def _level(value: Level) -> str:
    if isinstance(value, ScpiSpecial):
        return value.value
    return format_number(value)


def _limit_query(query: str, limit: ScpiSpecial | None) -> str:
    if limit is None:
        return query
    return f"{query} {limit.value}"


def _parse_ints(reply: str, expected: int) -> list[int]:
    fields = split_fields(reply, expected)
    return [parse_int_field(text, index) for index, text in enumerate(fields)]


class BiasCommands(Subsystem):
    """Internal and external DC bias (``BIAS``)."""

    def set_current(self, amps: float) -> None:
        """Set the internal bias current (``BIAS:CURR:LEV``)."""
        self._conn.command(f"BIAS:CURR:LEV {format_number(amps)}")

    def get_current(self) -> float:
        return self._conn.query_number("BIAS:CURR:LEV?")

    def set_voltage(self, volts: float) -> None:
        """Set the internal bias voltage (``BIAS:VOLT:LEV``)."""
        self._conn.command(f"BIAS:VOLT:LEV {format_number(volts)}")

    def get_voltage(self) -> float:
        return self._conn.query_number("BIAS:VOLT:LEV?")

    def set_enabled(self, enabled: bool) -> None:
        """Switch the internal bias on or off (``BIAS:STAT``)."""
        self._conn.command(f"BIAS:STAT {format_on_off(enabled)}")

    def is_enabled(self) -> bool:
        return self._conn.query_bool("BIAS:STAT?")

    def set_external_enabled(self, enabled: bool) -> None:
        """Allow an external bias voltage on the rear input (``BIAS:EXT:VOLT:STAT``)."""
        self._conn.command(f"BIAS:EXT:VOLT:STAT {format_on_off(enabled)}")

    def is_external_enabled(self) -> bool:
        return self._conn.query_bool("BIAS:EXT:VOLT:STAT?")

    def external_voltage(self) -> float:
        """Measure the externally applied bias voltage (``BIAS:EXT:MEAS:VOLT?``)."""
        return self._conn.query_number("BIAS:EXT:MEAS:VOLT?")


class CorrectionCommands(Subsystem):
    """Open, short and load compensation (``CORR``).

    Working-point ("spot") corrections are numbered from 1.
    """

    def set_cable_length(self, meters: float) -> None:
        """Set the test lead length used for cable compensation (``CORR:LENG``)."""
        self._conn.command(f"CORR:LENG {format_number(meters)}")

    def get_cable_length(self) -> float:
        return self._conn.query_number("CORR:LENG?")

    # -- Open ----------------------------------------------------------------

    def open_mode(self) -> str:
        """Query the open correction mode as reported by the instrument."""
        return parse_string(self._conn.query("CORR:OPEN:MODE?"))

    def set_open_enabled(self, enabled: bool) -> None:
        self._conn.command(f"CORR:OPEN:STAT {format_on_off(enabled)}")

    def execute_open(self) -> None:
        """Run the open correction over the whole frequency range."""
        self._conn.command("CORR:OPEN:EXEC")

    # -- Short ---------------------------------------------------------------

    def short_mode(self) -> str:
        return parse_string(self._conn.query("CORR:SHOR:MODE?"))

    def set_short_enabled(self, enabled: bool) -> None:
        self._conn.command(f"CORR:SHOR:STAT {format_on_off(enabled)}")

    def execute_short(self) -> None:
        self._conn.command("CORR:SHOR:EXEC")

    # -- Load ----------------------------------------------------------------

    def load_mode(self) -> str:
        return parse_string(self._conn.query("CORR:LOAD:MODE?"))

    def set_load_enabled(self, enabled: bool) -> None:
        self._conn.command(f"CORR:LOAD:STAT {format_on_off(enabled)}")

    def set_spot_load_standard(self, spot: int, primary: float, secondary: float) -> None:
        """Enter the reference values of the load standard for one working point.

        Args:
            spot: Working point number.
            primary: Reference value of the primary parameter.
            secondary: Reference value of the secondary parameter.
        """
        self._conn.command(
            f"CORR:SPOT{spot}:LOAD:STAN {format_number(primary)},{format_number(secondary)}"
        )

    def execute_spot_load(self, spot: int) -> None:
        self._conn.command(f"CORR:SPOT{spot}:LOAD:EXEC")

    def execute_spot_open(self, spot: int) -> None:
        self._conn.command(f"CORR:SPOT{spot}:OPEN:EXEC")

    def execute_spot_short(self, spot: int) -> None:
        self._conn.command(f"CORR:SPOT{spot}:SHOR:EXEC")


class DataCommands(Subsystem):
    """Log file management (``DATA``)."""

    def log_file(self) -> str:
        """Return the contents of the current log file (``DATA:DATA?``)."""
        return self._conn.query("DATA:DATA?")

    def delete(self, path: str) -> None:
        """Delete a log file on the instrument (``DATA:DEL``)."""
        self._conn.command(f"DATA:DEL {format_string(path)}")

    def files(self) -> tuple[str, ...]:
        """List the stored log files (``DATA:LIST?``)."""
        reply = self._conn.query("DATA:LIST?")
        if not reply.strip():
            return ()
        return tuple(parse_string(name) for name in split_fields(reply))

    def points(self) -> int:
        """Number of readings in the current log (``DATA:POIN?``)."""
        return self._conn.query_int("DATA:POIN?", allow_float=True)


class DynamicImpedanceCommands(Subsystem):
    """Dynamic impedance sweeps (``DIM``)."""

    def execute(self) -> None:
        """Start a sweep (``DIM:EXEC``)."""
        self._conn.command("DIM:EXEC")

    def abort(self) -> None:
        self._conn.command("DIM:ABOR")

    def set_points(self, points: int) -> None:
        """Set the number of sweep points (``DIM:INT:POIN``)."""
        self._conn.command(f"DIM:INT:POIN {points}")

    def set_step(self, step: float) -> None:
        """Set the sweep step size (``DIM:INT:STEP``)."""
        self._conn.command(f"DIM:INT:STEP {format_number(step)}")

    def set_interval_type(self, interval: IntervalType) -> None:
        self._conn.command(f"DIM:INT:TYPE {interval.value}")

    def get_interval_type(self) -> IntervalType:
        reply = self._conn.query("DIM:INT:TYPE?")
        return parse_token(reply, IntervalType, aliases=INTERVAL_TYPE_ALIASES)

    def set_start(self, value: float) -> None:
        """Set the first sweep value (``DIM:SWE:MIN``)."""
        self._conn.command(f"DIM:SWE:MIN {format_number(value)}")

    def set_stop(self, value: float) -> None:
        """Set the last sweep value (``DIM:SWE:MAX``)."""
        self._conn.command(f"DIM:SWE:MAX {format_number(value)}")

    def set_sweep_parameter(self, parameter: SweepParameter) -> None:
        self._conn.command(f"DIM:SWE:PAR {parameter.value}")

    def get_sweep_parameter(self) -> SweepParameter:
        return parse_token(self._conn.query("DIM:SWE:PAR?"), SweepParameter)


class DisplayCommands(Subsystem):
    """Display brightness and messages (``DISP``)."""

    def set_brightness(self, level: float) -> None:
        self._conn.command(f"DISP:BRIG {format_number(level)}")

    def get_brightness(self) -> float:
        return self._conn.query_number("DISP:BRIG?")

    def show_text(self, text: str) -> None:
        """Show a message box with *text* (``DISP:TEXT``)."""
        self._conn.command(f"DISP:TEXT {format_string(text)}")

    def clear_text(self) -> None:
        """Close the message box (``DISP:WIND:TEXT:CLE``)."""
        self._conn.command("DISP:WIND:TEXT:CLE")


class FunctionCommands(Subsystem):
    """Measurement type and impedance range (``FUNC``)."""

    def set_auto_range(self, enabled: bool) -> None:
        """Let the instrument select the impedance range (``FUNC:IMP:RANG:AUTO``)."""
        self._conn.command(f"FUNC:IMP:RANG:AUTO {format_bool(enabled)}")

    def is_auto_range(self) -> bool:
        return self._conn.query_bool("FUNC:IMP:RANG:AUTO?")

    def set_range_hold(self, enabled: bool) -> None:
        """Keep the current impedance range (``FUNC:IMP:RANG:HOLD``)."""
        self._conn.command(f"FUNC:IMP:RANG:HOLD {format_bool(enabled)}")

    def set_range(self, ohms: int) -> None:
        """Select the impedance range by its nominal value (``FUNC:IMP:RANG:VAL``)."""
        self._conn.command(f"FUNC:IMP:RANG:VAL {ohms}")

    def get_range(self) -> float:
        return self._conn.query_number("FUNC:IMP:RANG:VAL?")

    def set_impedance_source(self, source: ImpedanceSource) -> None:
        self._conn.command(f"FUNC:IMP:SOUR {source.value}")

    def get_impedance_source(self) -> ImpedanceSource:
        return parse_token(self._conn.query("FUNC:IMP:SOUR?"), ImpedanceSource)

    def set_impedance_function(self, function: ImpedanceFunction) -> None:
        """Select the primary and secondary parameters (``FUNC:IMP:TYPE``)."""
        self._conn.command(f"FUNC:IMP:TYPE {function.value}")

    def get_impedance_function(self) -> ImpedanceFunction:
        return parse_token(self._conn.query("FUNC:IMP:TYPE?"), ImpedanceFunction)

    def set_measurement_function(self, function: MeasurementFunction) -> None:
        """Select the component class for automatic measurement (``FUNC:MEAS:TYPE``)."""
        self._conn.command(f"FUNC:MEAS:TYPE {function.value}")

    def get_measurement_function(self) -> MeasurementFunction:
        return parse_token(self._conn.query("FUNC:MEAS:TYPE?"), MeasurementFunction)


class BinningCommands(Subsystem):
    """Component binning handler (``HAND``)."""

    def set_enabled(self, enabled: bool) -> None:
        """Activate the binning measurement (``HAND:STAT``)."""
        self._conn.command(f"HAND:STAT {format_on_off(enabled)}")

    def samples(self) -> int:
        """Number of samples sorted into bins (``HAND:BIN:STAT?``)."""
        return self._conn.query_int("HAND:BIN:STAT?", allow_float=True)

    def sample_count(self) -> int:
        return self._conn.query_int("HAND:BIN:STAT:COUN?", allow_float=True)

    def reset_statistics(self) -> None:
        self._conn.command("HAND:BIN:STAT:RES")

    def set_config_path(self, path: str) -> None:
        """Load a binning configuration file (``HAND:CONF:PATH``)."""
        self._conn.command(f"HAND:CONF:PATH {format_string(path)}")

    def get_config_path(self) -> str:
        return parse_string(self._conn.query("HAND:CONF:PATH?"))


class HardcopyCommands(Subsystem):
    """Screenshot settings (``HCOP``)."""

    def get_format(self) -> HardcopyFormat:
        return parse_token(self._conn.query("HCOP:FORM?"), HardcopyFormat)

    def width(self) -> int:
        """Screenshot width in pixels (``HCOP:SIZE:X?``)."""
        return self._conn.query_int("HCOP:SIZE:X?", allow_float=True)

    def height(self) -> int:
        """Screenshot height in pixels (``HCOP:SIZE:Y?``)."""
        return self._conn.query_int("HCOP:SIZE:Y?", allow_float=True)


class LogCommands(Subsystem):
    """Measurement logging (``LOG``).

    Count, duration and interval accept ``ScpiSpecial.MIN`` or
    ``ScpiSpecial.MAX`` in place of a number.
    """

    def set_mode(self, mode: LogMode) -> None:
        self._conn.command(f"LOG:MODE {mode.value}")

    def get_mode(self) -> LogMode:
        return parse_token(self._conn.query("LOG:MODE?"), LogMode, aliases=LOG_MODE_ALIASES)

    def set_count(self, readings: Level) -> None:
        """Set the number of readings logged in count mode (``LOG:COUN``)."""
        self._conn.command(f"LOG:COUN {_level(readings)}")

    def get_count(self) -> float:
        return self._conn.query_number("LOG:COUN?")

    def set_duration(self, seconds: Level) -> None:
        """Set the logging duration in duration mode (``LOG:DUR``)."""
        self._conn.command(f"LOG:DUR {_level(seconds)}")

    def get_duration(self) -> float:
        return self._conn.query_number("LOG:DUR?")

    def set_interval(self, seconds: Level) -> None:
        """Set the time between two readings (``LOG:INT``)."""
        self._conn.command(f"LOG:INT {_level(seconds)}")

    def get_interval(self) -> float:
        return self._conn.query_number("LOG:INT?")

    def set_file_name(self, name: str) -> None:
        self._conn.command(f"LOG:FNAM {format_string(name)}")

    def get_file_name(self) -> str:
        return parse_string(self._conn.query("LOG:FNAM?"))

    def set_start_time(self, start: datetime.datetime) -> None:
        """Set when logging starts (``LOG:STIM``)."""
        self._conn.command(
            f"LOG:STIM {start.year},{start.month},{start.day},"
            f"{start.hour},{start.minute},{start.second}"
        )

    def set_enabled(self, enabled: bool) -> None:
        """Start or stop logging (``LOG:STAT``)."""
        self._conn.command(f"LOG:STAT {format_on_off(enabled)}")

    def is_enabled(self) -> bool:
        return self._conn.query_bool("LOG:STAT?")


class MeasurementCommands(Subsystem):
    """Triggering and reading measurement results."""

    def initiate(self) -> None:
        """Start a new measurement (``INIT:IMM``)."""
        self._conn.command("INIT:IMM")

    def read(self) -> ValuePair:
        """Start a measurement and return its result (``READ?``)."""
        return ValuePair.from_reply(self._conn.query("READ?"))

    def read_impedance(self) -> ValuePair:
        """Start a measurement and return impedance and phase (``READ:IMP?``)."""
        return ValuePair.from_reply(self._conn.query("READ:IMP?"))

    def fetch(self) -> ValuePair:
        """Return the last valid result without a new measurement (``FETC?``)."""
        return ValuePair.from_reply(self._conn.query("FETC?"))

    def fetch_impedance(self) -> ValuePair:
        return ValuePair.from_reply(self._conn.query("FETC:IMP?"))

    def accuracy(self) -> ValuePair:
        """Accuracy of the primary and secondary result (``MEAS:ACC?``)."""
        return ValuePair.from_reply(self._conn.query("MEAS:ACC?"))

    def current(self) -> float:
        """Measured test current (``MEAS:CURR?``); NaN is passed through."""
        return self._conn.query_number("MEAS:CURR?")

    def voltage(self) -> float:
        """Measured test voltage (``MEAS:VOLT?``); NaN is passed through."""
        return self._conn.query_number("MEAS:VOLT?")

    def set_mode(self, mode: MeasurementMode) -> None:
        self._conn.command(f"MEAS:MODE {mode.value}")

    def get_mode(self) -> MeasurementMode:
        reply = self._conn.query("MEAS:MODE?")
        return parse_token(reply, MeasurementMode, aliases=MEASUREMENT_MODE_ALIASES)

    def set_trigger_delay(self, seconds: float) -> None:
        self._conn.command(f"MEAS:TRIG:DEL {format_number(seconds)}")

    def get_trigger_delay(self) -> float:
        return self._conn.query_number("MEAS:TRIG:DEL?")


class StatusRegisterCommands(Subsystem):
    """One SCPI status register node with its enable and transition filters.

    Args:
        connection: The instrument connection.
        node: Register node, ``"STAT:OPER"`` or ``"STAT:QUES"``.
        register: Register type used for the returned snapshots.
    """

    def __init__(
        self, connection: ScpiConnection, node: str, register: type[BitRegister]
    ) -> None:
        super().__init__(connection)
        self._node = node
        self._register = register

    def condition(self) -> BitRegister:
        """Current condition register (``COND?``); reading does not clear it."""
        return self._conn.query_register(f"{self._node}:COND?", self._register)

    def event(self) -> BitRegister:
        """Read and clear the event register (``EVEN?``)."""
        return self._conn.query_register(f"{self._node}:EVEN?", self._register)

    def set_enable(self, mask: BitRegister) -> None:
        self._conn.command(f"{self._node}:ENAB {mask.value}")

    def get_enable(self) -> BitRegister:
        return self._conn.query_register(f"{self._node}:ENAB?", self._register)

    def set_positive_transition(self, mask: BitRegister) -> None:
        """Latch events on a 0 to 1 transition of these bits (``PTR``)."""
        self._conn.command(f"{self._node}:PTR {mask.value}")

    def get_positive_transition(self) -> BitRegister:
        return self._conn.query_register(f"{self._node}:PTR?", self._register)

    def set_negative_transition(self, mask: BitRegister) -> None:
        """Latch events on a 1 to 0 transition of these bits (``NTR``)."""
        self._conn.command(f"{self._node}:NTR {mask.value}")

    def get_negative_transition(self) -> BitRegister:
        return self._conn.query_register(f"{self._node}:NTR?", self._register)


class StatusCommands(Subsystem):
    """Status reporting system (``STAT``).

    Attributes:
        operation: The operation status register.
        questionable: The questionable status register.
    """

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection)
        self.operation = StatusRegisterCommands(connection, "STAT:OPER", OperationStatus)
        self.questionable = StatusRegisterCommands(connection, "STAT:QUES", QuestionableStatus)

    def preset(self) -> None:
        """Reset the enable and transition filters to their defaults (``STAT:PRES``)."""
        self._conn.command("STAT:PRES")


class SystemCommands(Subsystem):
    """General instrument settings (``SYST`` and ``INT``)."""

    def set_usb_class(self, usb_class: UsbClass) -> None:
        """Select the USB device class for remote control (``INT:USB:CLAS``)."""
        self._conn.command(f"INT:USB:CLAS {usb_class.value}")

    # -- Beeper --------------------------------------------------------------

    def set_warning_beep(self, enabled: bool) -> None:
        self._conn.command(f"SYST:BEEP:WARN:STAT {format_on_off(enabled)}")

    def is_warning_beep(self) -> bool:
        return self._conn.query_bool("SYST:BEEP:WARN:STAT?")

    def beep_warning(self) -> None:
        """Sound the warning beep once (``SYST:BEEP:WARN:IMM``)."""
        self._conn.command("SYST:BEEP:WARN:IMM")

    def set_completion_beep(self, enabled: bool) -> None:
        """Beep when a measurement completes (``SYST:BEEP:COMP:STAT``)."""
        self._conn.command(f"SYST:BEEP:COMP:STAT {format_on_off(enabled)}")

    def is_completion_beep(self) -> bool:
        return self._conn.query_bool("SYST:BEEP:COMP:STAT?")

    def beep_completion(self) -> None:
        self._conn.command("SYST:BEEP:COMP:IMM")

    # -- LAN -----------------------------------------------------------------

    def set_ip_address(self, address: str) -> None:
        self._conn.command(f"SYST:COMM:LAN:ADDR {format_string(address)}")

    def set_subnet_mask(self, mask: str) -> None:
        self._conn.command(f"SYST:COMM:LAN:SMAS {format_string(mask)}")

    def set_gateway(self, address: str) -> None:
        self._conn.command(f"SYST:COMM:LAN:DGAT {format_string(address)}")

    def set_dhcp(self, enabled: bool) -> None:
        self._conn.command(f"SYST:COMM:LAN:DHCP {format_on_off(enabled)}")

    def set_hostname(self, name: str) -> None:
        self._conn.command(f"SYST:COMM:LAN:HOST {format_string(name)}")

    def mac_address(self) -> str:
        return parse_string(self._conn.query("SYST:COMM:LAN:MAC?"))

    def apply_lan(self) -> None:
        """Apply the pending LAN settings (``SYST:COMM:LAN:APPL``)."""
        self._conn.command("SYST:COMM:LAN:APPL")

    def discard_lan(self) -> None:
        """Drop the pending LAN settings (``SYST:COMM:LAN:DISC``)."""
        self._conn.command("SYST:COMM:LAN:DISC")

    def restart_network(self) -> None:
        logger.info("Restarting the instrument network interface")
        self._conn.command("SYST:COMM:LAN:RES")

    def set_vcn_port(self, port: int) -> None:
        """Set the port of the VXI-11 core network service (``SYST:COMM:NETW:VCN:PORT``)."""
        self._conn.command(f"SYST:COMM:NETW:VCN:PORT {port}")

    def set_vcn_enabled(self, enabled: bool) -> None:
        self._conn.command(f"SYST:COMM:NETW:VCN:STAT {format_on_off(enabled)}")

    # -- Clock ---------------------------------------------------------------

    def set_date(self, date: datetime.date) -> None:
        self._conn.command(f"SYST:DATE {date.year},{date.month},{date.day}")

    def get_date(self) -> datetime.date:
        """Query the instrument date (``SYST:DATE?``).

        Raises:
            FieldCountMismatch: If the reply is not ``year,month,day``.
            FieldParseError: If a field is not an integer.
            ValueError: If the fields do not form a valid date.
        """
        year, month, day = _parse_ints(self._conn.query("SYST:DATE?"), 3)
        return datetime.date(year, month, day)

    def set_time(self, time: datetime.time) -> None:
        self._conn.command(f"SYST:TIME {time.hour},{time.minute},{time.second}")

    def get_time(self) -> datetime.time:
        hour, minute, second = _parse_ints(self._conn.query("SYST:TIME?"), 3)
        return datetime.time(hour, minute, second)

    def uptime(self) -> str:
        """Time since power on, as reported by the instrument (``SYST:UPT?``)."""
        return parse_string(self._conn.query("SYST:UPT?"))

    # -- Front panel and lifecycle -------------------------------------------

    def hardware_version(self) -> str:
        return parse_string(self._conn.query("SYST:HW:VERS?"))

    def set_key_brightness(self, level: float) -> None:
        self._conn.command(f"SYST:KEY:BRIG {format_number(level)}")

    def local(self) -> None:
        """Return to local operation and unlock the front panel (``SYST:LOC``)."""
        self._conn.command("SYST:LOC")

    def remote(self) -> None:
        self._conn.command("SYST:REM")

    def lock(self) -> None:
        """Remote operation with the front panel locked (``SYST:RWL``)."""
        self._conn.command("SYST:RWL")

    def restart(self) -> None:
        logger.info("Restarting instrument")
        self._conn.command("SYST:REST")

    def save_default_settings(self, file_name: str) -> None:
        """Store the current settings as power-on defaults (``SYST:SETT:DEF:SAVE``)."""
        self._conn.command(f"SYST:SETT:DEF:SAVE {format_string(file_name)}")


class SignalCommands(Subsystem):
    """Test signal level, frequency and aperture.

    Getters take an optional :class:`~labhal_scpi.number.ScpiSpecial` to
    query the limit (``FREQ:CW? MAX``) instead of the setting.
    """

    def set_aperture(self, aperture: MeasurementTime) -> None:
        self._conn.command(f"APER {aperture.value}")

    def get_aperture(self) -> MeasurementTime:
        reply = self._conn.query("APER?")
        return parse_token(reply, MeasurementTime, aliases=MEASUREMENT_TIME_ALIASES)

    def set_current(self, amps: Level) -> None:
        self._conn.command(f"CURR:LEV {_level(amps)}")

    def get_current(self, limit: ScpiSpecial | None = None) -> float:
        return self._conn.query_number(_limit_query("CURR:LEV?", limit))

    def set_voltage(self, volts: Level) -> None:
        self._conn.command(f"VOLT:LEV {_level(volts)}")

    def get_voltage(self, limit: ScpiSpecial | None = None) -> float:
        return self._conn.query_number(_limit_query("VOLT:LEV?", limit))

    def set_frequency(self, hertz: Level) -> None:
        self._conn.command(f"FREQ:CW {_level(hertz)}")

    def get_frequency(self, limit: ScpiSpecial | None = None) -> float:
        return self._conn.query_number(_limit_query("FREQ:CW?", limit))
