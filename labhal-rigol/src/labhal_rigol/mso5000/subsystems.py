"""Command subsystems of the Rigol MSO5000 series.

Numeric settings are sent with Python's default float formatting, except
timebase offsets and scales which use fixed notation.

The facade builds one :class:`ChannelCommands` per analog input.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from labhal_scpi.number import format_fixed, format_number, format_on_off
from labhal_scpi.reply import parse_enum_field, parse_token
from labhal_scpi.subsystem import Subsystem

from labhal_rigol.mso5000.data import WaveformDataPoint, WaveformPreamble, parse_waveform_data
from labhal_rigol.mso5000.types import (
    CHANNEL_UNITS_ALIASES,
    MEASURE_MODE_ALIASES,
    WAVEFORM_FORMAT_TOKENS,
    WAVEFORM_MODE_TOKENS,
    ChannelBandwidth,
    ChannelUnits,
    Coupling,
    DisplayType,
    EdgeSlope,
    EdgeSource,
    HorizontalReference,
    MeasureArea,
    MeasureCategory,
    MeasureChannel,
    MeasureFunction,
    MeasureItem,
    MeasureMode,
    MeasureType,
    PulseCondition,
    PulseSource,
    ScopeChannel,
    ScopeKey,
    SlopeCondition,
    SlopeSource,
    SlopeWindow,
    TimebaseMode,
    TriggerCoupling,
    TriggerMode,
    TriggerStatus,
    TriggerSweep,
    WaveformFormat,
    WaveformMode,
    WaveformSource,
)

if TYPE_CHECKING:
    from labhal_scpi.connection import ScpiConnection

logger = logging.getLogger(__name__)


class ControlCommands(Subsystem):
    """Run control and front-panel keys."""

    def autoscale(self) -> None:
        """Let the scope pick scales and trigger for the applied signals (``AUT``)."""
        self._conn.command("AUT")

    def clear(self) -> None:
        """Clear all waveforms from the screen (``CLE``)."""
        self._conn.command("CLE")

    def run(self) -> None:
        self._conn.command("RUN")

    def stop(self) -> None:
        self._conn.command("STOP")

    def single(self) -> None:
        """Arm a single acquisition (``SING``)."""
        self._conn.command("SING")

    def force_trigger(self) -> None:
        """Generate a trigger regardless of the trigger condition (``TFOR``)."""
        self._conn.command("TFOR")

    def press_key(self, key: ScopeKey) -> None:
        """Simulate a front-panel key press (``SYST:KEY:PRES``)."""
        self._conn.command(f"SYST:KEY:PRES {key.value}")


class ChannelCommands(Subsystem):
    """Vertical settings of one analog channel (``CHANn``).

    Args:
        connection: The instrument connection.
        channel: The channel these commands address.
    """

    def __init__(self, connection: ScpiConnection, channel: ScopeChannel) -> None:
        super().__init__(connection)
        self._channel = channel
        self._header = f"CHAN{int(channel)}"

    @property
    def channel(self) -> ScopeChannel:
        return self._channel

    def set_bandwidth_limit(self, limit: ChannelBandwidth) -> None:
        self._conn.command(f"{self._header}:BWL {limit.value}")

    def get_bandwidth_limit(self) -> ChannelBandwidth:
        return parse_token(self._conn.query(f"{self._header}:BWL?"), ChannelBandwidth)

    def set_coupling(self, coupling: Coupling) -> None:
        self._conn.command(f"{self._header}:COUP {coupling.value}")

    def get_coupling(self) -> Coupling:
        return parse_token(self._conn.query(f"{self._header}:COUP?"), Coupling)

    def set_displayed(self, displayed: bool) -> None:
        """Show or hide the channel (``DISP``)."""
        self._conn.command(f"{self._header}:DISP {format_on_off(displayed)}")

    def is_displayed(self) -> bool:
        return self._conn.query_bool(f"{self._header}:DISP?")

    def set_inverted(self, inverted: bool) -> None:
        self._conn.command(f"{self._header}:INV {format_on_off(inverted)}")

    def is_inverted(self) -> bool:
        return self._conn.query_bool(f"{self._header}:INV?")

    def set_offset(self, volts: float) -> None:
        """Set the vertical offset in volts (``OFFS``)."""
        self._conn.command(f"{self._header}:OFFS {format_number(volts)}")

    def get_offset(self) -> float:
        return self._conn.query_number(f"{self._header}:OFFS?")

    def set_delay_calibration(self, seconds: float) -> None:
        """Set the channel skew compensation (``TCAL``)."""
        self._conn.command(f"{self._header}:TCAL {format_number(seconds)}")

    def get_delay_calibration(self) -> float:
        return self._conn.query_number(f"{self._header}:TCAL?")

    def set_scale(self, volts_per_div: float) -> None:
        """Set the vertical scale in volts per division (``SCAL``)."""
        self._conn.command(f"{self._header}:SCAL {format_number(volts_per_div)}")

    def get_scale(self) -> float:
        return self._conn.query_number(f"{self._header}:SCAL?")

    def set_attenuation(self, ratio: float) -> None:
        """Set the input attenuation ratio (``PROB``), e.g. 10 for 10:1."""
        self._conn.command(f"{self._header}:PROB {format_number(ratio)}")

    def get_attenuation(self) -> float:
        return self._conn.query_number(f"{self._header}:PROB?")

    def set_units(self, units: ChannelUnits) -> None:
        self._conn.command(f"{self._header}:UNIT {units.value}")

    def get_units(self) -> ChannelUnits:
        reply = self._conn.query(f"{self._header}:UNIT?")
        return parse_token(reply, ChannelUnits, aliases=CHANNEL_UNITS_ALIASES)

    def set_vernier(self, enabled: bool) -> None:
        """Enable fine adjustment of the vertical scale (``VERN``)."""
        self._conn.command(f"{self._header}:VERN {format_on_off(enabled)}")

    def is_vernier(self) -> bool:
        return self._conn.query_bool(f"{self._header}:VERN?")

    def set_position(self, volts: float) -> None:
        """Set the bias voltage of the channel (``POS``)."""
        self._conn.command(f"{self._header}:POS {format_number(volts)}")

    def get_position(self) -> float:
        return self._conn.query_number(f"{self._header}:POS?")


class TimebaseCommands(Subsystem):
    """Horizontal settings (``TIM``)."""

    # -- Delayed sweep -------------------------------------------------------

    def set_delay_enabled(self, enabled: bool) -> None:
        self._conn.command(f"TIM:DEL:ENAB {format_on_off(enabled)}")

    def is_delay_enabled(self) -> bool:
        return self._conn.query_bool("TIM:DEL:ENAB?")

    def set_delay_offset(self, seconds: float) -> None:
        self._conn.command(f"TIM:DEL:OFFS {format_fixed(seconds, 8)}")

    def get_delay_offset(self) -> float:
        return self._conn.query_number("TIM:DEL:OFFS?")

    def set_delay_scale(self, seconds_per_div: float) -> None:
        self._conn.command(f"TIM:DEL:SCAL {format_fixed(seconds_per_div, 4)}")

    def get_delay_scale(self) -> float:
        return self._conn.query_number("TIM:DEL:SCAL?")

    # -- Main sweep ----------------------------------------------------------

    def set_main_offset(self, seconds: float) -> None:
        """Set the trigger position relative to screen centre (``TIM:MAIN:OFFS``)."""
        self._conn.command(f"TIM:MAIN:OFFS {format_fixed(seconds, 8)}")

    def get_main_offset(self) -> float:
        return self._conn.query_number("TIM:MAIN:OFFS?")

    def set_main_scale(self, seconds_per_div: float) -> None:
        """Set the horizontal scale in seconds per division (``TIM:MAIN:SCAL``)."""
        self._conn.command(f"TIM:MAIN:SCAL {format_fixed(seconds_per_div, 10)}")

    def get_main_scale(self) -> float:
        return self._conn.query_number("TIM:MAIN:SCAL?")

    def set_mode(self, mode: TimebaseMode) -> None:
        self._conn.command(f"TIM:MODE {mode.value}")

    def get_mode(self) -> TimebaseMode:
        return parse_token(self._conn.query("TIM:MODE?"), TimebaseMode)

    # -- Horizontal reference ------------------------------------------------

    def set_reference_mode(self, reference: HorizontalReference) -> None:
        self._conn.command(f"TIM:HREF:MODE {reference.value}")

    def get_reference_mode(self) -> HorizontalReference:
        return parse_token(self._conn.query("TIM:HREF:MODE?"), HorizontalReference)

    def set_reference_position(self, position: float) -> None:
        """Set the user-defined reference position (``TIM:HREF:POS``)."""
        self._conn.command(f"TIM:HREF:POS {format_fixed(position, 4)}")

    def get_reference_position(self) -> float:
        return self._conn.query_number("TIM:HREF:POS?")

    def set_vernier(self, enabled: bool) -> None:
        self._conn.command(f"TIM:VERN {format_on_off(enabled)}")

    def is_vernier(self) -> bool:
        return self._conn.query_bool("TIM:VERN?")


class DisplayCommands(Subsystem):
    """Screen settings (``DISP``)."""

    def clear(self) -> None:
        self._conn.command("DISP:CLE")

    def set_type(self, display_type: DisplayType) -> None:
        """Draw samples as connected vectors or as dots (``DISP:TYPE``)."""
        self._conn.command(f"DISP:TYPE {display_type.value}")

    def get_type(self) -> DisplayType:
        return parse_token(self._conn.query("DISP:TYPE?"), DisplayType)

    def set_waveform_brightness(self, percent: int) -> None:
        self._conn.command(f"DISP:WBR {percent}")

    def get_waveform_brightness(self) -> int:
        return self._conn.query_int("DISP:WBR?", allow_float=True)

    def set_grid_brightness(self, percent: int) -> None:
        self._conn.command(f"DISP:GBR {percent}")

    def get_grid_brightness(self) -> int:
        return self._conn.query_int("DISP:GBR?", allow_float=True)

    def set_color_grade(self, enabled: bool) -> None:
        """Enable the colour temperature display (``DISP:COL``)."""
        self._conn.command(f"DISP:COL {format_on_off(enabled)}")

    def is_color_grade(self) -> bool:
        return self._conn.query_bool("DISP:COL?")

    def set_ruler(self, enabled: bool) -> None:
        self._conn.command(f"DISP:RUL {format_on_off(enabled)}")

    def is_ruler(self) -> bool:
        return self._conn.query_bool("DISP:RUL?")

    def capture(self) -> bytes:
        """Screenshot of the display as BMP file contents (``DISP:DATA?``).

        Needs a transport that reads binary blocks, such as
        :class:`~labhal_scpi.visa.VisaResource`.
        """
        return self._conn.query_block("DISP:DATA?")


class EdgeTrigger(Subsystem):
    """Edge trigger settings (``TRIG:EDGE``)."""

    def set_source(self, source: EdgeSource) -> None:
        self._conn.command(f"TRIG:EDGE:SOUR {source.value}")

    def get_source(self) -> EdgeSource:
        return parse_token(self._conn.query("TRIG:EDGE:SOUR?"), EdgeSource)

    def set_slope(self, slope: EdgeSlope) -> None:
        self._conn.command(f"TRIG:EDGE:SLOP {slope.value}")

    def get_slope(self) -> EdgeSlope:
        return parse_token(self._conn.query("TRIG:EDGE:SLOP?"), EdgeSlope)

    def set_level(self, volts: float) -> None:
        self._conn.command(f"TRIG:EDGE:LEV {format_number(volts)}")

    def get_level(self) -> float:
        return self._conn.query_number("TRIG:EDGE:LEV?")


class PulseTrigger(Subsystem):
    """Pulse width trigger settings (``TRIG:PULS``)."""

    def set_source(self, source: PulseSource) -> None:
        self._conn.command(f"TRIG:PULS:SOUR {source.value}")

    def get_source(self) -> PulseSource:
        return parse_token(self._conn.query("TRIG:PULS:SOUR?"), PulseSource)

    def set_when(self, condition: PulseCondition) -> None:
        """Select how the pulse width is compared with the limits (``WHEN``)."""
        self._conn.command(f"TRIG:PULS:WHEN {condition.value}")

    def get_when(self) -> PulseCondition:
        return parse_token(self._conn.query("TRIG:PULS:WHEN?"), PulseCondition)

    def set_upper_width(self, seconds: float) -> None:
        self._conn.command(f"TRIG:PULS:UWID {format_number(seconds)}")

    def get_upper_width(self) -> float:
        return self._conn.query_number("TRIG:PULS:UWID?")

    def set_lower_width(self, seconds: float) -> None:
        self._conn.command(f"TRIG:PULS:LWID {format_number(seconds)}")

    def get_lower_width(self) -> float:
        return self._conn.query_number("TRIG:PULS:LWID?")

    def set_level(self, volts: float) -> None:
        self._conn.command(f"TRIG:PULS:LEV {format_number(volts)}")

    def get_level(self) -> float:
        return self._conn.query_number("TRIG:PULS:LEV?")


class SlopeTrigger(Subsystem):
    """Slope (rise or fall time) trigger settings (``TRIG:SLOP``)."""

    def set_source(self, source: SlopeSource) -> None:
        self._conn.command(f"TRIG:SLOP:SOUR {source.value}")

    def get_source(self) -> SlopeSource:
        return parse_token(self._conn.query("TRIG:SLOP:SOUR?"), SlopeSource)

    def set_when(self, condition: SlopeCondition) -> None:
        self._conn.command(f"TRIG:SLOP:WHEN {condition.value}")

    def get_when(self) -> SlopeCondition:
        return parse_token(self._conn.query("TRIG:SLOP:WHEN?"), SlopeCondition)

    def set_upper_time(self, seconds: float) -> None:
        self._conn.command(f"TRIG:SLOP:TUPP {format_number(seconds)}")

    def get_upper_time(self) -> float:
        return self._conn.query_number("TRIG:SLOP:TUPP?")

    def set_lower_time(self, seconds: float) -> None:
        self._conn.command(f"TRIG:SLOP:TLOW {format_number(seconds)}")

    def get_lower_time(self) -> float:
        return self._conn.query_number("TRIG:SLOP:TLOW?")

    def set_window(self, window: SlopeWindow) -> None:
        self._conn.command(f"TRIG:SLOP:WIND {window.value}")

    def get_window(self) -> SlopeWindow:
        return parse_token(self._conn.query("TRIG:SLOP:WIND?"), SlopeWindow)

    def set_a_level(self, volts: float) -> None:
        """Set the upper level (``ALEV``)."""
        self._conn.command(f"TRIG:SLOP:ALEV {format_number(volts)}")

    def get_a_level(self) -> float:
        return self._conn.query_number("TRIG:SLOP:ALEV?")

    def set_b_level(self, volts: float) -> None:
        """Set the lower level (``BLEV``)."""
        self._conn.command(f"TRIG:SLOP:BLEV {format_number(volts)}")

    def get_b_level(self) -> float:
        return self._conn.query_number("TRIG:SLOP:BLEV?")


class TriggerCommands(Subsystem):
    """Trigger system (``TRIG``).

    Attributes:
        edge: Edge trigger settings.
        pulse: Pulse width trigger settings.
        slope: Slope trigger settings.
    """

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection)
        self.edge = EdgeTrigger(connection)
        self.pulse = PulseTrigger(connection)
        self.slope = SlopeTrigger(connection)

    def set_mode(self, mode: TriggerMode) -> None:
        self._conn.command(f"TRIG:MODE {mode.value}")

    def get_mode(self) -> TriggerMode:
        return parse_token(self._conn.query("TRIG:MODE?"), TriggerMode)

    def set_coupling(self, coupling: TriggerCoupling) -> None:
        self._conn.command(f"TRIG:COUP {coupling.value}")

    def get_coupling(self) -> TriggerCoupling:
        return parse_token(self._conn.query("TRIG:COUP?"), TriggerCoupling)

    def get_status(self) -> TriggerStatus:
        """Query the trigger state (``TRIG:STAT?``)."""
        return parse_token(self._conn.query("TRIG:STAT?"), TriggerStatus)

    def set_sweep(self, sweep: TriggerSweep) -> None:
        self._conn.command(f"TRIG:SWE {sweep.value}")

    def get_sweep(self) -> TriggerSweep:
        return parse_token(self._conn.query("TRIG:SWE?"), TriggerSweep)

    def set_holdoff(self, seconds: float) -> None:
        self._conn.command(f"TRIG:HOLD {format_number(seconds)}")

    def get_holdoff(self) -> float:
        return self._conn.query_number("TRIG:HOLD?")

    def set_noise_reject(self, enabled: bool) -> None:
        self._conn.command(f"TRIG:NREJ {format_on_off(enabled)}")

    def is_noise_reject(self) -> bool:
        return self._conn.query_bool("TRIG:NREJ?")


def _item_args(
    function: MeasureFunction,
    source: MeasureChannel | None,
    source_b: MeasureChannel | None,
) -> str:
    """Build ``func[,src[,srcB]]``."""
    if source_b is not None and source is None:
        raise ValueError("source_b requires source")
    args = [function.value] + [s.value for s in (source, source_b) if s is not None]
    return ",".join(args)


class MeasureCommands(Subsystem):
    """Automatic measurements (``MEAS``)."""

    def set_source(self, source: MeasureChannel) -> None:
        self._conn.command(f"MEAS:SOUR {source.value}")

    def get_source(self) -> MeasureChannel:
        return parse_token(self._conn.query("MEAS:SOUR?"), MeasureChannel)

    def clear(self, item: MeasureItem) -> None:
        """Remove one measurement item, or all of them (``MEAS:CLE``)."""
        self._conn.command(f"MEAS:CLE {item.value}")

    # -- Thresholds ----------------------------------------------------------

    def set_threshold_source(self, source: MeasureChannel) -> None:
        self._conn.command(f"MEAS:THR:SOUR {source.value}")

    def get_threshold_source(self) -> MeasureChannel:
        return parse_token(self._conn.query("MEAS:THR:SOUR?"), MeasureChannel)

    def threshold_default(self) -> None:
        """Restore the default 90 %, 50 % and 10 % thresholds (``MEAS:THR:DEF``)."""
        self._conn.command("MEAS:THR:DEF")

    def set_setup_max(self, percent: int) -> None:
        self._conn.command(f"MEAS:SET:MAX {percent}")

    def get_setup_max(self) -> int:
        return self._conn.query_int("MEAS:SET:MAX?", allow_float=True)

    def set_setup_mid(self, percent: int) -> None:
        self._conn.command(f"MEAS:SET:MID {percent}")

    def get_setup_mid(self) -> int:
        return self._conn.query_int("MEAS:SET:MID?", allow_float=True)

    def set_setup_min(self, percent: int) -> None:
        self._conn.command(f"MEAS:SET:MIN {percent}")

    def get_setup_min(self) -> int:
        return self._conn.query_int("MEAS:SET:MIN?", allow_float=True)

    # -- Mode and sources ----------------------------------------------------

    def set_mode(self, mode: MeasureMode) -> None:
        self._conn.command(f"MEAS:MODE {mode.value}")

    def get_mode(self) -> MeasureMode:
        reply = self._conn.query("MEAS:MODE?")
        return parse_token(reply, MeasureMode, aliases=MEASURE_MODE_ALIASES)

    def set_auto_source(self, source: MeasureChannel) -> None:
        """Select the source of the all-measurement statistics (``MEAS:AMS``)."""
        self._conn.command(f"MEAS:AMS {source.value}")

    def get_auto_source(self) -> MeasureChannel:
        return parse_token(self._conn.query("MEAS:AMS?"), MeasureChannel)

    def set_phase_source_a(self, source: MeasureChannel) -> None:
        self._conn.command(f"MEAS:SET:PSA {source.value}")

    def get_phase_source_a(self) -> MeasureChannel:
        return parse_token(self._conn.query("MEAS:SET:PSA?"), MeasureChannel)

    def set_phase_source_b(self, source: MeasureChannel) -> None:
        self._conn.command(f"MEAS:SET:PSB {source.value}")

    def get_phase_source_b(self) -> MeasureChannel:
        return parse_token(self._conn.query("MEAS:SET:PSB?"), MeasureChannel)

    def set_delay_source_a(self, source: MeasureChannel) -> None:
        self._conn.command(f"MEAS:SET:DSA {source.value}")

    def get_delay_source_a(self) -> MeasureChannel:
        return parse_token(self._conn.query("MEAS:SET:DSA?"), MeasureChannel)

    def set_delay_source_b(self, source: MeasureChannel) -> None:
        self._conn.command(f"MEAS:SET:DSB {source.value}")

    def get_delay_source_b(self) -> MeasureChannel:
        return parse_token(self._conn.query("MEAS:SET:DSB?"), MeasureChannel)

    # -- Statistics ----------------------------------------------------------

    def set_statistic_display(self, enabled: bool) -> None:
        self._conn.command(f"MEAS:STAT:DISP {format_on_off(enabled)}")

    def is_statistic_display(self) -> bool:
        return self._conn.query_bool("MEAS:STAT:DISP?")

    def reset_statistics(self) -> None:
        self._conn.command("MEAS:STAT:RES")

    def set_statistic_item(
        self,
        function: MeasureFunction,
        source: MeasureChannel,
        source_b: MeasureChannel | None = None,
    ) -> None:
        """Enable statistics for a measurement (``MEAS:STAT:ITEM``).

        Args:
            function: The measured parameter.
            source: The (first) source channel.
            source_b: Second source for delay and phase measurements.
        """
        self._conn.command(f"MEAS:STAT:ITEM {_item_args(function, source, source_b)}")

    def get_statistic_item(
        self,
        statistic: MeasureType,
        function: MeasureFunction,
        source: MeasureChannel | None = None,
        source_b: MeasureChannel | None = None,
    ) -> float:
        """Query one statistic of a measurement (``MEAS:STAT:ITEM?``).

        Raises:
            ValueError: If *source_b* is given without *source*.
        """
        args = _item_args(function, source, source_b)
        return self._conn.query_number(f"MEAS:STAT:ITEM? {statistic.value},{args}")

    # -- Items ---------------------------------------------------------------

    def set_item(
        self,
        function: MeasureFunction,
        source: MeasureChannel,
        source_b: MeasureChannel | None = None,
    ) -> None:
        """Add a measurement item to the screen (``MEAS:ITEM``)."""
        self._conn.command(f"MEAS:ITEM {_item_args(function, source, source_b)}")

    def get_item(
        self,
        function: MeasureFunction,
        source: MeasureChannel | None = None,
        source_b: MeasureChannel | None = None,
    ) -> float:
        """Query a measurement value (``MEAS:ITEM?``).

        Raises:
            ValueError: If *source_b* is given without *source*.
        """
        return self._conn.query_number(f"MEAS:ITEM? {_item_args(function, source, source_b)}")

    # -- Region --------------------------------------------------------------

    def set_area(self, area: MeasureArea) -> None:
        self._conn.command(f"MEAS:AREA {area.value}")

    def get_area(self) -> MeasureArea:
        return parse_token(self._conn.query("MEAS:AREA?"), MeasureArea)

    def set_cursor_ax(self, position: int) -> None:
        """Set the left edge of the cursor region in pixels (``MEAS:CREG:CAX``)."""
        self._conn.command(f"MEAS:CREG:CAX {position}")

    def get_cursor_ax(self) -> int:
        return self._conn.query_int("MEAS:CREG:CAX?", allow_float=True)

    def set_cursor_bx(self, position: int) -> None:
        """Set the right edge of the cursor region in pixels (``MEAS:CREG:CBX``)."""
        self._conn.command(f"MEAS:CREG:CBX {position}")

    def get_cursor_bx(self) -> int:
        return self._conn.query_int("MEAS:CREG:CBX?", allow_float=True)

    def set_category(self, category: MeasureCategory) -> None:
        """Select the measurement category shown on screen (``MEAS:CAT``)."""
        self._conn.command(f"MEAS:CAT {int(category)}")

    def get_category(self) -> MeasureCategory:
        return parse_enum_field(self._conn.query("MEAS:CAT?"), 0, MeasureCategory)


class WaveformCommands(Subsystem):
    """Waveform readout (``WAV``)."""

    def set_source(self, source: WaveformSource) -> None:
        self._conn.command(f"WAV:SOUR {source.value}")

    def get_source(self) -> WaveformSource:
        return parse_token(self._conn.query("WAV:SOUR?"), WaveformSource)

    def set_mode(self, mode: WaveformMode) -> None:
        self._conn.command(f"WAV:MODE {mode.name}")

    def get_mode(self) -> WaveformMode:
        reply = self._conn.query("WAV:MODE?")
        return parse_token(reply, WaveformMode, aliases=WAVEFORM_MODE_TOKENS)

    def set_format(self, data_format: WaveformFormat) -> None:
        self._conn.command(f"WAV:FORM {data_format.name}")

    def get_format(self) -> WaveformFormat:
        reply = self._conn.query("WAV:FORM?")
        return parse_token(reply, WaveformFormat, aliases=WAVEFORM_FORMAT_TOKENS)

    def set_points(self, points: int) -> None:
        self._conn.command(f"WAV:POIN {points}")

    def get_points(self) -> int:
        return self._conn.query_int("WAV:POIN?", allow_float=True)

    def set_start(self, start: int) -> None:
        """Set the first point of the read, counting from 1 (``WAV:STAR``)."""
        self._conn.command(f"WAV:STAR {start}")

    def get_start(self) -> int:
        return self._conn.query_int("WAV:STAR?", allow_float=True)

    def set_stop(self, stop: int) -> None:
        self._conn.command(f"WAV:STOP {stop}")

    def get_stop(self) -> int:
        return self._conn.query_int("WAV:STOP?", allow_float=True)

    # -- Scaling -------------------------------------------------------------

    def x_increment(self) -> float:
        return self._conn.query_number("WAV:XINC?")

    def x_origin(self) -> float:
        return self._conn.query_number("WAV:XOR?")

    def x_reference(self) -> float:
        return self._conn.query_number("WAV:XREF?")

    def y_increment(self) -> float:
        return self._conn.query_number("WAV:YINC?")

    def y_origin(self) -> int:
        return self._conn.query_int("WAV:YOR?", allow_float=True)

    def y_reference(self) -> int:
        return self._conn.query_int("WAV:YREF?", allow_float=True)

    def preamble(self) -> WaveformPreamble:
        """Query all scaling parameters at once (``WAV:PRE?``)."""
        return WaveformPreamble.from_reply(self._conn.query("WAV:PRE?"))

    def data(
        self,
        source: WaveformSource | None = None,
        mode: WaveformMode | None = None,
    ) -> tuple[WaveformDataPoint, ...]:
        """Read a waveform as timed voltage samples.

        The read is done in ASCII format, so the returned voltages need no
        further scaling. The format setting is left at ASCII afterwards.

        Args:
            source: Source to read, or None to keep the current one.
            mode: Read mode, or None to keep the current one.

        Returns:
            One point per sample, in acquisition order.
        """
        if source is not None:
            self.set_source(source)
        if mode is not None:
            self.set_mode(mode)
        self.set_format(WaveformFormat.ASC)
        preamble = self.preamble()
        points = parse_waveform_data(self._conn.query("WAV:DATA?"), preamble)
        logger.debug("Read %d waveform points", len(points))
        return points
