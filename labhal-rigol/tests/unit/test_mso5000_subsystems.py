"""Command-string tests for the MSO5000 subsystems."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from labhal_core.errors import UnknownEnumValue
from labhal_core.types.common import InstrumentType
from labhal_rigol.mso5000.instrument import RigolMSO5000
from labhal_rigol.mso5000.types import (
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
from labhal_scpi.connection import ScpiConnection

if TYPE_CHECKING:
    from conftest import ScriptedTransport


@pytest.fixture
def scope(conn: ScpiConnection) -> RigolMSO5000:
    return RigolMSO5000(conn)


class TestFacade:
    """Tests for the RigolMSO5000 facade."""

    def test_instrument_type(self) -> None:
        assert RigolMSO5000.instrument_type is InstrumentType.OSCILLOSCOPE

    def test_construction_does_no_io(
        self, scope: RigolMSO5000, transport: ScriptedTransport
    ) -> None:
        assert transport.written == []

    def test_channels_built_once(self, scope: RigolMSO5000) -> None:
        assert [c.channel for c in scope.channels] == list(ScopeChannel)
        assert scope.channel(2) is scope.channels[1]
        assert scope.channel(ScopeChannel.CH4) is scope.channels[3]

    def test_channel_out_of_range(self, scope: RigolMSO5000) -> None:
        with pytest.raises(ValueError):
            scope.channel(5)

    def test_close(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        with scope:
            pass
        assert transport.closed
        assert transport.written == []


class TestControlCommands:
    """Tests for run control."""

    def test_run_control(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.control.autoscale()
        scope.control.clear()
        scope.control.run()
        scope.control.stop()
        scope.control.single()
        scope.control.force_trigger()
        assert transport.written == ["AUT", "CLE", "RUN", "STOP", "SING", "TFOR"]

    def test_press_key(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.control.press_key(ScopeKey.RUN_STOP)
        scope.control.press_key(ScopeKey.DECODE)
        assert transport.written == ["SYST:KEY:PRES RST", "SYST:KEY:PRES DEC"]


class TestChannelCommands:
    """Tests for the per-channel vertical settings."""

    def test_setters(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        ch2 = scope.channel(2)
        ch2.set_bandwidth_limit(ChannelBandwidth.BW_20M)
        ch2.set_coupling(Coupling.AC)
        ch2.set_displayed(True)
        ch2.set_inverted(False)
        ch2.set_offset(-0.25)
        ch2.set_delay_calibration(1e-9)
        ch2.set_scale(0.5)
        ch2.set_attenuation(10)
        ch2.set_units(ChannelUnits.UNKNOWN)
        ch2.set_vernier(True)
        ch2.set_position(1.5)
        assert transport.written == [
            "CHAN2:BWL 20M",
            "CHAN2:COUP AC",
            "CHAN2:DISP ON",
            "CHAN2:INV OFF",
            "CHAN2:OFFS -0.25",
            "CHAN2:TCAL 1e-09",
            "CHAN2:SCAL 0.5",
            "CHAN2:PROB 10",
            "CHAN2:UNIT UNKN",
            "CHAN2:VERN ON",
            "CHAN2:POS 1.5",
        ]

    def test_getters(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        ch1 = scope.channel(ScopeChannel.CH1)
        transport.queue("OFF", "GND", "1", "5.000000E-01", "VOLTage")
        assert ch1.get_bandwidth_limit() is ChannelBandwidth.OFF
        assert ch1.get_coupling() is Coupling.GND
        assert ch1.is_displayed() is True
        assert ch1.get_scale() == 0.5
        assert ch1.get_units() is ChannelUnits.VOLT
        assert transport.written == [
            "CHAN1:BWL?",
            "CHAN1:COUP?",
            "CHAN1:DISP?",
            "CHAN1:SCAL?",
            "CHAN1:UNIT?",
        ]

    def test_unit_alias(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("AMPERE")
        assert scope.channel(3).get_units() is ChannelUnits.AMP

    def test_unknown_coupling(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("HF")
        with pytest.raises(UnknownEnumValue):
            scope.channel(1).get_coupling()


class TestTimebaseCommands:
    """Tests for the horizontal settings."""

    def test_fixed_formats(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.timebase.set_delay_offset(1e-6)
        scope.timebase.set_delay_scale(0.5)
        scope.timebase.set_main_offset(-2e-6)
        scope.timebase.set_main_scale(5e-9)
        scope.timebase.set_reference_position(100)
        assert transport.written == [
            "TIM:DEL:OFFS 0.00000100",
            "TIM:DEL:SCAL 0.5000",
            "TIM:MAIN:OFFS -0.00000200",
            "TIM:MAIN:SCAL 0.0000000050",
            "TIM:HREF:POS 100.0000",
        ]

    def test_modes(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.timebase.set_delay_enabled(True)
        scope.timebase.set_mode(TimebaseMode.ROLL)
        scope.timebase.set_reference_mode(HorizontalReference.TRIGGER)
        scope.timebase.set_vernier(False)
        transport.queue("XY", "LB")
        assert scope.timebase.get_mode() is TimebaseMode.XY
        assert scope.timebase.get_reference_mode() is HorizontalReference.LEFT_BORDER
        assert transport.written == [
            "TIM:DEL:ENAB ON",
            "TIM:MODE ROLL",
            "TIM:HREF:MODE TRIG",
            "TIM:VERN OFF",
            "TIM:MODE?",
            "TIM:HREF:MODE?",
        ]

    def test_main_scale_query(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("1.000000E-06")
        assert scope.timebase.get_main_scale() == 1e-6
        assert transport.last == "TIM:MAIN:SCAL?"


class TestDisplayCommands:
    """Tests for the display settings."""

    def test_commands(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.display.clear()
        scope.display.set_type(DisplayType.DOTS)
        scope.display.set_waveform_brightness(60)
        scope.display.set_grid_brightness(40)
        scope.display.set_ruler(True)
        assert transport.written == [
            "DISP:CLE",
            "DISP:TYPE DOTS",
            "DISP:WBR 60",
            "DISP:GBR 40",
            "DISP:RUL ON",
        ]

    def test_queries(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("VECT", "50", "OFF")
        assert scope.display.get_type() is DisplayType.VECTORS
        assert scope.display.get_waveform_brightness() == 50
        assert scope.display.is_ruler() is False

    def test_capture(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        bitmap = b"BM\x36\x00\x00\x00\n\x00"
        transport.queue_block(bitmap)
        assert scope.display.capture() == bitmap
        assert transport.last == "DISP:DATA?"


class TestTriggerCommands:
    """Tests for the trigger system."""

    def test_general(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.trigger.set_mode(TriggerMode.PULSE)
        scope.trigger.set_coupling(TriggerCoupling.HF_REJECT)
        scope.trigger.set_sweep(TriggerSweep.SINGLE)
        scope.trigger.set_holdoff(1e-07)
        scope.trigger.set_noise_reject(True)
        assert transport.written == [
            "TRIG:MODE PULS",
            "TRIG:COUP HFR",
            "TRIG:SWE SING",
            "TRIG:HOLD 1e-07",
            "TRIG:NREJ ON",
        ]

    def test_status(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("TD", "WAIT")
        assert scope.trigger.get_status() is TriggerStatus.TRIGGERED
        assert scope.trigger.get_status() is TriggerStatus.WAIT
        assert transport.written == ["TRIG:STAT?", "TRIG:STAT?"]

    def test_edge(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.trigger.edge.set_source(EdgeSource.CHAN3)
        scope.trigger.edge.set_slope(EdgeSlope.EITHER)
        scope.trigger.edge.set_level(1.25)
        transport.queue("D7", "NEG", "1.250000E+00")
        assert scope.trigger.edge.get_source() is EdgeSource.D7
        assert scope.trigger.edge.get_slope() is EdgeSlope.NEGATIVE
        assert scope.trigger.edge.get_level() == 1.25
        assert transport.written[:3] == [
            "TRIG:EDGE:SOUR CHAN3",
            "TRIG:EDGE:SLOP RFAL",
            "TRIG:EDGE:LEV 1.25",
        ]

    def test_pulse(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.trigger.pulse.set_source(PulseSource.D0)
        scope.trigger.pulse.set_when(PulseCondition.BETWEEN)
        scope.trigger.pulse.set_upper_width(2e-6)
        scope.trigger.pulse.set_lower_width(1e-6)
        scope.trigger.pulse.set_level(0.8)
        assert transport.written == [
            "TRIG:PULS:SOUR D0",
            "TRIG:PULS:WHEN GLES",
            "TRIG:PULS:UWID 2e-06",
            "TRIG:PULS:LWID 1e-06",
            "TRIG:PULS:LEV 0.8",
        ]

    def test_slope(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.trigger.slope.set_source(SlopeSource.CHAN1)
        scope.trigger.slope.set_when(SlopeCondition.LESS)
        scope.trigger.slope.set_upper_time(1e-6)
        scope.trigger.slope.set_lower_time(1e-8)
        scope.trigger.slope.set_window(SlopeWindow.BOTH)
        scope.trigger.slope.set_a_level(2.0)
        scope.trigger.slope.set_b_level(0.5)
        assert transport.written == [
            "TRIG:SLOP:SOUR CHAN1",
            "TRIG:SLOP:WHEN LESS",
            "TRIG:SLOP:TUPP 1e-06",
            "TRIG:SLOP:TLOW 1e-08",
            "TRIG:SLOP:WIND TAB",
            "TRIG:SLOP:ALEV 2.0",
            "TRIG:SLOP:BLEV 0.5",
        ]
        transport.queue("TA")
        assert scope.trigger.slope.get_window() is SlopeWindow.UPPER


class TestMeasureCommands:
    """Tests for automatic measurements."""

    def test_setup(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.measure.set_source(MeasureChannel.CHAN2)
        scope.measure.clear(MeasureItem.ITEM3)
        scope.measure.clear(MeasureItem.ALL)
        scope.measure.set_threshold_source(MeasureChannel.MATH1)
        scope.measure.threshold_default()
        scope.measure.set_mode(MeasureMode.PRECISION)
        scope.measure.set_auto_source(MeasureChannel.CHAN1)
        scope.measure.set_setup_max(90)
        scope.measure.set_setup_mid(50)
        scope.measure.set_setup_min(10)
        scope.measure.set_phase_source_a(MeasureChannel.CHAN1)
        scope.measure.set_phase_source_b(MeasureChannel.CHAN2)
        scope.measure.set_delay_source_a(MeasureChannel.CHAN3)
        scope.measure.set_delay_source_b(MeasureChannel.CHAN4)
        assert transport.written == [
            "MEAS:SOUR CHAN2",
            "MEAS:CLE ITEM3",
            "MEAS:CLE ALL",
            "MEAS:THR:SOUR MATH1",
            "MEAS:THR:DEF",
            "MEAS:MODE PREC",
            "MEAS:AMS CHAN1",
            "MEAS:SET:MAX 90",
            "MEAS:SET:MID 50",
            "MEAS:SET:MIN 10",
            "MEAS:SET:PSA CHAN1",
            "MEAS:SET:PSB CHAN2",
            "MEAS:SET:DSA CHAN3",
            "MEAS:SET:DSB CHAN4",
        ]

    def test_mode_reply_alias(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("NORMal")
        assert scope.measure.get_mode() is MeasureMode.NORMAL

    def test_statistics(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.measure.set_statistic_display(True)
        scope.measure.reset_statistics()
        scope.measure.set_statistic_item(MeasureFunction.VPP, MeasureChannel.CHAN1)
        scope.measure.set_statistic_item(
            MeasureFunction.DELAY_RISE_RISE, MeasureChannel.CHAN1, MeasureChannel.CHAN2
        )
        transport.queue("3.300000E+00")
        value = scope.measure.get_statistic_item(
            MeasureType.AVERAGE, MeasureFunction.VPP, MeasureChannel.CHAN1
        )
        assert value == 3.3
        assert transport.written == [
            "MEAS:STAT:DISP ON",
            "MEAS:STAT:RES",
            "MEAS:STAT:ITEM VPP,CHAN1",
            "MEAS:STAT:ITEM RRD,CHAN1,CHAN2",
            "MEAS:STAT:ITEM? AVER,VPP,CHAN1",
        ]

    def test_items(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.measure.set_item(MeasureFunction.FREQUENCY, MeasureChannel.CHAN1)
        transport.queue("1.000000E+03", "4.500000E+01")
        assert scope.measure.get_item(MeasureFunction.FREQUENCY) == 1000.0
        assert (
            scope.measure.get_item(
                MeasureFunction.PHASE_RISE_RISE, MeasureChannel.CHAN1, MeasureChannel.CHAN2
            )
            == 45.0
        )
        assert transport.written == [
            "MEAS:ITEM FREQ,CHAN1",
            "MEAS:ITEM? FREQ",
            "MEAS:ITEM? RRPH,CHAN1,CHAN2",
        ]

    def test_second_source_requires_first(
        self, scope: RigolMSO5000, transport: ScriptedTransport
    ) -> None:
        with pytest.raises(ValueError):
            scope.measure.get_item(MeasureFunction.DELAY_FALL_FALL, None, MeasureChannel.CHAN2)
        assert transport.written == []

    def test_region(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.measure.set_area(MeasureArea.CURSOR)
        scope.measure.set_cursor_ax(100)
        scope.measure.set_cursor_bx(500)
        scope.measure.set_category(MeasureCategory.VERTICAL)
        transport.queue("2", "ZOOM")
        assert scope.measure.get_category() is MeasureCategory.OTHER
        assert scope.measure.get_area() is MeasureArea.ZOOM
        assert transport.written == [
            "MEAS:AREA CURS",
            "MEAS:CREG:CAX 100",
            "MEAS:CREG:CBX 500",
            "MEAS:CAT 1",
            "MEAS:CAT?",
            "MEAS:AREA?",
        ]

    def test_unknown_category(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("5")
        with pytest.raises(UnknownEnumValue):
            scope.measure.get_category()


class TestWaveformCommands:
    """Tests for waveform readout."""

    def test_settings(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        scope.waveform.set_source(WaveformSource.MATH2)
        scope.waveform.set_mode(WaveformMode.RAW)
        scope.waveform.set_format(WaveformFormat.WORD)
        scope.waveform.set_points(1000)
        scope.waveform.set_start(1)
        scope.waveform.set_stop(1000)
        assert transport.written == [
            "WAV:SOUR MATH2",
            "WAV:MODE RAW",
            "WAV:FORM WORD",
            "WAV:POIN 1000",
            "WAV:STAR 1",
            "WAV:STOP 1000",
        ]

    def test_mode_and_format_replies(
        self, scope: RigolMSO5000, transport: ScriptedTransport
    ) -> None:
        transport.queue("NORM", "ASCii", "BYTE")
        assert scope.waveform.get_mode() is WaveformMode.NORM
        assert scope.waveform.get_format() is WaveformFormat.ASC
        assert scope.waveform.get_format() is WaveformFormat.BYTE

    def test_scaling_queries(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("8.0E-09", "-4.8E-06", "0", "0.004", "-2.0E+01", "127")
        assert scope.waveform.x_increment() == 8e-9
        assert scope.waveform.x_origin() == -4.8e-6
        assert scope.waveform.x_reference() == 0.0
        assert scope.waveform.y_increment() == 0.004
        assert scope.waveform.y_origin() == -20
        assert scope.waveform.y_reference() == 127
        assert transport.written == [
            "WAV:XINC?",
            "WAV:XOR?",
            "WAV:XREF?",
            "WAV:YINC?",
            "WAV:YOR?",
            "WAV:YREF?",
        ]

    def test_preamble(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("2,0,1200,1,8.0E-09,-4.8E-06,0,0.004,0,127")
        preamble = scope.waveform.preamble()
        assert preamble.points == 1200
        assert transport.last == "WAV:PRE?"

    def test_data(self, scope: RigolMSO5000, transport: ScriptedTransport) -> None:
        transport.queue("2,0,3,1,0.5,-1.0,0,0.004,0,127", "#90000000110.1,0.2,0.3")
        points = scope.waveform.data(WaveformSource.CHAN1, WaveformMode.NORM)
        assert [(p.time, p.voltage) for p in points] == [(-1.0, 0.1), (-0.5, 0.2), (0.0, 0.3)]
        assert transport.written == [
            "WAV:SOUR CHAN1",
            "WAV:MODE NORM",
            "WAV:FORM ASC",
            "WAV:PRE?",
            "WAV:DATA?",
        ]

    def test_data_keeps_current_source(
        self, scope: RigolMSO5000, transport: ScriptedTransport
    ) -> None:
        transport.queue("2,0,1,1,1e-3,0,0,0.004,0,127", "1.5")
        points = scope.waveform.data()
        assert len(points) == 1
        assert transport.written == ["WAV:FORM ASC", "WAV:PRE?", "WAV:DATA?"]
