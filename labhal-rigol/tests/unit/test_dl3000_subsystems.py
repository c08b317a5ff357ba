"""Command-string tests for the DL3000 subsystems."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from labhal_core.errors import EmptyReply, FieldParseError, UnknownEnumValue
from labhal_core.types.common import InstrumentType
from labhal_rigol.dl3000.instrument import RigolDL3000
from labhal_rigol.dl3000.subsystems import parse_level
from labhal_rigol.dl3000.types import DL3000Range, FunctionMode, SourceFunction, TransientMode
from labhal_rigol.status import QuestionableStatus
from labhal_scpi.connection import ScpiConnection

if TYPE_CHECKING:
    from conftest import ScriptedTransport


@pytest.fixture
def load(conn: ScpiConnection) -> RigolDL3000:
    return RigolDL3000(conn)


class TestParseLevel:
    """Tests for parse_level."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("MIN", DL3000Range.MINIMUM),
            ("maximum", DL3000Range.MAXIMUM),
            ("DEFAULT", DL3000Range.DEFAULT),
            ("DEF", DL3000Range.DEFAULT),
        ],
    )
    def test_keywords(self, text: str, expected: DL3000Range) -> None:
        assert parse_level(text) is expected

    def test_number(self) -> None:
        assert parse_level("4.000000E+01") == 40.0

    def test_empty(self) -> None:
        with pytest.raises(EmptyReply):
            parse_level("")

    def test_garbage(self) -> None:
        with pytest.raises(FieldParseError):
            parse_level("HIGH")


class TestFacade:
    """Tests for the RigolDL3000 facade."""

    def test_instrument_type(self) -> None:
        assert RigolDL3000.instrument_type is InstrumentType.LOAD

    def test_construction_does_no_io(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        assert transport.written == []

    def test_mode_trees(self, load: RigolDL3000) -> None:
        assert load.source.current.tree == "SOUR:CURR"
        assert load.source.voltage.tree == "SOUR:VOLT"
        assert load.source.resistance.tree == "SOUR:RES"
        assert load.source.power.tree == "SOUR:POW"
        assert load.source.current.transient.tree == "SOUR:CURR:TRAN"

    def test_power_has_no_range(self, load: RigolDL3000) -> None:
        assert not hasattr(load.source.power, "set_range")


class TestSourceCommands:
    """Tests for input and mode selection."""

    def test_input(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        load.source.enable()
        load.source.disable()
        transport.queue("ON")
        assert load.source.is_input_enabled() is True
        assert transport.written == ["SOUR:INP ON", "SOUR:INP OFF", "SOUR:INP?"]

    def test_set_function_sends_token(
        self, load: RigolDL3000, transport: ScriptedTransport
    ) -> None:
        load.source.set_function(SourceFunction.RESISTANCE)
        assert transport.last == "SOUR:FUNC RES"

    @pytest.mark.parametrize(
        ("reply", "expected"),
        [
            ("CC", SourceFunction.CURRENT),
            ("CV", SourceFunction.VOLTAGE),
            ("CR", SourceFunction.RESISTANCE),
            ("CP", SourceFunction.POWER),
            ("CURR", SourceFunction.CURRENT),
        ],
    )
    def test_get_function(
        self,
        load: RigolDL3000,
        transport: ScriptedTransport,
        reply: str,
        expected: SourceFunction,
    ) -> None:
        transport.queue(reply)
        assert load.source.get_function() is expected

    def test_get_function_unknown(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        transport.queue("CX")
        with pytest.raises(UnknownEnumValue):
            load.source.get_function()

    def test_function_mode(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        load.source.set_function_mode(FunctionMode.BATTERY)
        assert transport.last == "SOUR:FUNC:MODE BATT"
        transport.queue("FIXED")
        assert load.source.get_function_mode() is FunctionMode.FIXED
        transport.queue("LIST")
        assert load.source.get_function_mode() is FunctionMode.LIST

    def test_transient_state(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        load.source.set_transient_enabled(True)
        assert transport.last == "SOUR:TRAN:STAT 1"
        transport.queue("0")
        assert load.source.is_transient_enabled() is False


class TestConstantModes:
    """Tests for the CC/CV/CR/CP trees."""

    def test_level_fixed_decimals(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        load.source.current.set_level(0.5)
        assert transport.last == "SOUR:CURR 0.5000"

    def test_level_keyword(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        load.source.voltage.set_level(DL3000Range.MAXIMUM)
        assert transport.last == "SOUR:VOLT MAX"

    def test_limits(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        load.source.resistance.set_voltage_limit(12)
        load.source.power.set_current_limit(DL3000Range.DEFAULT)
        transport.queue("1.200000E+01", "4.000000E+01")
        assert load.source.resistance.get_voltage_limit() == 12.0
        assert load.source.power.get_current_limit() == 40.0
        assert transport.written == [
            "SOUR:RES:VLIM 12.0000",
            "SOUR:POW:ILIM DEF",
            "SOUR:RES:VLIM?",
            "SOUR:POW:ILIM?",
        ]

    def test_range(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        load.source.current.set_range(DL3000Range.MINIMUM)
        assert transport.last == "SOUR:CURR:RANG MIN"
        transport.queue("4")
        assert load.source.current.get_range() == 4.0
        transport.queue("MAXIMUM")
        assert load.source.voltage.get_range() is DL3000Range.MAXIMUM
        assert transport.last == "SOUR:VOLT:RANG?"

    def test_get_level(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        transport.queue("2.500000E+00")
        assert load.source.power.get_level() == 2.5
        assert transport.last == "SOUR:POW?"

    def test_slew_and_von(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        cc = load.source.current
        cc.set_slew(1.0)
        cc.set_positive_slew(DL3000Range.MAXIMUM)
        cc.set_negative_slew(0.25)
        cc.set_von(1.5)
        transport.queue("1", "2", "3", "1.5")
        assert cc.get_slew() == 1.0
        assert cc.get_positive_slew() == 2.0
        assert cc.get_negative_slew() == 3.0
        assert cc.get_von() == 1.5
        assert transport.written == [
            "SOUR:CURR:SLEW 1.0000",
            "SOUR:CURR:SLEW:POS MAX",
            "SOUR:CURR:SLEW:NEG 0.2500",
            "SOUR:CURR:VON 1.5000",
            "SOUR:CURR:SLEW?",
            "SOUR:CURR:SLEW:POS?",
            "SOUR:CURR:SLEW:NEG?",
            "SOUR:CURR:VON?",
        ]


class TestTransientCommands:
    """Tests for SOUR:CURR:TRAN."""

    def test_mode(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        load.source.current.transient.set_mode(TransientMode.TOGGLE)
        assert transport.last == "SOUR:CURR:TRAN:MODE TOGG"
        transport.queue("PULSE")
        assert load.source.current.transient.get_mode() is TransientMode.PULSE
        assert transport.last == "SOUR:CURR:TRAN:MODE?"

    @pytest.mark.parametrize(
        ("name", "node"),
        [
            ("a_level", "ALEV"),
            ("b_level", "BLEV"),
            ("a_width", "AWID"),
            ("b_width", "BWID"),
            ("frequency", "FREQ"),
            ("period", "PER"),
            ("duty", "ADUT"),
        ],
    )
    def test_numeric_settings(
        self, load: RigolDL3000, transport: ScriptedTransport, name: str, node: str
    ) -> None:
        transient = load.source.current.transient
        getattr(transient, f"set_{name}")(2)
        assert transport.last == f"SOUR:CURR:TRAN:{node} 2.0000"
        getattr(transient, f"set_{name}")(DL3000Range.MINIMUM)
        assert transport.last == f"SOUR:CURR:TRAN:{node} MIN"
        transport.queue("2.000000E+00")
        assert getattr(transient, f"get_{name}")() == 2.0
        assert transport.last == f"SOUR:CURR:TRAN:{node}?"


class TestMeasureCommands:
    """Tests for MEAS."""

    @pytest.mark.parametrize(
        ("method", "command"),
        [
            ("voltage", "MEAS:VOLT?"),
            ("voltage_max", "MEAS:VOLT:MAX?"),
            ("voltage_min", "MEAS:VOLT:MIN?"),
            ("current", "MEAS:CURR?"),
            ("current_max", "MEAS:CURR:MAX?"),
            ("current_min", "MEAS:CURR:MIN?"),
            ("resistance", "MEAS:RES?"),
            ("power", "MEAS:POW?"),
            ("capacity", "MEAS:CAP?"),
            ("watt_hours", "MEAS:WATT?"),
            ("discharge_time", "MEAS:DISC?"),
            ("elapsed_time", "MEAS:TIME?"),
        ],
    )
    def test_scalar(
        self, load: RigolDL3000, transport: ScriptedTransport, method: str, command: str
    ) -> None:
        transport.queue("1.250000E+00")
        assert getattr(load.measure, method)() == 1.25
        assert transport.last == command

    def test_wave_data(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        transport.queue("1.0,1.5,2.0")
        assert load.measure.wave_data() == (1.0, 1.5, 2.0)
        assert transport.last == "MEAS:WAV?"

    def test_malformed_measurement(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        transport.queue("OVER")
        with pytest.raises(FieldParseError):
            load.measure.voltage()


class TestStatus:
    """Tests for the shared questionable status subsystem on the load."""

    def test_condition(self, load: RigolDL3000, transport: ScriptedTransport) -> None:
        transport.queue("2")
        assert load.status.questionable_condition() == QuestionableStatus(
            QuestionableStatus.OVERCURRENT
        )
        assert transport.last == "STAT:QUES:COND?"
