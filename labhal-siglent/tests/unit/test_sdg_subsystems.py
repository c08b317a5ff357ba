"""Command-string tests for the SDG subsystems."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from labhal_core.types.common import InstrumentType
from labhal_scpi.connection import ScpiConnection
from labhal_siglent.sdg.data import OutputState
from labhal_siglent.sdg.instrument import SiglentSDG
from labhal_siglent.sdg.types import (
    ClockSource,
    PhaseMode,
    Polarity,
    SDGChannel,
    VirtualKey,
    WaveParameter,
    WaveType,
)

if TYPE_CHECKING:
    from conftest import ScriptedTransport


@pytest.fixture
def gen(conn: ScpiConnection) -> SiglentSDG:
    return SiglentSDG(conn)


class TestFacade:
    """Tests for the SiglentSDG facade."""

    def test_instrument_type(self) -> None:
        assert SiglentSDG.instrument_type is InstrumentType.FUNCTION_GENERATOR

    def test_subsystems(self, gen: SiglentSDG, conn: ScpiConnection) -> None:
        names = (
            "output",
            "system",
            "basic_wave",
            "harmonic",
            "arb",
            "burst",
            "sweep",
            "modulation",
            "iq",
            "coupling",
            "counter",
        )
        for name in names:
            assert getattr(gen, name)._conn is conn

    def test_construction_does_no_io(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        assert transport.written == []

    def test_close(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        gen.close()
        assert transport.closed


class TestOutputCommands:
    """Tests for the output subsystem."""

    def test_configure(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        gen.output.configure(SDGChannel.C1, True)
        gen.output.configure(SDGChannel.C2, False, 50.0, Polarity.INVERTED)
        assert transport.written == [
            "C1:OUTP ON,LOAD,HZ,PLRT,NOR",
            "C2:OUTP OFF,LOAD,50.0,PLRT,INVT",
        ]

    def test_single_properties(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        gen.output.enable(SDGChannel.C1)
        gen.output.disable(SDGChannel.C2)
        gen.output.set_load(SDGChannel.C1, "hz")
        gen.output.set_load(SDGChannel.C2, 75.5)
        gen.output.set_load(SDGChannel.C2, float("inf"))
        gen.output.set_polarity(SDGChannel.C2, Polarity.NORMAL)
        assert transport.written == [
            "C1:OUTP ON",
            "C2:OUTP OFF",
            "C1:OUTP LOAD,HZ",
            "C2:OUTP LOAD,75.5",
            "C2:OUTP LOAD,INF",
            "C2:OUTP PLRT,NOR",
        ]

    def test_state(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        transport.queue("C2:OUTP ON,LOAD,50,PLRT,NOR")
        assert gen.output.state(SDGChannel.C2) == OutputState(True, "50", Polarity.NORMAL)
        assert transport.last == "C2:OUTP?"


class TestSystemCommands:
    """Tests for the system subsystem."""

    def test_setters(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        gen.system.set_buzzer(False)
        gen.system.set_clock_source(ClockSource.EXTERNAL)
        gen.system.set_inverted(SDGChannel.C1, True)
        gen.system.set_combined(SDGChannel.C2, True)
        gen.system.set_voltage_protection(True)
        gen.system.set_phase_mode(PhaseMode.PHASE_LOCKED)
        assert transport.written == [
            "BUZZ OFF",
            "ROSC EXT",
            "C1:INVT ON",
            "C2:CMBN ON",
            "VOLTPRT ON",
            "MODE PHASE-LOCKED",
        ]

    def test_queries_strip_header(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        transport.queue("BUZZ ON", "ROSC INT", "C1:INVT OFF", "C2:CMBN ON", "VOLTPRT OFF")
        assert gen.system.is_buzzer() is True
        assert gen.system.get_clock_source() is ClockSource.INTERNAL
        assert gen.system.is_inverted(SDGChannel.C1) is False
        assert gen.system.is_combined(SDGChannel.C2) is True
        assert gen.system.is_voltage_protection() is False
        assert transport.written == ["BUZZ?", "ROSC?", "C1:INVT?", "C2:CMBN?", "VOLTPRT?"]

    def test_phase_mode(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        transport.queue("MODE INDEPENDENT")
        assert gen.system.get_phase_mode() is PhaseMode.INDEPENDENT

    def test_virtual_key(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        gen.system.press_key(VirtualKey.OUTPUT1)
        gen.system.press_key(VirtualKey.SINE, pressed=False)
        assert transport.written == ["VKEY VALUE,153,STATE,1", "VKEY VALUE,34,STATE,0"]


class TestBasicWaveCommands:
    """Tests for the basic wave subsystem."""

    def test_setters(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        wave = gen.basic_wave
        wave.set_wave_type(SDGChannel.C1, WaveType.PULSE)
        wave.set_frequency(SDGChannel.C1, 1000.0)
        wave.set_amplitude(SDGChannel.C1, 2.5)
        wave.set_offset(SDGChannel.C1, -0.5)
        wave.set_pulse_width(SDGChannel.C1, 1e-06)
        wave.set_duty_cycle(SDGChannel.C1, 25)
        assert transport.written == [
            "C1:BSWV WVTP,PULSE",
            "C1:BSWV FRQ,1000.0",
            "C1:BSWV AMP,2.5",
            "C1:BSWV OFST,-0.5",
            "C1:BSWV WIDTH,1e-06",
            "C1:BSWV DUTY,25",
        ]

    def test_noise_and_prbs(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        wave = gen.basic_wave
        wave.set_noise_bandwidth_enabled(SDGChannel.C2, True)
        wave.set_noise_bandwidth(SDGChannel.C2, 1e6)
        wave.set_prbs_length(SDGChannel.C2, 7)
        wave.set_prbs_differential(SDGChannel.C2, False)
        assert transport.written == [
            "C2:BSWV BANDSTATE,ON",
            "C2:BSWV BANDWIDTH,1000000.0",
            "C2:BSWV LENGTH,7",
            "C2:BSWV DIFFSTATE,OFF",
        ]

    def test_raw_set(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        gen.basic_wave.set(SDGChannel.C1, WaveParameter.AMPLITUDE_VRMS, "0.5")
        assert transport.last == "C1:BSWV AMPVRMS,0.5"

    def test_query(self, gen: SiglentSDG, transport: ScriptedTransport) -> None:
        transport.queue("C1:BSWV WVTP,SINE,FRQ,1000HZ,AMP,4V,OFST,0V,PHSE,90")
        wave = gen.basic_wave.query(SDGChannel.C1)
        assert wave.wave_type is WaveType.SINE
        assert wave.number(WaveParameter.AMPLITUDE) == 4.0
        assert wave.number(WaveParameter.PHASE) == 90.0
        assert transport.last == "C1:BSWV?"
