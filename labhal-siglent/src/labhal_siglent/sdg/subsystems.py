"""Command subsystems of the Siglent SDG series.

Per-channel commands take an :class:`SDGChannel` and are prefixed with its
``Cn`` header. Replies echo the command header, which is stripped before
parsing. IQ, coupling and counter commands apply to the whole instrument.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Union

from labhal_core.errors import EmptyReply, UnknownEnumValue
from labhal_scpi.number import format_number, format_on_off, parse_bool
from labhal_scpi.reply import parse_token
from labhal_scpi.subsystem import Subsystem

from labhal_siglent.sdg.data import (
    BasicWave,
    Harmonic,
    ModeSettings,
    OutputState,
    SampleRate,
    strip_header,
)
from labhal_siglent.sdg.types import (
    BurstMode,
    ClockSource,
    CounterCoupling,
    Edge,
    GatePolarity,
    Interpolation,
    IqWaveform,
    ModulationShape,
    ModulationSource,
    ModulationType,
    PhaseMode,
    Polarity,
    SampleRateMode,
    SDGChannel,
    SweepDirection,
    SweepMode,
    TriggerOutput,
    TriggerSource,
    VirtualKey,
    WaveParameter,
    WaveType,
)

logger = logging.getLogger(__name__)

Load = Union[float, str]

# Long-form trigger source replies.
_LONG_SOURCES = {
    "INTERNAL": TriggerSource.INTERNAL,
    "EXTERNAL": TriggerSource.EXTERNAL,
    "MANUAL": TriggerSource.MANUAL,
}


def _format_load(load: Load) -> str:
    if isinstance(load, str):
        return load.upper()
    return format_number(load)


class OutputCommands(Subsystem):
    """Output switch, load and polarity (``Cn:OUTP``)."""

    def configure(
        self,
        channel: SDGChannel,
        enabled: bool,
        load: Load = "HZ",
        polarity: Polarity = Polarity.NORMAL,
    ) -> None:
        """Set all output properties in one command.

        Args:
            channel: Output channel.
            enabled: Switch the output on or off.
            load: ``"HZ"`` for high impedance or the load in ohms.
            polarity: Output polarity.
        """
        self._conn.command(
            f"{channel.name}:OUTP {format_on_off(enabled)},"
            f"LOAD,{_format_load(load)},PLRT,{polarity.value}"
        )

    def set_enabled(self, channel: SDGChannel, enabled: bool) -> None:
        self._conn.command(f"{channel.name}:OUTP {format_on_off(enabled)}")

    def enable(self, channel: SDGChannel) -> None:
        self.set_enabled(channel, True)

    def disable(self, channel: SDGChannel) -> None:
        self.set_enabled(channel, False)

    def set_load(self, channel: SDGChannel, load: Load) -> None:
        self._conn.command(f"{channel.name}:OUTP LOAD,{_format_load(load)}")

    def set_polarity(self, channel: SDGChannel, polarity: Polarity) -> None:
        self._conn.command(f"{channel.name}:OUTP PLRT,{polarity.value}")

    def state(self, channel: SDGChannel) -> OutputState:
        """Query the output state (``Cn:OUTP?``)."""
        return OutputState.from_reply(self._conn.query(f"{channel.name}:OUTP?"))


class SystemCommands(Subsystem):
    """Instrument-wide settings and per-channel signal routing."""

    def _query_bool(self, cmd: str) -> bool:
        return parse_bool(strip_header(self._conn.query(cmd)))

    def set_buzzer(self, enabled: bool) -> None:
        self._conn.command(f"BUZZ {format_on_off(enabled)}")

    def is_buzzer(self) -> bool:
        return self._query_bool("BUZZ?")

    def set_clock_source(self, source: ClockSource) -> None:
        """Select the 10 MHz reference clock source (``ROSC``)."""
        self._conn.command(f"ROSC {source.value}")

    def get_clock_source(self) -> ClockSource:
        return parse_token(strip_header(self._conn.query("ROSC?")), ClockSource)

    def set_inverted(self, channel: SDGChannel, inverted: bool) -> None:
        """Invert the channel's waveform (``Cn:INVT``)."""
        self._conn.command(f"{channel.name}:INVT {format_on_off(inverted)}")

    def is_inverted(self, channel: SDGChannel) -> bool:
        return self._query_bool(f"{channel.name}:INVT?")

    def set_combined(self, channel: SDGChannel, combined: bool) -> None:
        """Add the other channel's waveform to this output (``Cn:CMBN``)."""
        self._conn.command(f"{channel.name}:CMBN {format_on_off(combined)}")

    def is_combined(self, channel: SDGChannel) -> bool:
        return self._query_bool(f"{channel.name}:CMBN?")

    def set_voltage_protection(self, enabled: bool) -> None:
        self._conn.command(f"VOLTPRT {format_on_off(enabled)}")

    def is_voltage_protection(self) -> bool:
        return self._query_bool("VOLTPRT?")

    def press_key(self, key: VirtualKey, pressed: bool = True) -> None:
        """Operate a front panel key remotely (``VKEY``).

        Args:
            key: The key.
            pressed: True to press, False to release.
        """
        logger.debug("Virtual key %s %s", key.name, "down" if pressed else "up")
        self._conn.command(f"VKEY VALUE,{int(key)},STATE,{int(pressed)}")

    def set_phase_mode(self, mode: PhaseMode) -> None:
        self._conn.command(f"MODE {mode.value}")

    def get_phase_mode(self) -> PhaseMode:
        return parse_token(strip_header(self._conn.query("MODE?")), PhaseMode)


class BasicWaveCommands(Subsystem):
    """Basic waveform parameters (``Cn:BSWV``).

    Each setter sends one ``KEY,value`` pair. Which keys apply depends on
    the wave type; the instrument ignores the rest.
    """

    def set(self, channel: SDGChannel, parameter: WaveParameter, value: str) -> None:
        """Send one raw parameter pair, e.g. ``C1:BSWV FRQ,1000``."""
        self._conn.command(f"{channel.name}:BSWV {parameter.value},{value}")

    def _set_number(self, channel: SDGChannel, parameter: WaveParameter, value: float) -> None:
        self.set(channel, parameter, format_number(value))

    def query(self, channel: SDGChannel) -> BasicWave:
        """Query every basic wave parameter of *channel* (``Cn:BSWV?``)."""
        return BasicWave.from_reply(self._conn.query(f"{channel.name}:BSWV?"))

    def set_wave_type(self, channel: SDGChannel, wave_type: WaveType) -> None:
        self.set(channel, WaveParameter.WAVE_TYPE, wave_type.value)

    def set_frequency(self, channel: SDGChannel, hertz: float) -> None:
        self._set_number(channel, WaveParameter.FREQUENCY, hertz)

    def set_period(self, channel: SDGChannel, seconds: float) -> None:
        self._set_number(channel, WaveParameter.PERIOD, seconds)

    def set_amplitude(self, channel: SDGChannel, volts_pp: float) -> None:
        """Set the peak-to-peak amplitude (``AMP``)."""
        self._set_number(channel, WaveParameter.AMPLITUDE, volts_pp)

    def set_offset(self, channel: SDGChannel, volts: float) -> None:
        self._set_number(channel, WaveParameter.OFFSET, volts)

    def set_symmetry(self, channel: SDGChannel, percent: float) -> None:
        """Set the ramp symmetry (``SYM``)."""
        self._set_number(channel, WaveParameter.SYMMETRY, percent)

    def set_duty_cycle(self, channel: SDGChannel, percent: float) -> None:
        self._set_number(channel, WaveParameter.DUTY, percent)

    def set_phase(self, channel: SDGChannel, degrees: float) -> None:
        self._set_number(channel, WaveParameter.PHASE, degrees)

    def set_standard_deviation(self, channel: SDGChannel, volts: float) -> None:
        """Set the noise standard deviation (``STDEV``)."""
        self._set_number(channel, WaveParameter.STANDARD_DEVIATION, volts)

    def set_mean(self, channel: SDGChannel, volts: float) -> None:
        """Set the noise mean (``MEAN``)."""
        self._set_number(channel, WaveParameter.MEAN, volts)

    def set_pulse_width(self, channel: SDGChannel, seconds: float) -> None:
        self._set_number(channel, WaveParameter.WIDTH, seconds)

    def set_rise_time(self, channel: SDGChannel, seconds: float) -> None:
        self._set_number(channel, WaveParameter.RISE, seconds)

    def set_fall_time(self, channel: SDGChannel, seconds: float) -> None:
        self._set_number(channel, WaveParameter.FALL, seconds)

    def set_pulse_delay(self, channel: SDGChannel, seconds: float) -> None:
        self._set_number(channel, WaveParameter.DELAY, seconds)

    def set_high_level(self, channel: SDGChannel, volts: float) -> None:
        self._set_number(channel, WaveParameter.HIGH_LEVEL, volts)

    def set_low_level(self, channel: SDGChannel, volts: float) -> None:
        self._set_number(channel, WaveParameter.LOW_LEVEL, volts)

    def set_noise_bandwidth_enabled(self, channel: SDGChannel, enabled: bool) -> None:
        """Limit the noise bandwidth (``BANDSTATE``)."""
        self.set(channel, WaveParameter.BAND_STATE, format_on_off(enabled))

    def set_noise_bandwidth(self, channel: SDGChannel, hertz: float) -> None:
        self._set_number(channel, WaveParameter.BANDWIDTH, hertz)

    def set_prbs_length(self, channel: SDGChannel, length: int) -> None:
        """Set the PRBS length exponent (``LENGTH``), 2^length - 1 bits."""
        self.set(channel, WaveParameter.LENGTH, str(length))

    def set_prbs_edge(self, channel: SDGChannel, seconds: float) -> None:
        """Set the PRBS rise and fall time (``EDGE``)."""
        self._set_number(channel, WaveParameter.EDGE, seconds)

    def set_prbs_differential(self, channel: SDGChannel, enabled: bool) -> None:
        self.set(channel, WaveParameter.DIFF_STATE, format_on_off(enabled))

    def set_prbs_bit_rate(self, channel: SDGChannel, bits_per_second: float) -> None:
        self._set_number(channel, WaveParameter.BIT_RATE, bits_per_second)


class HarmonicCommands(Subsystem):
    """Harmonics added to a sine output (``Cn:HARM``)."""

    def set(self, channel: SDGChannel, harmonic: Harmonic) -> None:
        """Send every harmonic setting in one command."""
        self._conn.command(
            f"{channel.name}:HARM HARMSTATE,{format_on_off(harmonic.enabled)},"
            f"HARMTYPE,{harmonic.type.value},HARMORDER,{harmonic.order},"
            f"{harmonic.unit.value},{format_number(harmonic.level)},"
            f"HARMPHASE,{format_number(harmonic.phase)}"
        )

    def get(self, channel: SDGChannel) -> Harmonic:
        return Harmonic.from_reply(self._conn.query(f"{channel.name}:HARM?"))


class ArbCommands(Subsystem):
    """Arbitrary waveform playback mode and sample rate (``Cn:SRATE``)."""

    def set_dds(self, channel: SDGChannel) -> None:
        """Play the arbitrary waveform through the DDS engine."""
        self._conn.command(f"{channel.name}:SRATE MODE,{SampleRateMode.DDS.value}")

    def set_true_arb(
        self,
        channel: SDGChannel,
        rate: float,
        interpolation: Interpolation = Interpolation.HOLD,
    ) -> None:
        """Play the waveform point by point at *rate* samples per second."""
        self._conn.command(
            f"{channel.name}:SRATE MODE,{SampleRateMode.TRUE_ARB.value},"
            f"VALUE,{format_number(rate)},INTER,{interpolation.value}"
        )

    def sample_rate(self, channel: SDGChannel) -> SampleRate:
        return SampleRate.from_reply(self._conn.query(f"{channel.name}:SRATE?"))


class _ModeCommands(Subsystem):
    """Shared ``Cn:<header> KEY,value`` handling of burst, sweep and modulation."""

    _header: ClassVar[str]

    def set(self, channel: SDGChannel, key: str, value: str) -> None:
        """Send one raw parameter pair, e.g. ``C1:BTWV PRD,0.01``."""
        self._conn.command(f"{channel.name}:{self._header} {key},{value}")

    def query(self, channel: SDGChannel) -> ModeSettings:
        return ModeSettings.from_reply(self._conn.query(f"{channel.name}:{self._header}?"))

    def set_enabled(self, channel: SDGChannel, enabled: bool) -> None:
        self.set(channel, "STATE", format_on_off(enabled))

    def set_carrier(self, channel: SDGChannel, parameter: WaveParameter, value: str) -> None:
        """Set a carrier parameter, e.g. ``C1:BTWV CARR,FRQ,1000``."""
        self.set(channel, "CARR", f"{parameter.value},{value}")

    def set_carrier_wave_type(self, channel: SDGChannel, wave_type: WaveType) -> None:
        self.set_carrier(channel, WaveParameter.WAVE_TYPE, wave_type.value)


class _TriggeredCommands(_ModeCommands):
    def set_trigger_source(self, channel: SDGChannel, source: TriggerSource) -> None:
        self.set(channel, "TRSR", source.value)

    def trigger(self, channel: SDGChannel) -> None:
        """Issue a manual trigger (``MTRIG``)."""
        self._conn.command(f"{channel.name}:{self._header} MTRIG")

    def set_trigger_edge(self, channel: SDGChannel, edge: Edge) -> None:
        """Select the active edge of the external trigger input."""
        self.set(channel, "EDGE", edge.value)


class BurstCommands(_TriggeredCommands):
    """Burst output (``Cn:BTWV``)."""

    _header = "BTWV"

    def set_period(self, channel: SDGChannel, seconds: float) -> None:
        self.set(channel, "PRD", format_number(seconds))

    def set_start_phase(self, channel: SDGChannel, degrees: float) -> None:
        self.set(channel, "STPS", format_number(degrees))

    def set_mode(self, channel: SDGChannel, mode: BurstMode) -> None:
        """Select gated or N-cycle burst (``GATE_NCYC``)."""
        self.set(channel, "GATE_NCYC", mode.value)

    def set_delay(self, channel: SDGChannel, seconds: float) -> None:
        self.set(channel, "DLAY", format_number(seconds))

    def set_gate_polarity(self, channel: SDGChannel, polarity: GatePolarity) -> None:
        self.set(channel, "PLRT", polarity.value)

    def set_trigger_output(self, channel: SDGChannel, output: TriggerOutput) -> None:
        self.set(channel, "TRMD", output.value)

    def set_cycles(self, channel: SDGChannel, cycles: int | None) -> None:
        """Set the cycles per burst; None bursts indefinitely (``TIME,INF``)."""
        self.set(channel, "TIME", "INF" if cycles is None else str(cycles))


class SweepCommands(_TriggeredCommands):
    """Frequency sweep (``Cn:SWWV``)."""

    _header = "SWWV"

    def set_time(self, channel: SDGChannel, seconds: float) -> None:
        self.set(channel, "TIME", format_number(seconds))

    def set_start(self, channel: SDGChannel, hertz: float) -> None:
        self.set(channel, "START", format_number(hertz))

    def set_stop(self, channel: SDGChannel, hertz: float) -> None:
        self.set(channel, "STOP", format_number(hertz))

    def set_mode(self, channel: SDGChannel, mode: SweepMode) -> None:
        self.set(channel, "SWMD", mode.value)

    def set_direction(self, channel: SDGChannel, direction: SweepDirection) -> None:
        self.set(channel, "DIR", direction.value)

    def set_trigger_output(self, channel: SDGChannel, enabled: bool) -> None:
        self.set(channel, "TRMD", format_on_off(enabled))


class ModulationCommands(_ModeCommands):
    """Modulated output (``Cn:MDWV``).

    Most settings apply to one modulation type and name it in the command,
    e.g. ``C1:MDWV FM,FRQ,100``.
    """

    _header = "MDWV"

    _DEVIATION_TYPES = frozenset({ModulationType.FM, ModulationType.PM, ModulationType.PWM})
    _KEYED_TYPES = frozenset({ModulationType.ASK, ModulationType.FSK, ModulationType.PSK})

    def set_type(self, channel: SDGChannel, modulation: ModulationType) -> None:
        self._conn.command(f"{channel.name}:MDWV {modulation.value}")

    def set_source(
        self, channel: SDGChannel, modulation: ModulationType, source: ModulationSource
    ) -> None:
        self.set(channel, modulation.value, f"SRC,{source.value}")

    def set_shape(
        self, channel: SDGChannel, modulation: ModulationType, shape: ModulationShape
    ) -> None:
        """Select the internal modulating waveform (``MDSP``)."""
        self.set(channel, modulation.value, f"MDSP,{shape.value}")

    def set_frequency(self, channel: SDGChannel, modulation: ModulationType, hertz: float) -> None:
        """Set the frequency of the internal modulating signal."""
        self.set(channel, modulation.value, f"FRQ,{format_number(hertz)}")

    def set_depth(self, channel: SDGChannel, percent: float) -> None:
        """Set the AM depth."""
        self.set(channel, ModulationType.AM.value, f"DEPTH,{format_number(percent)}")

    def set_deviation(self, channel: SDGChannel, modulation: ModulationType, value: float) -> None:
        """Set the FM (Hz), PM (degrees) or PWM (seconds) deviation.

        Raises:
            ValueError: If *modulation* has no deviation.
        """
        if modulation not in self._DEVIATION_TYPES:
            raise ValueError(f"{modulation.value} modulation has no deviation")
        self.set(channel, modulation.value, f"DEVI,{format_number(value)}")

    def set_key_frequency(
        self, channel: SDGChannel, modulation: ModulationType, hertz: float
    ) -> None:
        """Set the keying rate of ASK, FSK or PSK.

        Raises:
            ValueError: If *modulation* is not a keying type.
        """
        if modulation not in self._KEYED_TYPES:
            raise ValueError(f"{modulation.value} modulation has no key frequency")
        self.set(channel, modulation.value, f"KFRQ,{format_number(hertz)}")

    def set_hop_frequency(self, channel: SDGChannel, hertz: float) -> None:
        """Set the FSK hop frequency."""
        self.set(channel, ModulationType.FSK.value, f"HFRQ,{format_number(hertz)}")


class IqCommands(Subsystem):
    """IQ modulation (``:IQ``), instrument-wide."""

    def _set_number(self, header: str, value: float) -> None:
        self._conn.command(f"{header} {format_number(value)}")

    def set_center_frequency(self, hertz: float) -> None:
        self._set_number(":IQ:CENT", hertz)

    def get_center_frequency(self) -> float:
        return self._conn.query_number(":IQ:CENT?")

    def set_sample_rate(self, samples_per_second: float) -> None:
        self._set_number(":IQ:SAMP", samples_per_second)

    def get_sample_rate(self) -> float:
        return self._conn.query_number(":IQ:SAMP?")

    def set_symbol_rate(self, symbols_per_second: float) -> None:
        self._set_number(":IQ:SYMB", symbols_per_second)

    def get_symbol_rate(self) -> float:
        return self._conn.query_number(":IQ:SYMB?")

    def set_amplitude(self, volts: float) -> None:
        self._set_number(":IQ:AMPL", volts)

    def get_amplitude(self) -> float:
        return self._conn.query_number(":IQ:AMPL?")

    def set_gain_balance(self, ratio: float) -> None:
        """Set the I/Q gain ratio adjustment."""
        self._set_number(":IQ:IQAD:GAIN", ratio)

    def get_gain_balance(self) -> float:
        return self._conn.query_number(":IQ:IQAD:GAIN?")

    def set_i_offset(self, volts: float) -> None:
        self._set_number(":IQ:IQAD:IOFF", volts)

    def get_i_offset(self) -> float:
        return self._conn.query_number(":IQ:IQAD:IOFF?")

    def set_q_offset(self, volts: float) -> None:
        self._set_number(":IQ:IQAD:QOFF", volts)

    def get_q_offset(self) -> float:
        return self._conn.query_number(":IQ:IQAD:QOFF?")

    def set_q_skew(self, degrees: float) -> None:
        """Set the Q phase error relative to I."""
        self._set_number(":IQ:IQAD:QSK", degrees)

    def get_q_skew(self) -> float:
        return self._conn.query_number(":IQ:IQAD:QSK?")

    def set_trigger_source(self, source: TriggerSource) -> None:
        self._conn.command(f":IQ:TRIG:SOUR {source.value}")

    def get_trigger_source(self) -> TriggerSource:
        return parse_token(self._conn.query(":IQ:TRIG:SOUR?"), TriggerSource, aliases=_LONG_SOURCES)

    def load_builtin(self, waveform: IqWaveform) -> None:
        self._conn.command(f":IQ:WAVE:BUIL {waveform.value}")

    def load_user(self, name: str) -> None:
        """Load a user-stored IQ waveform by name."""
        self._conn.command(f":IQ:WAVE:USER {name}")

    def get_waveform(self) -> IqWaveform | str:
        """Query the loaded waveform (``:IQ:WAVE?``).

        Returns:
            The built-in waveform, or the name of a user-stored one.

        Raises:
            EmptyReply: If the reply names no waveform.
            UnknownEnumValue: If the source or built-in name is unknown.
        """
        reply = self._conn.query(":IQ:WAVE?")
        source, _, name = reply.replace(",", " ").partition(" ")
        name = name.strip()
        if not name:
            raise EmptyReply("IQ waveform name")
        source = source.upper()
        if source.startswith("BUIL"):
            return parse_token(name, IqWaveform, index=1)
        if source.startswith("USER"):
            return name
        raise UnknownEnumValue("IQ waveform source", source, index=0)


class CouplingCommands(Subsystem):
    """Channel coupling and tracking (``COUP``), instrument-wide."""

    def _set(self, key: str, value: str) -> None:
        self._conn.command(f"COUP {key},{value}")

    def query(self) -> ModeSettings:
        return ModeSettings.from_reply(self._conn.query("COUP?"))

    def set_tracking(self, enabled: bool) -> None:
        """Make channel 2 follow every change made to channel 1 (``TRACE``)."""
        self._set("TRACE", format_on_off(enabled))

    def set_enabled(self, enabled: bool) -> None:
        self._set("STATE", format_on_off(enabled))

    def set_base_channel(self, channel: SDGChannel) -> None:
        """Select the channel the other one is coupled to (``BSCH``)."""
        self._set("BSCH", f"CH{int(channel)}")

    def set_frequency_coupling(self, enabled: bool) -> None:
        self._set("FCOUP", format_on_off(enabled))

    def set_frequency_deviation(self, hertz: float) -> None:
        self._set("FDEV", format_number(hertz))

    def set_frequency_ratio(self, ratio: float) -> None:
        self._set("FRAT", format_number(ratio))

    def set_phase_coupling(self, enabled: bool) -> None:
        self._set("PCOUP", format_on_off(enabled))

    def set_phase_deviation(self, degrees: float) -> None:
        self._set("PDEV", format_number(degrees))

    def set_phase_ratio(self, ratio: float) -> None:
        self._set("PRAT", format_number(ratio))

    def set_amplitude_coupling(self, enabled: bool) -> None:
        self._set("ACOUP", format_on_off(enabled))

    def set_amplitude_deviation(self, volts: float) -> None:
        self._set("ADEV", format_number(volts))

    def set_amplitude_ratio(self, ratio: float) -> None:
        self._set("ARAT", format_number(ratio))


class FrequencyCounterCommands(Subsystem):
    """Built-in frequency counter (``FCNT``)."""

    def _set(self, key: str, value: str) -> None:
        self._conn.command(f"FCNT {key},{value}")

    def set_enabled(self, enabled: bool) -> None:
        self._set("STATE", format_on_off(enabled))

    def set_reference_frequency(self, hertz: float) -> None:
        """Set the reference used for the ``FRQDEV`` deviation reading."""
        self._set("REFQ", format_number(hertz))

    def set_trigger_level(self, volts: float) -> None:
        self._set("TRG", format_number(volts))

    def set_coupling(self, coupling: CounterCoupling) -> None:
        self._set("MODE", coupling.value)

    def set_hf_rejection(self, enabled: bool) -> None:
        self._set("HFR", format_on_off(enabled))

    def query(self) -> ModeSettings:
        """Query counter settings and readings (``FRQ``, ``DUTY``, ``PW``, ...)."""
        return ModeSettings.from_reply(self._conn.query("FCNT?"))

    def frequency(self) -> float:
        """Measured frequency in Hz."""
        return self.query().number("FRQ")
