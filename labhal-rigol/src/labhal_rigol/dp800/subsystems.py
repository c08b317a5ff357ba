"""Command subsystems of the Rigol DP800 series.

Most commands take an optional channel. Without one the instrument applies
the command to the currently selected channel (see
:meth:`ChannelCommands.select`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from labhal_scpi.number import format_fixed, format_on_off
from labhal_scpi.reply import parse_token
from labhal_scpi.subsystem import Subsystem

from labhal_rigol.dp800.data import ChannelRatings, ChannelSettings, OutputReading
from labhal_rigol.dp800.types import DP800Channel, OutputMode

if TYPE_CHECKING:
    from labhal_scpi.connection import ScpiConnection


def _query_arg(channel: DP800Channel | None) -> str:
    """``" CH1"`` for a channel, empty for the selected channel."""
    return "" if channel is None else f" {channel.name}"


def _set_args(channel: DP800Channel | None, value: str) -> str:
    """``"CH1,value"`` for a channel, ``"value"`` for the selected channel."""
    return value if channel is None else f"{channel.name},{value}"


class ChannelCommands(Subsystem):
    """Channel selection and ``APPL`` shortcuts."""

    def select(self, channel: DP800Channel) -> None:
        """Make *channel* the target of channel-less commands (``INST:NSEL``)."""
        self._conn.command(f"INST:NSEL {channel.value}")

    def selected(self) -> DP800Channel:
        """Return the currently selected channel (``INST:NSEL?``)."""
        reply = self._conn.query("INST:NSEL?")
        return parse_token(reply, DP800Channel)

    def ratings(self) -> ChannelRatings:
        """Return the ratings of the selected channel (``INST?``)."""
        return ChannelRatings.from_reply(self._conn.query("INST?"))

    def apply(self, channel: DP800Channel, voltage: float, current: float) -> None:
        """Program voltage and current of *channel* in one command (``APPL``).

        Args:
            channel: Target channel.
            voltage: Voltage setpoint in volts.
            current: Current setpoint in amps.
        """
        self._conn.command(
            f"APPL {channel.name},{format_fixed(voltage, 4)},{format_fixed(current, 4)}"
        )

    def settings(self, channel: DP800Channel) -> ChannelSettings:
        """Return the programmed setpoints of *channel* (``APPL?``)."""
        return ChannelSettings.from_reply(self._conn.query(f"APPL? {channel.name}"))


class MeasureCommands(Subsystem):
    """Output measurements (``MEAS``)."""

    def all(self, channel: DP800Channel | None = None) -> OutputReading:
        """Measure voltage, current and power together (``MEAS:ALL?``)."""
        return OutputReading.from_reply(self._conn.query(f"MEAS:ALL?{_query_arg(channel)}"))

    def voltage(self, channel: DP800Channel | None = None) -> float:
        """Measure the output voltage in volts (``MEAS?``)."""
        return self._conn.query_number(f"MEAS?{_query_arg(channel)}")

    def current(self, channel: DP800Channel | None = None) -> float:
        """Measure the output current in amps (``MEAS:CURR?``)."""
        return self._conn.query_number(f"MEAS:CURR?{_query_arg(channel)}")

    def power(self, channel: DP800Channel | None = None) -> float:
        """Measure the output power in watts (``MEAS:POWE?``)."""
        return self._conn.query_number(f"MEAS:POWE?{_query_arg(channel)}")


class OutputCommands(Subsystem):
    """Output state, tracking and the OCP/OVP protection groups (``OUTP``)."""

    def mode(self, channel: DP800Channel | None = None) -> OutputMode:
        """Return the regulation mode (``OUTP:MODE?``)."""
        return parse_token(self._conn.query(f"OUTP:MODE?{_query_arg(channel)}"), OutputMode)

    # -- Output state --------------------------------------------------------

    def set_enabled(self, enabled: bool, channel: DP800Channel | None = None) -> None:
        """Switch the output on or off (``OUTP``)."""
        self._conn.command(f"OUTP {_set_args(channel, format_on_off(enabled))}")

    def enable(self, channel: DP800Channel | None = None) -> None:
        """Switch the output on."""
        self.set_enabled(True, channel)

    def disable(self, channel: DP800Channel | None = None) -> None:
        """Switch the output off."""
        self.set_enabled(False, channel)

    def is_enabled(self, channel: DP800Channel | None = None) -> bool:
        """Query the output state (``OUTP?``)."""
        return self._conn.query_bool(f"OUTP?{_query_arg(channel)}")

    # -- Tracking ------------------------------------------------------------

    def set_tracking(self, enabled: bool, channel: DP800Channel | None = None) -> None:
        """Enable or disable track mode (``OUTP:TRAC``)."""
        self._conn.command(f"OUTP:TRAC {_set_args(channel, format_on_off(enabled))}")

    def is_tracking(self, channel: DP800Channel | None = None) -> bool:
        """Query track mode (``OUTP:TRAC?``)."""
        return self._conn.query_bool(f"OUTP:TRAC?{_query_arg(channel)}")

    # -- Over-current protection ---------------------------------------------

    def is_ocp_tripped(self, channel: DP800Channel | None = None) -> bool:
        """Return True if over-current protection has tripped (``OUTP:OCP:ALAR?``)."""
        return self._is_tripped("OCP", channel)

    def clear_ocp(self, channel: DP800Channel | None = None) -> None:
        """Clear a tripped over-current protection (``OUTP:OCP:CLEAR``)."""
        self._clear("OCP", channel)

    def set_ocp_enabled(self, enabled: bool, channel: DP800Channel | None = None) -> None:
        """Enable or disable over-current protection (``OUTP:OCP``)."""
        self._set_protection_enabled("OCP", enabled, channel)

    def is_ocp_enabled(self, channel: DP800Channel | None = None) -> bool:
        """Query whether over-current protection is enabled (``OUTP:OCP?``)."""
        return self._is_protection_enabled("OCP", channel)

    def set_ocp_value(self, amps: float, channel: DP800Channel | None = None) -> None:
        """Set the over-current protection threshold (``OUTP:OCP:VAL``)."""
        self._set_value("OCP", amps, channel)

    def get_ocp_value(self, channel: DP800Channel | None = None) -> float:
        """Query the over-current protection threshold (``OUTP:OCP:VAL?``)."""
        return self._get_value("OCP", channel)

    # -- Over-voltage protection ---------------------------------------------

    def is_ovp_tripped(self, channel: DP800Channel | None = None) -> bool:
        """Return True if over-voltage protection has tripped (``OUTP:OVP:ALAR?``)."""
        return self._is_tripped("OVP", channel)

    def clear_ovp(self, channel: DP800Channel | None = None) -> None:
        """Clear a tripped over-voltage protection (``OUTP:OVP:CLEAR``)."""
        self._clear("OVP", channel)

    def set_ovp_enabled(self, enabled: bool, channel: DP800Channel | None = None) -> None:
        """Enable or disable over-voltage protection (``OUTP:OVP``)."""
        self._set_protection_enabled("OVP", enabled, channel)

    def is_ovp_enabled(self, channel: DP800Channel | None = None) -> bool:
        """Query whether over-voltage protection is enabled (``OUTP:OVP?``)."""
        return self._is_protection_enabled("OVP", channel)

    def set_ovp_value(self, volts: float, channel: DP800Channel | None = None) -> None:
        """Set the over-voltage protection threshold (``OUTP:OVP:VAL``)."""
        self._set_value("OVP", volts, channel)

    def get_ovp_value(self, channel: DP800Channel | None = None) -> float:
        """Query the over-voltage protection threshold (``OUTP:OVP:VAL?``)."""
        return self._get_value("OVP", channel)

    # -- Private helpers -----------------------------------------------------

    def _is_tripped(self, group: str, channel: DP800Channel | None) -> bool:
        return self._conn.query_bool(f"OUTP:{group}:ALAR?{_query_arg(channel)}")

    def _clear(self, group: str, channel: DP800Channel | None) -> None:
        self._conn.command(f"OUTP:{group}:CLEAR{_query_arg(channel)}")

    def _set_protection_enabled(
        self, group: str, enabled: bool, channel: DP800Channel | None
    ) -> None:
        self._conn.command(f"OUTP:{group} {_set_args(channel, format_on_off(enabled))}")

    def _is_protection_enabled(self, group: str, channel: DP800Channel | None) -> bool:
        return self._conn.query_bool(f"OUTP:{group}?{_query_arg(channel)}")

    def _set_value(self, group: str, value: float, channel: DP800Channel | None) -> None:
        self._conn.command(f"OUTP:{group}:VAL {_set_args(channel, format_fixed(value, 5))}")

    def _get_value(self, group: str, channel: DP800Channel | None) -> float:
        return self._conn.query_number(f"OUTP:{group}:VAL?{_query_arg(channel)}")


class SourceCommands(Subsystem):
    """Setpoint and protection commands of one source tree.

    The DP800 exposes identical command sets under ``CURR`` and ``VOLT``;
    one instance is bound to each.

    Args:
        connection: The instrument connection.
        tree: Source tree keyword, ``"CURR"`` or ``"VOLT"``.
    """

    def __init__(self, connection: ScpiConnection, tree: str) -> None:
        super().__init__(connection)
        self._tree = tree

    @property
    def tree(self) -> str:
        """The source tree keyword."""
        return self._tree

    def _header(self, channel: DP800Channel | None, suffix: str = "") -> str:
        if channel is None:
            return f"{self._tree}{suffix}"
        return f"SOUR{channel.value}:{self._tree}{suffix}"

    def _set(self, suffix: str, value: float, channel: DP800Channel | None) -> None:
        self._conn.command(f"{self._header(channel, suffix)} {format_fixed(value, 4)}")

    def _get(self, suffix: str, channel: DP800Channel | None) -> float:
        return self._conn.query_number(f"{self._header(channel, suffix)}?")

    def set_level(self, value: float, channel: DP800Channel | None = None) -> None:
        """Set the immediate setpoint."""
        self._set("", value, channel)

    def get_level(self, channel: DP800Channel | None = None) -> float:
        """Query the immediate setpoint."""
        return self._get("", channel)

    def set_step(self, value: float, channel: DP800Channel | None = None) -> None:
        """Set the increment used by front-panel and ``UP``/``DOWN`` stepping."""
        self._set(":STEP", value, channel)

    def get_step(self, channel: DP800Channel | None = None) -> float:
        """Query the step size."""
        return self._get(":STEP", channel)

    def set_triggered(self, value: float, channel: DP800Channel | None = None) -> None:
        """Set the setpoint applied on the next trigger."""
        self._set(":TRIG", value, channel)

    def get_triggered(self, channel: DP800Channel | None = None) -> float:
        """Query the triggered setpoint."""
        return self._get(":TRIG", channel)

    def clear_protection(self, channel: DP800Channel | None = None) -> None:
        """Clear a tripped protection (``:PROT:CLE``)."""
        self._conn.command(self._header(channel, ":PROT:CLE"))

    def is_protection_tripped(self, channel: DP800Channel | None = None) -> bool:
        """Return True if protection has tripped (``:PROT:TRIP?``)."""
        return self._conn.query_bool(f"{self._header(channel, ':PROT:TRIP')}?")

    def set_protection_level(self, value: float, channel: DP800Channel | None = None) -> None:
        """Set the protection threshold (``:PROT``)."""
        self._set(":PROT", value, channel)

    def get_protection_level(self, channel: DP800Channel | None = None) -> float:
        """Query the protection threshold."""
        return self._get(":PROT", channel)

    def set_protection_enabled(self, enabled: bool, channel: DP800Channel | None = None) -> None:
        """Enable or disable protection (``:PROT:STAT``)."""
        self._conn.command(f"{self._header(channel, ':PROT:STAT')} {format_on_off(enabled)}")

    def is_protection_enabled(self, channel: DP800Channel | None = None) -> bool:
        """Query whether protection is enabled."""
        return self._conn.query_bool(f"{self._header(channel, ':PROT:STAT')}?")
