"""Questionable status register shared by Rigol DP800 and DL3000."""

from __future__ import annotations

from enum import Enum

from labhal_core.types.register import BitRegister
from labhal_scpi.subsystem import Subsystem


class QuestionableStatus(BitRegister):
    """Questionable status condition, enable and event register."""

    VOLTAGE_FAULT = 1
    OVERCURRENT = 2
    REMOTE_SENSE_TERMINAL = 4
    OVERPOWER = 8
    RUN = 128
    REMOTE_REVERSE_VOLTAGE = 512
    UNREGULATED = 1024
    LOCAL_REVERSE_VOLTAGE = 2048
    OVERVOLTAGE = 4096
    PROTECTIVE_SHUTDOWN = 8192
    VOLTAGE_SINK = 16384


class QuestionableStatusSubsystem(Subsystem):
    """``STAT:QUES`` commands."""

    def questionable_condition(self, channel: Enum | None = None) -> QuestionableStatus:
        """Read the condition register (``STAT:QUES:COND?``).

        Args:
            channel: Output channel on multi-channel supplies, or None for
                the instrument default.
        """
        cmd = "STAT:QUES:COND?"
        if channel is not None:
            cmd += f" {channel.name}"
        return self._conn.query_register(cmd, QuestionableStatus)

    def set_questionable_enable(self, mask: QuestionableStatus) -> None:
        """Write the enable register (``STAT:QUES:ENAB``)."""
        self._conn.command(f"STAT:QUES:ENAB {mask.value}")

    def questionable_enable(self) -> QuestionableStatus:
        """Read the enable register (``STAT:QUES:ENAB?``)."""
        return self._conn.query_register("STAT:QUES:ENAB?", QuestionableStatus)

    def questionable_event(self) -> QuestionableStatus:
        """Read and clear the event register (``STAT:QUES?``)."""
        return self._conn.query_register("STAT:QUES?", QuestionableStatus)

    def preset(self) -> None:
        """Clear the event register and restore default enables (``STAT:PRES``)."""
        self._conn.command("STAT:PRES")
