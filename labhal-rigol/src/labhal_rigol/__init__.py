"""Rigol instrument drivers for labhal.

Subpackages:
    dp800: DP800 series programmable DC power supplies.
    dl3000: DL3000 series DC electronic loads.
    mso5000: MSO5000 series mixed-signal oscilloscopes.

The questionable status register and its subsystem are shared by the DP800
and DL3000 families and live in :mod:`labhal_rigol.status`.

Example:
    Connect to a DP832 over its LXI raw socket::

        from labhal_rigol.dp800 import DP800Channel, create_instrument

        psu = create_instrument("TCPIP::192.168.1.50::5555::SOCKET")
        psu.channels.apply(DP800Channel.CH1, 5.0, 1.0)
        psu.output.enable(DP800Channel.CH1)
"""

from labhal_rigol.status import QuestionableStatus, QuestionableStatusSubsystem

__all__ = [
    "QuestionableStatus",
    "QuestionableStatusSubsystem",
]
