"""Rigol DL3000 electronic load facade."""

from __future__ import annotations

from labhal_core.types.common import InstrumentType
from labhal_scpi.connection import ScpiConnection
from labhal_scpi.instrument import Instrument, open_connection

from labhal_rigol.dl3000.subsystems import MeasureCommands, SourceCommands
from labhal_rigol.status import QuestionableStatusSubsystem


class RigolDL3000(Instrument):
    """Rigol DL3021/DL3031 DC electronic load.

    Attributes:
        source: Input state, operating mode and static mode setpoints.
        measure: Input measurements.
        status: Questionable status register.
    """

    instrument_type = InstrumentType.LOAD

    def __init__(self, connection: ScpiConnection) -> None:
        super().__init__(connection)
        self.source = SourceCommands(connection)
        self.measure = MeasureCommands(connection)
        self.status = QuestionableStatusSubsystem(connection)


def create_instrument(visa_address: str, **kwargs: object) -> RigolDL3000:
    """Create a DL3000 driver from a VISA address.

    Args:
        visa_address: VISA resource string.
        **kwargs: Passed to :func:`~labhal_scpi.instrument.open_connection`.
    """
    return RigolDL3000(open_connection(visa_address, **kwargs))  # type: ignore[arg-type]
