"""Base class for command subsystems."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from labhal_scpi.connection import ScpiConnection


class Subsystem:
    """A group of related SCPI commands sharing one connection.

    A subsystem only translates typed calls into command strings and replies
    into typed values. It holds no state besides the connection handle, which
    is shared with (and owned by) the instrument facade.

    Args:
        connection: The facade's connection.
    """

    def __init__(self, connection: ScpiConnection) -> None:
        self._conn = connection
