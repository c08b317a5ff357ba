"""Root conftest.py for the labhal monorepo.

Puts every package's ``src`` directory on ``sys.path`` so the test suite runs
from a plain checkout, registers the custom markers and provides the scripted
transport fixtures used by the command subsystem tests.
"""

from __future__ import annotations

import sys
from collections import deque
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config


# Add all package src directories to path for imports
PROJECT_ROOT = Path(__file__).parent
for pkg_dir in PROJECT_ROOT.glob("labhal-*/src"):
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))

from labhal_scpi.connection import ScpiConnection  # noqa: E402  pylint: disable=C0413


def pytest_configure(config: Config) -> None:
    """Register custom markers.

    Args:
        config: pytest configuration object.
    """
    config.addinivalue_line(
        "markers",
        "integration: Integration test requiring real hardware",
    )
    config.addinivalue_line(
        "markers",
        "slow: Slow-running test",
    )


class ScriptedTransport:
    """In-memory transport that replays queued replies and records writes."""

    def __init__(self, responses: list[str] | None = None) -> None:
        self.responses: deque[str] = deque(responses or [])
        self.blocks: deque[bytes] = deque()
        self.written: list[str] = []
        self.closed: bool = False

    def queue(self, *replies: str) -> None:
        """Append replies to be returned by subsequent reads."""
        self.responses.extend(replies)

    def write(self, message: str) -> None:
        self.written.append(message)

    def read(self) -> str:
        if not self.responses:
            raise AssertionError(f"Unexpected read after {self.written[-1:]!r}")
        return self.responses.popleft()

    def queue_block(self, *payloads: bytes) -> None:
        """Append binary block payloads to be returned by subsequent block reads."""
        self.blocks.extend(payloads)

    def read_block(self) -> bytes:
        if not self.blocks:
            raise AssertionError(f"Unexpected block read after {self.written[-1:]!r}")
        return self.blocks.popleft()

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> str:
        """The most recent message written."""
        return self.written[-1]


@pytest.fixture
def transport() -> ScriptedTransport:
    """A fresh scripted transport."""
    return ScriptedTransport()


@pytest.fixture
def conn(transport: ScriptedTransport) -> ScpiConnection:
    """A connection over the scripted transport with error checking off."""
    return ScpiConnection(transport, check_errors=False)


def pytest_report_header(config: Config) -> list[str]:
    """Add a suite banner to the pytest header."""
    return ["labhal monorepo test suite"]
