"""Bench orchestration: create every configured instrument and verify it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from labhal_core.types.common import InstrumentIdentity

from labhal_bench.config import BenchConfig, ExpectedIdentity, InstrumentConfig
from labhal_bench.loader import load_driver

logger = logging.getLogger(__name__)


class InstrumentState(str, Enum):
    """State of an instrument in the bench lifecycle.

    Instruments progress through states as follows:
        PENDING -> INITIALIZING -> READY (success)
                                -> ERROR (failure)
        READY/ERROR -> CLOSED (shutdown)
    """

    PENDING = "pending"
    INITIALIZING = "initializing"
    READY = "ready"
    ERROR = "error"
    CLOSED = "closed"


@dataclass
class ManagedInstrument:
    """An instrument managed by the bench.

    Args:
        config: Instrument configuration.
        state: Current state of the instrument.
        instance: The instrument facade (if created).
        identity: The reported identity (if queried).
        error: Error message (if in error state).
    """

    config: InstrumentConfig
    state: InstrumentState = InstrumentState.PENDING
    instance: Any = None
    identity: InstrumentIdentity | None = None
    error: str | None = None

    def render(self) -> str:
        """One-line diagnostic summary such as ``psu: ready RIGOL TECHNOLOGIES DP832 (S/N 7)``."""
        text = f"{self.config.name}: {self.state.value}"
        if self.identity is not None:
            text += (
                f" {self.identity.manufacturer} {self.identity.model}"
                f" (S/N {self.identity.serial})"
            )
        if self.error:
            text += f" - {self.error}"
        return text


def _identity_mismatch(expected: ExpectedIdentity, identity: InstrumentIdentity) -> str | None:
    if identity.manufacturer != expected.manufacturer:
        return (
            f"Manufacturer mismatch: expected '{expected.manufacturer}', "
            f"got '{identity.manufacturer}'"
        )
    if identity.model != expected.model:
        return f"Model mismatch: expected '{expected.model}', got '{identity.model}'"
    return None


@dataclass
class Bench:
    """Instrument bench orchestrator.

    Loads driver factories, creates the instrument facades and checks each
    reported identity against the configuration.

    Args:
        config: Bench configuration.

    Example:
        bench = Bench(load_config("bench.yaml"))
        bench.initialize()
        psu = bench.get_instrument("psu")
        ...
        bench.close()
    """

    config: BenchConfig
    _instruments: dict[str, ManagedInstrument] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        for inst_config in self.config.instruments:
            self._instruments[inst_config.name] = ManagedInstrument(config=inst_config)

    @property
    def bench_id(self) -> str:
        """Return the bench ID."""
        return self.config.bench_id

    @property
    def instruments(self) -> tuple[ManagedInstrument, ...]:
        """All managed instruments in configuration order."""
        return tuple(self._instruments.values())

    @property
    def ready(self) -> bool:
        """True if every instrument initialized and matched its identity."""
        return all(m.state is InstrumentState.READY for m in self._instruments.values())

    def _initialize_one(self, managed: ManagedInstrument) -> None:
        name = managed.config.name
        managed.state = InstrumentState.INITIALIZING
        factory = load_driver(managed.config.driver)
        managed.instance = factory(**managed.config.kwargs)

        identity = managed.instance.common.get_identity()
        managed.identity = identity
        mismatch = _identity_mismatch(managed.config.identity, identity)
        if mismatch is not None:
            managed.state = InstrumentState.ERROR
            managed.error = mismatch
            logger.error("Instrument %s: %s", name, mismatch)
            return

        managed.state = InstrumentState.READY
        logger.info(
            "Instrument %s initialized: %s %s (S/N: %s)",
            name,
            identity.manufacturer,
            identity.model,
            identity.serial,
        )

    def initialize(self) -> bool:
        """Create and verify every instrument.

        A failure of one instrument is recorded on it and does not stop the
        others.

        Returns:
            True if every instrument is ready.
        """
        for managed in self._instruments.values():
            try:
                self._initialize_one(managed)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                managed.state = InstrumentState.ERROR
                managed.error = str(exc)
                logger.error("Failed to initialize instrument %s: %s", managed.config.name, exc)
        return self.ready

    def close(self) -> None:
        """Close every created instrument."""
        for name, managed in self._instruments.items():
            if managed.instance is None:
                continue
            try:
                managed.instance.close()
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logger.warning("Error closing instrument %s: %s", name, exc)
            managed.instance = None
            managed.state = InstrumentState.CLOSED

    def get_instrument(self, name: str) -> Any | None:
        """Get an instrument facade by name.

        Args:
            name: Instrument name.

        Returns:
            The facade, or None if not found or not ready.
        """
        managed = self._instruments.get(name)
        if managed and managed.state is InstrumentState.READY:
            return managed.instance
        return None

    def __enter__(self) -> Bench:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
