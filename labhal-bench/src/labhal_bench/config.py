"""YAML configuration loading for instrument benches.

A bench file names each instrument, the factory that creates its driver,
the identity it must report and the keyword arguments for the factory.

Example YAML configuration:
    bench:
      id: "power-lab-2"
      description: "DC characterization bench"

    instruments:
      psu:
        driver: "labhal_rigol.dp800:create_instrument"
        identity:
          manufacturer: "RIGOL TECHNOLOGIES"
          model: "DP832"
        kwargs:
          visa_address: "TCPIP::192.168.1.50::5555::SOCKET"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

#: Environment variable holding the default bench file path.
BENCH_ENV_VAR = "LABHAL_BENCH"


@dataclass(frozen=True)
class ExpectedIdentity:
    """Expected instrument identity for verification.

    The bench compares these against the ``*IDN?`` fields reported by the
    instrument after it is created.

    Attributes:
        manufacturer: Expected manufacturer field (e.g. "RIGOL TECHNOLOGIES").
        model: Expected model field (e.g. "DP832").
    """

    manufacturer: str
    model: str


@dataclass(frozen=True)
class InstrumentConfig:
    """Configuration for a single instrument on the bench.

    Attributes:
        name: Unique instrument name within the bench (e.g. "psu").
        driver: Factory path in "module:function" format
            (e.g. "labhal_rigol.dp800:create_instrument").
        identity: Expected identity for verification at initialization.
        kwargs: Keyword arguments passed to the driver factory.
    """

    name: str
    driver: str
    identity: ExpectedIdentity
    kwargs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BenchConfig:
    """Configuration for a whole bench.

    Attributes:
        bench_id: Unique identifier for this bench.
        description: Human-readable description.
        instruments: Instrument configurations in file order.
    """

    bench_id: str
    description: str
    instruments: tuple[InstrumentConfig, ...]


def default_config_path() -> Path | None:
    """Return the bench file named by ``LABHAL_BENCH``, or None if unset."""
    value = os.environ.get(BENCH_ENV_VAR)
    return Path(value) if value else None


def _parse_instrument(name: str, data: Any) -> InstrumentConfig:
    if not isinstance(data, dict):
        raise ValueError(f"Instrument '{name}' must be a mapping")

    driver = data.get("driver")
    if not driver:
        raise ValueError(f"Instrument '{name}' missing required field: driver")

    identity_data = data.get("identity") or {}
    if not isinstance(identity_data, dict):
        raise ValueError(f"Instrument '{name}' identity must be a mapping")
    if not identity_data.get("manufacturer"):
        raise ValueError(f"Instrument '{name}' missing required field: identity.manufacturer")
    if not identity_data.get("model"):
        raise ValueError(f"Instrument '{name}' missing required field: identity.model")

    kwargs = data.get("kwargs") or {}
    if not isinstance(kwargs, dict):
        raise ValueError(f"Instrument '{name}' kwargs must be a mapping")

    return InstrumentConfig(
        name=str(name),
        driver=driver,
        identity=ExpectedIdentity(
            manufacturer=str(identity_data["manufacturer"]),
            model=str(identity_data["model"]),
        ),
        kwargs=kwargs,
    )


def parse_config(data: Any) -> BenchConfig:
    """Build a bench configuration from parsed YAML data.

    Args:
        data: The document returned by ``yaml.safe_load``.

    Returns:
        Parsed bench configuration.

    Raises:
        ValueError: If the document is not a mapping or a required field
            is missing.
    """
    if not isinstance(data, dict):
        raise ValueError("Config must be a YAML mapping")

    bench_section = data.get("bench") or {}
    if not isinstance(bench_section, dict):
        raise ValueError("bench must be a mapping")
    bench_id = bench_section.get("id")
    if not bench_id:
        raise ValueError("Missing required field: bench.id")
    description = bench_section.get("description", "")

    instruments_data = data.get("instruments") or {}
    if not isinstance(instruments_data, dict):
        raise ValueError("instruments must be a mapping")

    instruments = tuple(
        _parse_instrument(name, inst_data) for name, inst_data in instruments_data.items()
    )
    return BenchConfig(bench_id=str(bench_id), description=description, instruments=instruments)


def load_config(path: str | Path) -> BenchConfig:
    """Load a bench configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Parsed bench configuration.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the config is invalid or missing required fields.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return parse_config(data)
