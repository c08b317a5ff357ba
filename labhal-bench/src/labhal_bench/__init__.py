"""Instrument bench management for labhal.

A bench is a YAML file listing instruments, their driver factories and the
identity each must report. This package loads such files, creates the
instrument facades, verifies them and provides the ``labhal`` command-line
tool.

Example:
    from labhal_bench import Bench, load_config

    with Bench(load_config("bench.yaml")) as bench:
        psu = bench.get_instrument("psu")
"""

from labhal_bench.bench import Bench, InstrumentState, ManagedInstrument
from labhal_bench.config import (
    BENCH_ENV_VAR,
    BenchConfig,
    ExpectedIdentity,
    InstrumentConfig,
    default_config_path,
    load_config,
    parse_config,
)
from labhal_bench.loader import load_driver, split_driver_path

__all__ = [
    # Config
    "BENCH_ENV_VAR",
    "BenchConfig",
    "ExpectedIdentity",
    "InstrumentConfig",
    "default_config_path",
    "load_config",
    "parse_config",
    # Loader
    "load_driver",
    "split_driver_path",
    # Bench
    "Bench",
    "InstrumentState",
    "ManagedInstrument",
]
