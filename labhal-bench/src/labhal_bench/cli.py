"""Command-line interface for labhal.

Identify instruments, exchange raw SCPI and check a whole bench.

Usage:
    # Print the identity of one instrument
    labhal identify TCPIP::192.168.1.50::5555::SOCKET

    # Send a query and print the reply
    labhal query TCPIP::192.168.1.50::5555::SOCKET "MEAS:ALL? CH1"

    # Send a command without a reply
    labhal send TCPIP::192.168.1.50::5555::SOCKET "OUTP CH1,ON"

    # Create and verify every instrument of a bench file ($LABHAL_BENCH by default)
    labhal bench benches/power-lab-2.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, Sequence

from labhal_core.errors import LabhalError
from labhal_scpi.common import CommonCommands
from labhal_scpi.instrument import open_connection

from labhal_bench.bench import Bench
from labhal_bench.config import BENCH_ENV_VAR, default_config_path, load_config

if TYPE_CHECKING:
    from labhal_scpi.connection import ScpiConnection

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _open(args: argparse.Namespace) -> ScpiConnection:
    return open_connection(
        args.address, timeout_ms=args.timeout_ms, check_errors=not args.no_check_errors
    )


def cmd_identify(args: argparse.Namespace) -> int:
    """Print the parsed ``*IDN?`` reply of one instrument."""
    try:
        conn = _open(args)
        try:
            identity = CommonCommands(conn).get_identity()
        finally:
            conn.close()
    except LabhalError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Manufacturer: {identity.manufacturer}")
    print(f"Model:        {identity.model}")
    print(f"Serial:       {identity.serial}")
    print(f"Firmware:     {identity.firmware}")
    return 0


def cmd_query(args: argparse.Namespace) -> int:
    """Send one query and print the reply."""
    try:
        conn = _open(args)
        try:
            reply = conn.query(args.scpi)
        finally:
            conn.close()
    except LabhalError as exc:
        print(f"Error: {exc}")
        return 1

    print(reply)
    return 0


def cmd_send(args: argparse.Namespace) -> int:
    """Send one command."""
    try:
        conn = _open(args)
        try:
            conn.command(args.scpi)
        finally:
            conn.close()
    except LabhalError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    """Create and verify every instrument of a bench file."""
    path = args.config or default_config_path()
    if path is None:
        print(f"Error: no bench file given and {BENCH_ENV_VAR} is not set")
        return 1

    try:
        config = load_config(path)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Bench: {config.bench_id}")
    if config.description:
        print(f"  {config.description}")

    bench = Bench(config)
    try:
        ready = bench.initialize()
        for managed in bench.instruments:
            print(f"  {managed.render()}")
    finally:
        bench.close()

    print("All instruments ready" if ready else "Bench has errors")
    return 0 if ready else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the ``labhal`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="labhal",
        description="labhal instrument CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    connection = argparse.ArgumentParser(add_help=False)
    connection.add_argument(
        "address", help="VISA resource string (e.g. TCPIP::192.168.1.50::5555::SOCKET)"
    )
    connection.add_argument(
        "--timeout-ms", type=int, default=5000, help="I/O timeout in milliseconds (default: 5000)"
    )
    connection.add_argument(
        "--no-check-errors",
        action="store_true",
        help="Do not drain SYST:ERR? after each exchange",
    )

    identify_parser = subparsers.add_parser(
        "identify", parents=[connection], help="Print the instrument identity"
    )
    identify_parser.set_defaults(func=cmd_identify)

    query_parser = subparsers.add_parser(
        "query", parents=[connection], help="Send a query and print the reply"
    )
    query_parser.add_argument("scpi", help="SCPI query, e.g. '*IDN?'")
    query_parser.set_defaults(func=cmd_query)

    send_parser = subparsers.add_parser("send", parents=[connection], help="Send a command")
    send_parser.add_argument("scpi", help="SCPI command, e.g. '*RST'")
    send_parser.set_defaults(func=cmd_send)

    bench_parser = subparsers.add_parser("bench", help="Initialize and verify a bench")
    bench_parser.add_argument(
        "config", nargs="?", help=f"Bench YAML file (default: ${BENCH_ENV_VAR})"
    )
    bench_parser.set_defaults(func=cmd_bench)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(args.debug)
    logger.debug("Running %s", args.command)
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
