"""Unit tests for the labhal command-line tool."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from labhal_bench import cli
from labhal_bench.config import BENCH_ENV_VAR
from labhal_core.errors import TransportError
from labhal_scpi.connection import ScpiConnection

if TYPE_CHECKING:
    from conftest import ScriptedTransport

ADDRESS = "TCPIP::192.168.1.50::5555::SOCKET"

EMULATED_BENCH = """
bench:
  id: "offline"
  description: "Emulated supply"
instruments:
  psu:
    driver: "labhal_rigol.dp800:create_emulated_instrument"
    identity:
      manufacturer: "RIGOL TECHNOLOGIES"
      model: "{model}"
"""


@pytest.fixture
def opened(
    monkeypatch: pytest.MonkeyPatch, transport: ScriptedTransport
) -> list[dict[str, Any]]:
    """Route the CLI's connections to the scripted transport and record the calls."""
    calls: list[dict[str, Any]] = []

    def fake_open(address: str, **kwargs: Any) -> ScpiConnection:
        calls.append({"address": address, **kwargs})
        return ScpiConnection(transport, check_errors=False)

    monkeypatch.setattr(cli, "open_connection", fake_open)
    return calls


class TestParser:
    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_connection_options(self) -> None:
        args = cli.build_parser().parse_args(
            ["--debug", "query", ADDRESS, "*IDN?", "--timeout-ms", "250", "--no-check-errors"]
        )
        assert args.debug is True
        assert args.address == ADDRESS
        assert args.scpi == "*IDN?"
        assert args.timeout_ms == 250
        assert args.no_check_errors is True

    def test_defaults(self) -> None:
        args = cli.build_parser().parse_args(["identify", ADDRESS])
        assert args.timeout_ms == 5000
        assert args.no_check_errors is False


class TestIdentify:
    def test_prints_identity(
        self,
        opened: list[dict[str, Any]],
        transport: ScriptedTransport,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        transport.queue("RIGOL TECHNOLOGIES,DP832,DP8C1234,00.01.16")
        assert cli.main(["identify", ADDRESS]) == 0
        out = capsys.readouterr().out
        assert "Manufacturer: RIGOL TECHNOLOGIES" in out
        assert "Serial:       DP8C1234" in out
        assert transport.written == ["*IDN?"]
        assert transport.closed
        assert opened == [{"address": ADDRESS, "timeout_ms": 5000, "check_errors": True}]

    def test_bad_reply(
        self,
        opened: list[dict[str, Any]],
        transport: ScriptedTransport,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        transport.queue("RIGOL")
        assert cli.main(["identify", ADDRESS]) == 1
        assert capsys.readouterr().out.startswith("Error:")
        assert transport.closed

    def test_open_failure(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def refuse(address: str, **kwargs: Any) -> ScpiConnection:
            raise TransportError(f"Failed to open {address}")

        monkeypatch.setattr(cli, "open_connection", refuse)
        assert cli.main(["identify", ADDRESS]) == 1
        assert f"Error: Failed to open {ADDRESS}" in capsys.readouterr().out


class TestQueryAndSend:
    def test_query(
        self,
        opened: list[dict[str, Any]],
        transport: ScriptedTransport,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        transport.queue("5.000,1.000,5.000")
        assert cli.main(["query", ADDRESS, "MEAS:ALL? CH1", "--no-check-errors"]) == 0
        assert capsys.readouterr().out == "5.000,1.000,5.000\n"
        assert transport.written == ["MEAS:ALL? CH1"]
        assert opened[0]["check_errors"] is False

    def test_send(self, opened: list[dict[str, Any]], transport: ScriptedTransport) -> None:
        assert cli.main(["send", ADDRESS, "OUTP CH1,ON"]) == 0
        assert transport.written == ["OUTP CH1,ON"]
        assert transport.closed


class TestBench:
    def test_ready(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bench.yaml"
        path.write_text(EMULATED_BENCH.format(model="DP832"), encoding="utf-8")
        assert cli.main(["bench", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Bench: offline" in out
        assert "psu: ready RIGOL TECHNOLOGIES DP832" in out
        assert "All instruments ready" in out

    def test_mismatch(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bench.yaml"
        path.write_text(EMULATED_BENCH.format(model="DP811"), encoding="utf-8")
        assert cli.main(["bench", str(path)]) == 1
        assert "Model mismatch" in capsys.readouterr().out

    def test_env_default(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "bench.yaml"
        path.write_text(EMULATED_BENCH.format(model="DP832"), encoding="utf-8")
        monkeypatch.setenv(BENCH_ENV_VAR, str(path))
        assert cli.main(["bench"]) == 0
        assert "Bench: offline" in capsys.readouterr().out

    def test_no_file(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.delenv(BENCH_ENV_VAR, raising=False)
        assert cli.main(["bench"]) == 1
        assert BENCH_ENV_VAR in capsys.readouterr().out

    def test_invalid_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bench.yaml"
        path.write_text("bench: {}\n", encoding="utf-8")
        assert cli.main(["bench", str(path)]) == 1
        assert "bench.id" in capsys.readouterr().out
