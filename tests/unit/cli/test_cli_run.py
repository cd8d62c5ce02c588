"""Unit tests for the run CLI command."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from quant_monitor import __version__
from quant_monitor.cli.commands.monitor import run_monitor
from quant_monitor.cli.main import app
from quant_monitor.models import CSV_HEADER, MonitorConfig

runner = CliRunner()


@pytest.fixture()
def symbols_file(tmp_path: Path) -> Path:
    path = tmp_path / "symbols.txt"
    path.write_text("AAA,BBB", encoding="utf-8")
    return path


def _run_args(symbols_file: Path, output: Path, *extra: str) -> list[str]:
    return [
        "run",
        "--from",
        "2020-07-02T00:00:00Z",
        "--source",
        str(symbols_file),
        "--output",
        str(output),
        "--interval",
        "0.01",
        "--no-serve",
        *extra,
    ]


@pytest.mark.unit
class TestVersion:
    """Test version command and flag."""

    def test_version_command(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


@pytest.mark.unit
class TestRunCommand:
    """Test `quant-monitor run`."""

    def test_run_writes_csv(self, tmp_path, symbols_file, make_provider, monkeypatch):
        monkeypatch.delenv("QUANT_MONITOR_CONFIG", raising=False)
        output = tmp_path / "out.csv"
        provider = make_provider({"AAA": [10.0, 12.0]})

        with patch("quant_monitor.cli.commands.monitor.YahooFinanceProvider", return_value=provider):
            result = runner.invoke(app, _run_args(symbols_file, output, "--max-iterations", "2"))

        assert result.exit_code == 0, result.output
        assert "2 iteration(s) completed" in result.output
        assert provider.closed

        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[0] == CSV_HEADER
        assert lines[1] == "2020-07-02T00:00:00+00:00,AAA,$12.00,20.00%,$10.00,$12.00,$0.00"
        assert lines[2] == "Could not fetch closing data"
        assert len(lines) == 5

    def test_invalid_from_date(self, tmp_path, symbols_file):
        result = runner.invoke(app, ["run", "--from", "yesterday", "--source", str(symbols_file), "--no-serve"])
        assert result.exit_code == 2

    def test_missing_from_date(self, tmp_path, symbols_file, monkeypatch):
        monkeypatch.delenv("QUANT_MONITOR_CONFIG", raising=False)
        result = runner.invoke(app, ["run", "--source", str(symbols_file), "--no-serve"])
        assert result.exit_code == 1
        assert "Invalid monitor configuration" in result.output

    def test_missing_symbols_file_is_fatal(self, tmp_path, make_provider, monkeypatch):
        monkeypatch.delenv("QUANT_MONITOR_CONFIG", raising=False)
        with patch("quant_monitor.cli.commands.monitor.YahooFinanceProvider", return_value=make_provider({})):
            result = runner.invoke(
                app, _run_args(tmp_path / "missing.txt", tmp_path / "out.csv", "--max-iterations", "1")
            )
        assert result.exit_code == 1
        assert "Couldn't read symbols file" in result.output
        assert not (tmp_path / "out.csv").exists()

    def test_config_file_values(self, tmp_path, symbols_file, make_provider, monkeypatch):
        output = tmp_path / "from-config.csv"
        config_path = tmp_path / "monitor.toml"
        config_path.write_text(
            "[monitor]\n"
            f'source = "{symbols_file.as_posix()}"\n'
            f'output = "{output.as_posix()}"\n'
            "start = 2020-07-02T00:00:00Z\n"
            "max_iterations = 1\n"
            "interval_seconds = 0.01\n"
            "serve = false\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("QUANT_MONITOR_CONFIG", str(config_path))

        with patch("quant_monitor.cli.commands.monitor.YahooFinanceProvider", return_value=make_provider({})):
            result = runner.invoke(app, ["run"])

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").splitlines()[0] == CSV_HEADER


@pytest.mark.unit
class TestRunMonitor:
    """Test run_monitor coroutine."""

    @pytest.mark.asyncio
    async def test_without_server(self, tmp_path, symbols_file, make_provider):
        config = MonitorConfig(
            source=symbols_file,
            start=datetime(2020, 7, 2, tzinfo=timezone.utc),
            output=tmp_path / "out.csv",
            max_iterations=1,
            interval_seconds=0.01,
            serve=False,
        )
        provider = make_provider({"AAA": [1.0], "BBB": [2.0]})
        assert await run_monitor(config, provider) == 1
        assert provider.closed

    @pytest.mark.asyncio
    async def test_server_stopped_with_loop(self, tmp_path, symbols_file, make_provider):
        config = MonitorConfig(
            source=symbols_file,
            start=datetime(2020, 7, 2, tzinfo=timezone.utc),
            output=tmp_path / "out.csv",
            max_iterations=1,
            interval_seconds=0.01,
        )
        server = MagicMock()
        server.should_exit = False
        server.serve = AsyncMock()

        with patch("quant_monitor.cli.commands.monitor.uvicorn.Server", return_value=server):
            assert await run_monitor(config, make_provider({})) == 1

        server.serve.assert_awaited_once()
        assert server.should_exit is True
