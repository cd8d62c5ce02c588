"""CLI command modules."""

from quant_monitor.cli.commands.monitor import run, run_monitor

__all__ = ["run", "run_monitor"]
