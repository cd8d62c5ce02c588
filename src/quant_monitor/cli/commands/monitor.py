"""Monitor loop CLI command."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer
import uvicorn

from quant_monitor.api.app import create_app
from quant_monitor.exceptions import ConfigError, QuantMonitorError
from quant_monitor.models.monitor_config import MonitorConfig
from quant_monitor.pipeline.batch import BatchOrchestrator
from quant_monitor.pipeline.scheduler import MonitorLoop
from quant_monitor.provider.base_provider import BaseMarketDataProvider
from quant_monitor.provider.yahoo import YahooFinanceProvider
from quant_monitor.storage.csv_writer import CsvReportWriter
from quant_monitor.storage.recency_buffer import RecencyBuffer
from quant_monitor.utils.config import load_monitor_config
from quant_monitor.utils.env import CONFIG_ENV_VAR, DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

logger = logging.getLogger(__name__)


def _parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO-8601 date or datetime (``Z`` suffix accepted)."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Couldn't parse 'from' date {value!r}", param_hint="--from") from e


async def run_monitor(config: MonitorConfig, provider: BaseMarketDataProvider | None = None) -> int:
    """Run the monitor loop, serving the tail API alongside it when enabled.

    Args:
        config: Monitor configuration
        provider: Market-data provider (default: YahooFinanceProvider)

    Returns:
        int: Number of completed iterations
    """
    buffer = RecencyBuffer(config.buffer_capacity)

    market_data = provider if provider is not None else YahooFinanceProvider()
    async with market_data:
        loop = MonitorLoop(
            config,
            BatchOrchestrator(market_data, window_size=config.window_size),
            buffer,
            CsvReportWriter(),
        )
        if not config.serve:
            return await loop.run()

        server = uvicorn.Server(uvicorn.Config(create_app(buffer), host=config.host, port=config.port))
        server_task = asyncio.create_task(server.serve())
        logger.info("Serving GET /tail/{n} on http://%s:%d", config.host, config.port)
        try:
            return await loop.run()
        finally:
            server.should_exit = True
            await server_task


def run(
    source: Annotated[
        Path | None,
        typer.Option("--source", "-s", help="Symbols file (comma-separated). Default: sp500.may.2020.txt"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--from", "-f", help="Start of the period to fetch (ISO-8601, e.g. 2020-07-02T00:00:00Z)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="CSV file reports are appended to. Default: out.csv"),
    ] = None,
    max_iterations: Annotated[
        int | None,
        typer.Option("--max-iterations", "-n", help="Number of ticks to run (0 = forever)"),
    ] = None,
    interval: Annotated[
        float | None,
        typer.Option("--interval", help="Seconds between ticks. Default: 30"),
    ] = None,
    buffer_capacity: Annotated[
        int | None,
        typer.Option("--buffer-capacity", help="Reports kept for the tail endpoint. Default: 10"),
    ] = None,
    no_serve: Annotated[
        bool,
        typer.Option("--no-serve", help="Do not start the tail HTTP server"),
    ] = False,
    host: Annotated[
        str | None,
        typer.Option("--host", help="Tail server bind host. Default: 127.0.0.1"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", help="Tail server bind port. Default: 8080"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", envvar=CONFIG_ENV_VAR, help="TOML file with a [monitor] table"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", envvar=LOG_LEVEL_ENV_VAR, help="Logging level"),
    ] = DEFAULT_LOG_LEVEL,
) -> None:
    """Fetch signals for every symbol periodically and append them to a CSV file.

    Example:
        quant-monitor run --from 2020-07-02T00:00:00Z --max-iterations 3
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_monitor_config(
            config_path,
            source=source,
            start=_parse_datetime(start),
            output=output,
            max_iterations=max_iterations,
            interval_seconds=interval,
            buffer_capacity=buffer_capacity,
            serve=False if no_serve else None,
            host=host,
            port=port,
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Source: {config.source}")
    typer.echo(f"Output: {config.output}")
    typer.echo(f"Period start: {config.start.isoformat()}")

    try:
        completed = asyncio.run(run_monitor(config))
    except QuantMonitorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Done! {completed} iteration(s) completed")
