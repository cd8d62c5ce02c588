"""Per-symbol fetch tasks and the batch orchestrator.

Usage:
    async with YahooFinanceProvider() as provider:
        orchestrator = BatchOrchestrator(provider)
        report = await orchestrator.build_report("AAPL,MSFT", start, end)

Each symbol is fetched in its own asyncio task. Failures are absorbed into a
degraded placeholder line, and lines are assembled in input order regardless
of completion order.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from quant_monitor.exceptions import DataFetchError
from quant_monitor.models.record import (
    COMPUTE_FAILED_PLACEHOLDER,
    EMPTY_SERIES_PLACEHOLDER,
    FETCH_FAILED_PLACEHOLDER,
    SymbolRecord,
    format_report,
)
from quant_monitor.provider.base_provider import BaseMarketDataProvider
from quant_monitor.signals import DEFAULT_WINDOW_SIZE, compute_signals

logger = logging.getLogger(__name__)


def split_symbols(content: str) -> list[str]:
    """Split comma-separated symbol content, keeping order and empty tokens."""
    return content.split(",")


class BatchOrchestrator:
    """Fan a symbol list out to concurrent fetch tasks and join the results."""

    def __init__(
        self,
        provider: BaseMarketDataProvider,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> None:
        """Initialize BatchOrchestrator.

        Args:
            provider: Market-data provider used for every symbol
            window_size: Moving-average window for the last-average column
        """
        self.provider = provider
        self.window_size = window_size

    async def fetch_symbol(self, symbol: str, start: datetime, end: datetime) -> str:
        """Fetch one symbol and format its CSV line.

        Provider failures and empty series produce a placeholder line
        instead of an exception.
        """
        try:
            closes = await self.provider.fetch_closes(symbol, start, end)
        except DataFetchError as e:
            logger.warning("Could not fetch closing data for %r: %s", symbol, e)
            return FETCH_FAILED_PLACEHOLDER

        if not closes:
            logger.warning("Retrieved series for %r is empty", symbol)
            return EMPTY_SERIES_PLACEHOLDER

        signals = compute_signals(closes, self.window_size)
        record = SymbolRecord(
            period_start=start,
            symbol=symbol,
            price=closes[-1],
            percent_change=signals.percent_change,
            min=signals.min if signals.min is not None else 0.0,
            max=signals.max if signals.max is not None else 0.0,
            last_average=signals.last_average,
        )
        return record.to_csv_line()

    async def fetch_lines(self, symbols: list[str], start: datetime, end: datetime) -> list[str]:
        """Fetch every symbol concurrently; lines are returned in ``symbols`` order."""
        tasks = [asyncio.create_task(self.fetch_symbol(symbol, start, end)) for symbol in symbols]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        lines: list[str] = []
        for symbol, result in zip(symbols, results, strict=True):
            if isinstance(result, Exception):
                logger.error("Fetch task for %r crashed: %s", symbol, result, exc_info=result)
                lines.append(COMPUTE_FAILED_PLACEHOLDER)
            elif isinstance(result, BaseException):
                raise result
            else:
                lines.append(result)
        return lines

    async def build_report(self, content: str, start: datetime, end: datetime) -> str:
        """Build one report (header plus one line per symbol) from symbol-list content.

        Args:
            content: Comma-separated symbols
            start: Period start
            end: Period end

        Returns:
            str: Newline-joined report
        """
        symbols = split_symbols(content)
        logger.info("Fetching %d symbols from %s to %s", len(symbols), start.isoformat(), end.isoformat())
        lines = await self.fetch_lines(symbols, start, end)
        return format_report(lines)
