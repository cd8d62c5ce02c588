"""Periodic loop: load symbols, build a report, buffer it, persist it.

Usage:
    loop = MonitorLoop(config, orchestrator, buffer, CsvReportWriter())
    completed = await loop.run()

Symbol-source and persistence failures are fatal: the loop stops and the
error propagates to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from quant_monitor.exceptions import QuantMonitorError, SymbolSourceError
from quant_monitor.models.monitor_config import MonitorConfig
from quant_monitor.models.record import report_body
from quant_monitor.pipeline.batch import BatchOrchestrator
from quant_monitor.storage.csv_writer import CsvReportWriter
from quant_monitor.storage.recency_buffer import RecencyBuffer

logger = logging.getLogger(__name__)


class LoopState(str, Enum):
    """Lifecycle state of :class:`MonitorLoop`."""

    RUNNING = "running"
    STOPPED = "stopped"


async def load_symbols(path: Path) -> str:
    """Read symbol-list content from ``path`` off the event loop.

    Raises:
        SymbolSourceError: If the file cannot be read.
    """
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SymbolSourceError(f"Couldn't read symbols file {path}: {e}") from e


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MonitorLoop:
    """Drive ticks of load → orchestrate → buffer → persist."""

    def __init__(
        self,
        config: MonitorConfig,
        orchestrator: BatchOrchestrator,
        buffer: RecencyBuffer,
        writer: CsvReportWriter,
        symbol_loader: Callable[[Path], Awaitable[str]] = load_symbols,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize MonitorLoop.

        Args:
            config: Monitor configuration
            orchestrator: Builds one report per tick
            buffer: Receives every report
            writer: Appends every report body to ``config.output``
            symbol_loader: Reads symbol-list content from ``config.source``
            clock: Returns the current time; used as the end of the period
        """
        self.config = config
        self.orchestrator = orchestrator
        self.buffer = buffer
        self.writer = writer
        self.symbol_loader = symbol_loader
        self.clock = clock
        self.state = LoopState.STOPPED
        self.iteration = 0

    async def tick(self) -> str:
        """Run one iteration and return the report it produced."""
        content = await self.symbol_loader(self.config.source)
        report = await self.orchestrator.build_report(content, self.config.start, self.clock())
        self.buffer.push(report)
        await self.writer.append_async(self.config.output, report_body(report))
        return report

    async def run(self) -> int:
        """Run ticks until the iteration cap is exceeded (forever without a cap).

        The first tick starts immediately, later ticks start one interval
        after the previous one started.

        Returns:
            int: Number of completed iterations

        Raises:
            SymbolSourceError: Symbol list could not be read
            PersistenceError: Report could not be appended
        """
        limit = self.config.iteration_limit
        interval = self.config.interval_seconds
        event_loop = asyncio.get_running_loop()

        self.state = LoopState.RUNNING
        self.iteration = 1
        next_tick = event_loop.time()
        logger.info("Monitor loop started (max_iterations=%s, interval=%.1fs)", limit, interval)

        try:
            while limit is None or self.iteration <= limit:
                delay = next_tick - event_loop.time()
                if delay > 0:
                    await asyncio.sleep(delay)
                next_tick = max(next_tick + interval, event_loop.time())

                try:
                    await self.tick()
                except QuantMonitorError as e:
                    logger.error("Iteration %d failed, stopping: %s", self.iteration, e)
                    raise

                logger.info("Iteration %d complete", self.iteration)
                self.iteration += 1
        finally:
            self.state = LoopState.STOPPED

        completed = self.iteration - 1
        logger.info("Monitor loop stopped after %d iterations", completed)
        return completed
