"""Shared fixtures for quant-monitor tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime, timezone

import pytest

from quant_monitor.exceptions import DataFetchError
from quant_monitor.provider.base_provider import BaseMarketDataProvider

PERIOD_START = datetime(2020, 7, 2, tzinfo=timezone.utc)
PERIOD_END = datetime(2020, 10, 2, tzinfo=timezone.utc)


class FakeProvider(BaseMarketDataProvider):
    """In-memory provider: a price list, or an exception to raise, per symbol."""

    def __init__(
        self,
        series: Mapping[str, Sequence[float] | BaseException],
        delays: Mapping[str, float] | None = None,
    ) -> None:
        self.series = dict(series)
        self.delays = dict(delays or {})
        self.calls: list[tuple[str, datetime, datetime]] = []
        self.closed = False

    async def fetch_closes(self, symbol: str, start: datetime, end: datetime) -> list[float]:
        self.calls.append((symbol, start, end))
        delay = self.delays.get(symbol, 0.0)
        if delay:
            await asyncio.sleep(delay)
        value = self.series.get(symbol)
        if value is None:
            raise DataFetchError(f"Unknown symbol {symbol!r}", symbol=symbol)
        if isinstance(value, BaseException):
            raise value
        return list(value)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_provider() -> Callable[..., FakeProvider]:
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def period() -> tuple[datetime, datetime]:
    """Default (start, end) period used by pipeline tests."""
    return PERIOD_START, PERIOD_END
