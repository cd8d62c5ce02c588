"""Yahoo Finance adapter for fetching closing-price history."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

import httpx
import polars as pl

from quant_monitor.exceptions import DataFetchError
from quant_monitor.provider.base_provider import BaseMarketDataProvider
from quant_monitor.provider.yahoo.models import BASE_URL, CHART_PATH, DEFAULT_HEADERS, YahooInterval

logger = logging.getLogger(__name__)


def normalize_closes(timestamps: Sequence[int | None], closes: Sequence[float | None]) -> list[float]:
    """Order closes by timestamp, dropping nulls and duplicate timestamps.

    Args:
        timestamps: Unix timestamps (seconds) as returned by the provider
        closes: Closing prices aligned with ``timestamps``

    Returns:
        list[float]: Closing prices, oldest first

    Raises:
        DataFetchError: If the two sequences have different lengths
    """
    if len(timestamps) != len(closes):
        raise DataFetchError(f"Misaligned quotes: {len(timestamps)} timestamps, {len(closes)} closes")
    if not timestamps:
        return []

    df = (
        pl.DataFrame(
            {"timestamp": list(timestamps), "close": list(closes)},
            schema={"timestamp": pl.Int64, "close": pl.Float64},
        )
        .drop_nulls()
        .unique(subset="timestamp", keep="last", maintain_order=True)
        .sort("timestamp")
    )
    return df["close"].to_list()


class YahooFinanceProvider(BaseMarketDataProvider):
    """Yahoo Finance chart API client.

    One request per symbol, no retries and no rate limiting. Adjusted closes
    are preferred; raw closes are used when the chart carries no adjusted series.
    """

    def __init__(
        self,
        interval: YahooInterval = YahooInterval.DAY,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize YahooFinanceProvider.

        Args:
            interval: Bar interval requested from the chart endpoint
            base_url: API base URL
            timeout: Request timeout in seconds (ignored when ``client`` is given)
            client: Pre-built client, mainly for tests
        """
        self.interval = interval
        self.base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, headers=DEFAULT_HEADERS, timeout=timeout)

    async def _get_chart(self, symbol: str, start: datetime, end: datetime) -> Any:
        params = {
            "period1": str(int(start.timestamp())),
            "period2": str(int(end.timestamp())),
            "interval": self.interval.value,
            "events": "div,splits",
        }
        try:
            response = await self._client.get(CHART_PATH.format(symbol=symbol), params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise DataFetchError(f"Request for {symbol!r} failed: {e}", symbol=symbol) from e
        except ValueError as e:
            raise DataFetchError(f"Invalid JSON for {symbol!r}: {e}", symbol=symbol) from e

    async def fetch_closes(self, symbol: str, start: datetime, end: datetime) -> list[float]:
        """Fetch closing prices for ``symbol`` within ``[start, end]``.

        Raises:
            DataFetchError: Network/HTTP failure, chart error or malformed payload
        """
        payload = await self._get_chart(symbol, start, end)

        chart = payload.get("chart") if isinstance(payload, dict) else None
        if not isinstance(chart, dict):
            raise DataFetchError(f"Malformed chart for {symbol!r}: missing 'chart' object", symbol=symbol)

        if chart.get("error"):
            error = chart["error"]
            description = error.get("description") if isinstance(error, dict) else error
            raise DataFetchError(f"Chart error for {symbol!r}: {description}", symbol=symbol)

        results = chart.get("result") or []
        if not results:
            raise DataFetchError(f"No chart result for {symbol!r}", symbol=symbol)

        try:
            result = results[0]
            timestamps = result.get("timestamp") or []
            indicators = result.get("indicators", {})
            adjclose = indicators.get("adjclose") or []
            if adjclose and adjclose[0].get("adjclose") is not None:
                closes = adjclose[0]["adjclose"]
            else:
                closes = (indicators.get("quote") or [{}])[0].get("close") or []
            series = normalize_closes(timestamps, closes)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError, pl.exceptions.PolarsError) as e:
            raise DataFetchError(f"Malformed chart for {symbol!r}: {e}", symbol=symbol) from e

        logger.debug("Fetched %d closes for %s", len(series), symbol)
        return series

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()
