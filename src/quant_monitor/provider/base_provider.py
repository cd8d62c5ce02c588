"""Base market-data provider for fetching closing-price history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from types import TracebackType
from typing import Self


class BaseMarketDataProvider(ABC):
    """Base class for market-data provider clients.

    Providers are swappable: the pipeline only relies on :meth:`fetch_closes`.
    """

    @abstractmethod
    async def fetch_closes(self, symbol: str, start: datetime, end: datetime) -> list[float]:
        """Fetch closing prices for ``symbol`` within ``[start, end]``.

        Args:
            symbol: Ticker symbol
            start: Period start (timezone-aware)
            end: Period end (timezone-aware)

        Returns:
            list[float]: Closing prices ordered by timestamp, oldest first.
                An empty list when the provider has no quotes for the period.

        Raises:
            DataFetchError: Network, HTTP or payload failure
        """
        ...

    async def close(self) -> None:
        """Release provider resources (no-op by default)."""
        return None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
