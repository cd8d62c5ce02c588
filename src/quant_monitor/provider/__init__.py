"""Market-data providers for quant-monitor.

This package provides:
- BaseMarketDataProvider: Abstract base class for provider clients
- YahooFinanceProvider: Yahoo Finance chart API client
"""

from quant_monitor.provider.base_provider import BaseMarketDataProvider
from quant_monitor.provider.yahoo import YahooFinanceProvider

__all__ = [
    "BaseMarketDataProvider",
    "YahooFinanceProvider",
]
