"""Yahoo Finance provider for closing-price history."""

from quant_monitor.provider.yahoo.adapter import YahooFinanceProvider, normalize_closes
from quant_monitor.provider.yahoo.models import BASE_URL, YahooInterval

__all__ = [
    "BASE_URL",
    "YahooFinanceProvider",
    "YahooInterval",
    "normalize_closes",
]
