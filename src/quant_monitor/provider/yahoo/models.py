"""Yahoo Finance chart API constants and enumerations."""

from enum import Enum

# Yahoo Finance chart API base URL
BASE_URL = "https://query1.finance.yahoo.com"

CHART_PATH = "/v8/finance/chart/{symbol}"

# The chart endpoint rejects requests without a browser-like user agent
DEFAULT_HEADERS: dict[str, str] = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) quant-monitor",
    "Accept": "application/json",
}


class YahooInterval(str, Enum):
    """Bar interval supported by the chart endpoint."""

    DAY = "1d"
    WEEK = "1wk"
    MONTH = "1mo"
