"""E2E tests for the Yahoo Finance provider.

These tests make real API calls and require:
- QUANT_MONITOR_E2E=1 environment variable to be set
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

from quant_monitor.models import CSV_HEADER
from quant_monitor.pipeline import BatchOrchestrator
from quant_monitor.provider.yahoo import YahooFinanceProvider

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(os.environ.get("QUANT_MONITOR_E2E") != "1", reason="QUANT_MONITOR_E2E not set"),
]


@pytest.mark.asyncio
async def test_fetch_closes_real_symbol() -> None:
    end = datetime.now(timezone.utc)
    start = end - timedelta(days=60)

    async with YahooFinanceProvider() as provider:
        closes = await provider.fetch_closes("MSFT", start, end)

    assert len(closes) > 20
    assert all(price > 0 for price in closes)


@pytest.mark.asyncio
async def test_report_for_real_symbols() -> None:
    end = datetime.now(timezone.utc)
    start = end - timedelta(days=90)

    async with YahooFinanceProvider() as provider:
        report = await BatchOrchestrator(provider).build_report("AAPL,MSFT", start, end)

    lines = report.split("\n")
    assert lines[0] == CSV_HEADER
    assert lines[1].split(",")[1] == "AAPL"
    assert lines[2].split(",")[1] == "MSFT"
