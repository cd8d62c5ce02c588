"""CSV record and report formatting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone

CSV_HEADER = "period start,symbol,price,change %,min,max,30d avg"

# Degraded placeholders written in place of a symbol's record
FETCH_FAILED_PLACEHOLDER = "Could not fetch closing data"
EMPTY_SERIES_PLACEHOLDER = "Retrieved Series is empty"
COMPUTE_FAILED_PLACEHOLDER = "Could not compute signals"


def to_rfc3339(value: datetime) -> str:
    """Format ``value`` as RFC 3339; naive datetimes are treated as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


@dataclass(frozen=True)
class SymbolRecord:
    """Computed signals for one symbol over one period."""

    period_start: datetime
    symbol: str
    price: float
    percent_change: float
    min: float
    max: float
    last_average: float

    def to_csv_line(self) -> str:
        """Format the record as a single CSV line (no trailing newline)."""
        return (
            f"{to_rfc3339(self.period_start)},{self.symbol},"
            f"${self.price:.2f},{self.percent_change:.2f}%,"
            f"${self.min:.2f},${self.max:.2f},${self.last_average:.2f}"
        )


def format_report(lines: Iterable[str]) -> str:
    """Join record lines under the CSV header into one report string."""
    return "\n".join([CSV_HEADER, *lines])


def report_body(report: str) -> str:
    """Strip the leading CSV header line from a report, if present."""
    if report == CSV_HEADER:
        return ""
    if report.startswith(CSV_HEADER + "\n"):
        return report[len(CSV_HEADER) + 1 :]
    return report
