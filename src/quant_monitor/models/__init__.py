"""Models package for quant-monitor."""

from quant_monitor.models.monitor_config import MonitorConfig
from quant_monitor.models.record import (
    COMPUTE_FAILED_PLACEHOLDER,
    CSV_HEADER,
    EMPTY_SERIES_PLACEHOLDER,
    FETCH_FAILED_PLACEHOLDER,
    SymbolRecord,
    format_report,
    report_body,
    to_rfc3339,
)

__all__ = [
    # Configuration models
    "MonitorConfig",
    # Record formatting
    "CSV_HEADER",
    "COMPUTE_FAILED_PLACEHOLDER",
    "EMPTY_SERIES_PLACEHOLDER",
    "FETCH_FAILED_PLACEHOLDER",
    "SymbolRecord",
    "format_report",
    "report_body",
    "to_rfc3339",
]
