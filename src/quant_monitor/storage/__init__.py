"""Storage layer: in-memory recency buffer and CSV report persistence."""

from quant_monitor.storage.csv_writer import CsvReportWriter
from quant_monitor.storage.recency_buffer import RecencyBuffer

__all__ = [
    "CsvReportWriter",
    "RecencyBuffer",
]
