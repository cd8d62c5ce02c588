"""Fetch/report pipeline for quant-monitor."""

from quant_monitor.pipeline.batch import BatchOrchestrator, split_symbols
from quant_monitor.pipeline.scheduler import LoopState, MonitorLoop, load_symbols

__all__ = [
    "BatchOrchestrator",
    "LoopState",
    "MonitorLoop",
    "load_symbols",
    "split_symbols",
]
