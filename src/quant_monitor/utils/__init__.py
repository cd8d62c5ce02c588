"""Utility functions for quant-monitor."""

from quant_monitor.utils.config import load_config_table, load_monitor_config
from quant_monitor.utils.env import get_config_path

__all__ = [
    "get_config_path",
    "load_config_table",
    "load_monitor_config",
]
