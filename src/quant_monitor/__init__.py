"""quant-monitor: periodic price-signal reports for a list of market symbols."""

__version__ = "0.1.0"
