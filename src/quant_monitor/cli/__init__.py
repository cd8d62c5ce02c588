"""Command-line interface for quant-monitor."""
