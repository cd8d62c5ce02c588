"""HTTP interface for quant-monitor."""
