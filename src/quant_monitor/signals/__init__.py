"""Signal calculators over closing-price series."""

from quant_monitor.signals.calculators import (
    DEFAULT_WINDOW_SIZE,
    SignalKind,
    SignalSet,
    calculate,
    compute_signals,
    max_of,
    min_of,
    price_difference,
    windowed_average,
)

__all__ = [
    "DEFAULT_WINDOW_SIZE",
    "SignalKind",
    "SignalSet",
    "calculate",
    "compute_signals",
    "max_of",
    "min_of",
    "price_difference",
    "windowed_average",
]
