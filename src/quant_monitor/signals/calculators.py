"""Statistical signals over an ordered series of closing prices.

Every calculator is a pure function that is total over any ordered float
sequence. ``None`` means "no result" (empty input or an invalid window) and
is distinct from an empty moving-average series.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_WINDOW_SIZE = 30


class SignalKind(str, Enum):
    """The fixed set of signals computed for every symbol."""

    MAX = "max"
    MIN = "min"
    PRICE_DIFFERENCE = "price_difference"
    WINDOWED_AVERAGE = "windowed_average"


def price_difference(series: Sequence[float]) -> tuple[float, float] | None:
    """Absolute and relative difference between the first and last price.

    The relative difference is taken against the first price; a zero baseline
    is replaced by 1.0.

    Args:
        series: Closing prices, oldest first

    Returns:
        ``(absolute, relative)`` or None for an empty series
    """
    if not series:
        return None
    first, last = series[0], series[-1]
    absolute = last - first
    baseline = 1.0 if first == 0 else first
    return absolute, absolute / baseline


def windowed_average(window_size: int, series: Sequence[float]) -> list[float] | None:
    """Simple moving average over every contiguous window of ``window_size``.

    Args:
        window_size: Number of prices per window, must be > 1
        series: Closing prices, oldest first

    Returns:
        One mean per window in series order (empty when the window is longer
        than the series), or None for an empty series or ``window_size <= 1``
    """
    if not series or window_size <= 1:
        return None
    return [
        sum(series[i : i + window_size]) / window_size
        for i in range(len(series) - window_size + 1)
    ]


def max_of(series: Sequence[float]) -> float | None:
    """Maximum price of the series, None when empty."""
    if not series:
        return None
    return max(series)


def min_of(series: Sequence[float]) -> float | None:
    """Minimum price of the series, None when empty."""
    if not series:
        return None
    return min(series)


_CALCULATORS: dict[SignalKind, Callable[[Sequence[float], int], Any]] = {
    SignalKind.MAX: lambda series, _: max_of(series),
    SignalKind.MIN: lambda series, _: min_of(series),
    SignalKind.PRICE_DIFFERENCE: lambda series, _: price_difference(series),
    SignalKind.WINDOWED_AVERAGE: lambda series, window_size: windowed_average(window_size, series),
}


def calculate(
    kind: SignalKind,
    series: Sequence[float],
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> Any:
    """Run the calculator registered for ``kind`` against ``series``.

    ``window_size`` is only used by :attr:`SignalKind.WINDOWED_AVERAGE`.
    """
    return _CALCULATORS[kind](series, window_size)


@dataclass(frozen=True)
class SignalSet:
    """All signals computed for one price series."""

    max: float | None
    min: float | None
    difference: tuple[float, float] | None
    moving_average: list[float] | None

    @property
    def percent_change(self) -> float:
        """Relative price difference in percent (0.0 when unavailable)."""
        _, relative = self.difference if self.difference is not None else (0.0, 0.0)
        return relative * 100.0

    @property
    def last_average(self) -> float:
        """Most recent moving-average value (0.0 when unavailable)."""
        if not self.moving_average:
            return 0.0
        return self.moving_average[-1]


def compute_signals(series: Sequence[float], window_size: int = DEFAULT_WINDOW_SIZE) -> SignalSet:
    """Compute every :class:`SignalKind` for ``series``."""
    results = {kind: calculate(kind, series, window_size) for kind in SignalKind}
    return SignalSet(
        max=results[SignalKind.MAX],
        min=results[SignalKind.MIN],
        difference=results[SignalKind.PRICE_DIFFERENCE],
        moving_average=results[SignalKind.WINDOWED_AVERAGE],
    )
