"""Bounded most-recent-first buffer of report strings.

Holds the last few reports for the tail endpoint. Reads are destructive:
:meth:`RecencyBuffer.drain` hands entries over to the caller and removes them.
Both mutating operations are serialized with one lock, so the scheduler loop
and the HTTP handlers (which run in FastAPI's thread pool) can share an
instance.
"""

from __future__ import annotations

import logging
import threading
from collections import deque

logger = logging.getLogger(__name__)


class RecencyBuffer:
    """Fixed-capacity mailbox with most-recent-first delivery.

    Usage:
        buffer = RecencyBuffer(capacity=2)
        buffer.push("R1")
        buffer.push("R2")
        buffer.push("R3")  # evicts "R1"
        buffer.drain(2)  # ["R3", "R2"]
    """

    def __init__(self, capacity: int) -> None:
        """Initialize the buffer.

        Args:
            capacity: Maximum number of reports held at once (>= 1).

        Raises:
            ValueError: If capacity is smaller than 1.
        """
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._items: deque[str] = deque()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def push(self, report: str) -> None:
        """Insert ``report`` at the head, evicting the oldest entry when full."""
        with self._lock:
            if len(self._items) == self._capacity:
                self._items.pop()
                logger.debug("Recency buffer full (%d), evicted oldest report", self._capacity)
            self._items.appendleft(report)

    def drain(self, n: int) -> list[str]:
        """Remove and return up to ``n`` reports, most recent first.

        Never fails: ``n <= 0`` or an empty buffer yields an empty list.
        """
        with self._lock:
            count = min(max(n, 0), len(self._items))
            return [self._items.popleft() for _ in range(count)]
