"""Append-only CSV persistence for reports.

The header line is written only when the target file does not exist yet, so
it appears at most once per file, across process restarts. Appends to the
same path are serialized with a per-path lock.
"""

from __future__ import annotations

import asyncio
import logging
import os
import threading
from pathlib import Path

from quant_monitor.exceptions import PersistenceError
from quant_monitor.models.record import CSV_HEADER

logger = logging.getLogger(__name__)


class CsvReportWriter:
    """Serialized appender of report bodies to CSV files.

    Usage:
        writer = CsvReportWriter()
        writer.append(Path("out.csv"), body)  # header + body on first write
        await writer.append_async(Path("out.csv"), body)  # body only
    """

    def __init__(self, header: str = CSV_HEADER) -> None:
        """Initialize the writer.

        Args:
            header: Line written before the first body of a new file.
        """
        self.header = header
        self._locks: dict[Path, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, path: Path) -> threading.Lock:
        key = path.absolute()
        with self._locks_guard:
            if key not in self._locks:
                self._locks[key] = threading.Lock()
            return self._locks[key]

    def append(self, path: Path, report: str) -> None:
        """Append ``report`` to ``path``, prefixed by the header for a new file.

        Args:
            path: Target CSV file (created if absent).
            report: Report body, without trailing newline.

        Raises:
            PersistenceError: If the file cannot be opened or written.
        """
        with self._lock_for(path):
            is_new = not path.exists()
            body = f"{self.header}\n{report}\n" if is_new else f"{report}\n"
            try:
                with open(path, "a", encoding="utf-8", newline="") as f:
                    f.write(body)
                    f.flush()
                    os.fsync(f.fileno())
            except OSError as e:
                raise PersistenceError(f"Failed to append report to {path}: {e}") from e

        if is_new:
            logger.info("Created %s with CSV header", path)
        logger.debug("Appended %d bytes to %s", len(body), path)

    async def append_async(self, path: Path, report: str) -> None:
        """Run :meth:`append` in a worker thread."""
        await asyncio.to_thread(self.append, path, report)
