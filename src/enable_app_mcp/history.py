"""In-memory result log, newest entry first."""

from __future__ import annotations

import threading

from .models.result import ResultEntry


class ResultLog:
    """Append-at-head log of processing results.

    Entries are never removed. All mutation goes through a lock so drops
    delivered from several threads or tasks are serialized.
    """

    def __init__(self) -> None:
        self._entries: list[ResultEntry] = []
        self._lock = threading.Lock()

    def prepend(self, entry: ResultEntry) -> None:
        """Insert *entry* at index 0."""
        with self._lock:
            self._entries.insert(0, entry)

    def entries(self, limit: int | None = None) -> list[ResultEntry]:
        """Return a newest-first snapshot, optionally truncated to *limit*."""
        with self._lock:
            if limit is None:
                return list(self._entries)
            return self._entries[:limit]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Module-level log, lives for the whole process
_log: ResultLog | None = None


def get_result_log() -> ResultLog:
    """Return the process-wide result log, creating it on first access."""
    global _log
    if _log is None:
        _log = ResultLog()
    return _log
