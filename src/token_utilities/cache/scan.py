"""Per-file scan cache keyed by modification time."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


@dataclass(frozen=True)
class FileScanRecord:
    path: Path
    mtime_ns: int
    classes: frozenset[str]


class ScanCache:
    """Extracted class sets per file.

    A record is reused only while the file's modification time is unchanged.
    An edit that does not advance the modification time (coarse filesystem
    clocks) is served from the cache.  Records are never evicted during a
    build; :meth:`prune` exists for long-running watch sessions.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[Path, FileScanRecord] = {}

    def lookup(self, path: Path, mtime_ns: int) -> FileScanRecord | None:
        with self._lock:
            record = self._records.get(path)
            if record is not None and record.mtime_ns == mtime_ns:
                return record
            return None

    def store(self, record: FileScanRecord) -> None:
        with self._lock:
            self._records[record.path] = record

    def prune(self, keep: Iterable[Path]) -> int:
        """Drop records for paths not in *keep*; return how many were dropped."""
        wanted = set(keep)
        with self._lock:
            stale = [p for p in self._records if p not in wanted]
            for path in stale:
                del self._records[path]
            return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._records
