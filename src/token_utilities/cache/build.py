"""Process-lifetime cache handed to the engine."""

from __future__ import annotations

from token_utilities.cache.scan import ScanCache
from token_utilities.cache.universe import UniverseCache


class BuildCache:
    """Owns one universe cache and one scan cache.

    Create one per build process (or per test) and pass it to every
    :class:`~token_utilities.engine.UtilityEngine` that should share it.
    """

    def __init__(self) -> None:
        self.universe = UniverseCache()
        self.scans = ScanCache()

    def __repr__(self) -> str:
        current = self.universe.current
        digest = current.content_hash[:8] if current else None
        return f"BuildCache(universe={digest!r}, scanned_files={len(self.scans)})"
