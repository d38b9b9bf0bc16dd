"""Two-tier build cache: one universe per content hash, one scan record per file."""

from token_utilities.cache.scan import FileScanRecord, ScanCache
from token_utilities.cache.universe import (
    UniverseCache,
    UniverseCacheEntry,
    content_hash,
)
from token_utilities.cache.build import BuildCache

__all__ = [
    "BuildCache",
    "FileScanRecord",
    "ScanCache",
    "UniverseCache",
    "UniverseCacheEntry",
    "content_hash",
]
