"""Universe cache keyed by a content hash of every generation input."""

from __future__ import annotations

import hashlib
import threading
from dataclasses import dataclass

from token_utilities.rules.registry import RuleRegistry
from token_utilities.universe.generator import Universe


def content_hash(
    token_css: str,
    media_css: str,
    registry: RuleRegistry,
    rules_source: str = "",
) -> str:
    """Fingerprint the token source, media source and rule extensions.

    *rules_source* is the text of the project rules module, so an edit to a
    custom builder body invalidates the universe even when its name is
    unchanged.
    """
    digest = hashlib.md5()
    for part in (token_css, media_css, registry.fingerprint(), rules_source):
        digest.update(part.encode("utf-8"))
        digest.update(b"\0")
    return digest.hexdigest()


@dataclass(frozen=True)
class UniverseCacheEntry:
    content_hash: str
    universe: Universe

    @property
    def lookup(self) -> dict[str, str]:
        return self.universe.lookup

    @property
    def raw_css(self) -> str:
        return self.universe.raw_css


class UniverseCache:
    """Holds the universe for the most recent content hash.

    The entry is replaced wholesale whenever the hash changes; readers only
    ever see a completely generated universe.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entry: UniverseCacheEntry | None = None
        self.generations = 0

    def get(self, content_hash: str) -> UniverseCacheEntry | None:
        """Return the cached entry if it was built for *content_hash*."""
        with self._lock:
            if self._entry is not None and self._entry.content_hash == content_hash:
                return self._entry
            return None

    def store(self, entry: UniverseCacheEntry) -> None:
        with self._lock:
            self._entry = entry
            self.generations += 1

    @property
    def current(self) -> UniverseCacheEntry | None:
        with self._lock:
            return self._entry

    def clear(self) -> None:
        with self._lock:
            self._entry = None
