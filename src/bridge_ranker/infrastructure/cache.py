"""Cache implementations for infrastructure.

Usage example:
    from bridge_ranker.domain.similarity import SimilarityBreakdown
    from bridge_ranker.infrastructure.cache import InMemorySimilarityCache

    cache = InMemorySimilarityCache()
    cache.set("alice", "bob", SimilarityBreakdown.empty())
    assert cache.get("bob", "alice") == SimilarityBreakdown.empty()
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import override

from ..domain.similarity import SimilarityBreakdown
from ..protocols import SimilarityCache

DEFAULT_TTL = timedelta(days=7)


@dataclass(frozen=True)
class CacheEntry:
    """A cached similarity result with an absolute expiry."""

    value: SimilarityBreakdown
    expires_at: datetime


def pair_key(id1: str, id2: str) -> str:
    """Order-independent key for a pair of profile identifiers."""
    return ":".join(sorted((id1, id2)))


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _empty_entries() -> dict[str, CacheEntry]:
    return {}


@dataclass
class InMemorySimilarityCache(SimilarityCache):
    """Thread-safe in-memory TTL cache for pairwise similarity.

    ``get`` evicts expired entries lazily; ``sweep`` is optional maintenance.
    """

    ttl: timedelta = DEFAULT_TTL
    clock: Callable[[], datetime] = _utc_now
    _entries: dict[str, CacheEntry] = field(default_factory=_empty_entries)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    @override
    def get(self, id1: str, id2: str) -> SimilarityBreakdown | None:
        key = pair_key(id1, id2)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self.clock() > entry.expires_at:
                del self._entries[key]
                return None
            return entry.value

    @override
    def set(self, id1: str, id2: str, value: SimilarityBreakdown) -> None:
        entry = CacheEntry(value=value, expires_at=self.clock() + self.ttl)
        with self._lock:
            self._entries[pair_key(id1, id2)] = entry

    @override
    def sweep(self) -> int:
        now = self.clock()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if now > entry.expires_at]
            for key in expired:
                del self._entries[key]
        return len(expired)

    @override
    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def entry(self, id1: str, id2: str) -> CacheEntry | None:
        """Return the raw entry without expiry checks (for inspection)."""
        with self._lock:
            return self._entries.get(pair_key(id1, id2))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
