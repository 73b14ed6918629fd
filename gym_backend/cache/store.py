"""
Process-local key/value store with per-entry TTL.

Values are deep-copied on the way in and out so callers never share mutable
state with the store. Expired entries read as absent and are dropped lazily.
"""
from __future__ import annotations

import copy
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    value: Any
    expires_at: Optional[float]  # monotonic seconds; None never expires

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0
    size: int = 0

    def to_dict(self) -> dict:
        total = self.hits + self.misses
        return {
            "hits": self.hits,
            "misses": self.misses,
            "sets": self.sets,
            "deletes": self.deletes,
            "size": self.size,
            "hit_rate": round(self.hits / total, 4) if total else 0.0,
        }


class CacheStore:
    def __init__(self, default_ttl: Optional[int] = None, clock: Callable[[], float] = time.monotonic):
        self._data: Dict[str, CacheEntry] = {}
        self._default_ttl = default_ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._stats = CacheStats()

    def get(self, key: str) -> Any:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                self._stats.misses += 1
                return None
            if entry.is_expired(self._clock()):
                del self._data[key]
                self._stats.misses += 1
                return None
            self._stats.hits += 1
            return copy.deepcopy(entry.value)

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        ttl = self._default_ttl if ttl is None else ttl
        expires_at = self._clock() + ttl if ttl else None
        entry = CacheEntry(copy.deepcopy(value), expires_at)
        with self._lock:
            self._data[key] = entry
            self._stats.sets += 1

    def delete(self, key: str) -> bool:
        with self._lock:
            if self._data.pop(key, None) is None:
                return False
            self._stats.deletes += 1
            return True

    def delete_prefix(self, prefix: str) -> int:
        with self._lock:
            keys = [k for k in self._data if k.startswith(prefix)]
            for k in keys:
                del self._data[k]
            self._stats.deletes += len(keys)
        return len(keys)

    def flush(self) -> int:
        with self._lock:
            n = len(self._data)
            self._data.clear()
        return n

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            keys = [k for k, e in self._data.items() if e.is_expired(now)]
            for k in keys:
                del self._data[k]
        if keys:
            logger.debug("cache purge: %d expired entries", len(keys))
        return len(keys)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)

    def stats(self) -> CacheStats:
        with self._lock:
            self._stats.size = len(self._data)
            return copy.copy(self._stats)
