"""
In-memory LRU cache for IFSC lookup results.

Keys are canonical (normalized) codes. Values are Records, or None for a
confirmed not-found result, so repeated misses never reach the database.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any

from ifscfinder.core.config import get_settings
from ifscfinder.storage.models import Record

logger = logging.getLogger(__name__)


class _Missing:
    """Marker type for keys that were never cached."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class LRUCache:
    """Thread-safe bounded LRU map from canonical code to lookup result."""

    def __init__(self, max_size: int = 1024):
        """Initialize the cache.

        Args:
            max_size: Maximum number of codes to cache

        Raises:
            ValueError: If max_size is less than 1
        """
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._cache: OrderedDict[str, Record | None] = OrderedDict()
        self._max_size = max_size
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: str) -> Record | None | _Missing:
        """Get a cached result and mark it most recently used.

        Args:
            key: Canonical IFSC code

        Returns:
            The cached Record or None, or MISSING if never cached
        """
        with self._lock:
            if key not in self._cache:
                self._misses += 1
                return MISSING
            self._cache.move_to_end(key)
            self._hits += 1
            return self._cache[key]

    def set(self, key: str, value: Record | None) -> None:
        """Insert or overwrite a result, evicting the LRU entry when full.

        Args:
            key: Canonical IFSC code
            value: Record, or None for a confirmed not-found
        """
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            self._cache[key] = value
            if len(self._cache) > self._max_size:
                evicted, _ = self._cache.popitem(last=False)
                self._evictions += 1
                logger.debug("Evicted %s from lookup cache", evicted)

    def contains(self, key: str) -> bool:
        """Check if a code is cached, without touching recency."""
        with self._lock:
            return key in self._cache

    def keys(self) -> list[str]:
        """Cached codes, least recently used first."""
        with self._lock:
            return list(self._cache.keys())

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._cache.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._cache)

    def __len__(self) -> int:
        return self.size()

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with size, capacity, hit/miss/eviction counters and hit rate
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = self._hits / total if total > 0 else 0.0
            return {
                "size": len(self._cache),
                "max_size": self._max_size,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate": hit_rate,
            }


# Global cache instance
_global_cache: LRUCache | None = None


def get_cache(max_size: int | None = None) -> LRUCache:
    """Get or create the global lookup cache.

    Args:
        max_size: Capacity used only when the cache is first created;
            defaults to ``Settings.cache_size``

    Returns:
        The global LRUCache instance
    """
    global _global_cache
    if _global_cache is None:
        if max_size is None:
            max_size = get_settings().cache_size
        _global_cache = LRUCache(max_size)
    return _global_cache


def reset_cache() -> None:
    """Reset the global lookup cache."""
    global _global_cache
    _global_cache = None
