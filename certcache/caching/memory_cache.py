"""
In-process certificate cache.

Uses OrderedDict for O(1) access and, when bounded, LRU eviction.
Typically the shallowest layer of a LayeredCache.
"""

import logging
from collections import OrderedDict
from typing import OrderedDict as OrderedDictType

from ..exceptions import CacheMiss
from ..interfaces.cache import ICache, CacheStats

logger = logging.getLogger(__name__)


class MemoryCache(ICache):
    """
    Memory cache implementation using OrderedDict.

    Features:
    - O(1) get/put/delete operations
    - Optional LRU eviction when max size reached (0 = unbounded)
    - Stores its own copy of the bytes, so callers can't mutate entries
    - Safe for tasks on one event loop (no awaits inside operations)
    """

    def __init__(self, max_size: int = 0):
        """
        Initialize memory cache.

        Args:
            max_size: Maximum number of entries, 0 for no limit
        """
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")

        self._cache: OrderedDictType[str, bytes] = OrderedDict()
        self._max_size = max_size

        # Statistics tracking
        self._stats = CacheStats()

    async def get(self, key: str) -> bytes:
        """
        Retrieve certificate data with LRU tracking.

        Args:
            key: Cache key

        Returns:
            Stored bytes

        Raises:
            CacheMiss: If the key is not stored
        """
        if key not in self._cache:
            self._stats.misses += 1
            raise CacheMiss(key)

        # Hit - move to end (most recently used)
        self._cache.move_to_end(key)
        self._stats.hits += 1
        return self._cache[key]

    async def put(self, key: str, data: bytes) -> None:
        """
        Store certificate data, evicting the LRU entry if at capacity.

        Args:
            key: Cache key
            data: Bytes to store
        """
        if key in self._cache:
            self._cache.move_to_end(key)
        elif self._max_size and len(self._cache) >= self._max_size:
            self._evict_lru()

        self._cache[key] = bytes(data)
        self._stats.size = len(self._cache)

    async def delete(self, key: str) -> None:
        """Remove key if present; absent keys are ignored."""
        self._cache.pop(key, None)
        self._stats.size = len(self._cache)

    def clear(self) -> None:
        """Clear all entries from cache."""
        self._cache.clear()
        self._stats = CacheStats()

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, evictions, size, and hit_rate
        """
        self._stats.size = len(self._cache)
        return self._stats

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def _evict_lru(self) -> None:
        """Evict the least recently used item (first item in OrderedDict)."""
        if self._cache:
            key, _ = self._cache.popitem(last=False)
            self._stats.evictions += 1
            logger.debug(f"Evicted {key} from memory cache")
