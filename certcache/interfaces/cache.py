"""
Cache interface - unified contract for all certificate storage backends.
"""

from abc import ABC, abstractmethod
from pydantic import BaseModel


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ICache(ABC):
    """
    Certificate cache interface following Strategy Pattern.

    All backends (memory, SQL, functional) and the layered cache implement
    this interface, making them interchangeable. Keys are opaque strings
    (domain names, account thumbprints) and values are opaque bytes.

    Operations are coroutines; cancelling the calling task cancels the
    backend call in flight.
    """

    @abstractmethod
    async def get(self, key: str) -> bytes:
        """
        Retrieve certificate data from the cache.

        Args:
            key: Cache key

        Returns:
            The stored bytes

        Raises:
            CacheMiss: The key is not stored
            BackendError: The backend could not be read
        """
        pass

    @abstractmethod
    async def put(self, key: str, data: bytes) -> None:
        """
        Store certificate data under the key, replacing any existing value.

        Backends may use any storage format as long as a later get
        returns the original bytes.

        Args:
            key: Cache key
            data: Bytes to store
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Remove certificate data from the cache.

        Deleting a key that is not stored succeeds.

        Args:
            key: Cache key to remove
        """
        pass
