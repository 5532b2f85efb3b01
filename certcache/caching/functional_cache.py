"""
Function-backed certificate cache.

Lets callers define a cache layer from three coroutines. A get that always
raises CacheMiss turns the layer into a pass-through, which is handy for
test doubles or for reporting cache events (see logging_cache).
"""

import logging
from typing import Awaitable, Callable, Optional

from ..exceptions import CacheMiss
from ..interfaces.cache import ICache

logger = logging.getLogger(__name__)

GetFunc = Callable[[str], Awaitable[bytes]]
PutFunc = Callable[[str, bytes], Awaitable[None]]
DeleteFunc = Callable[[str], Awaitable[None]]
CacheObserver = Callable[[str, str], None]


class FunctionalCache(ICache):
    """ICache whose operations are caller-supplied coroutines."""

    def __init__(self, get: GetFunc, put: PutFunc, delete: DeleteFunc):
        self._get = get
        self._put = put
        self._delete = delete

    async def get(self, key: str) -> bytes:
        return await self._get(key)

    async def put(self, key: str, data: bytes) -> None:
        await self._put(key, data)

    async def delete(self, key: str) -> None:
        await self._delete(key)


def log_cache_event(operation: str, key: str) -> None:
    """Default observer: report cache events on the module logger."""
    logger.info(f"[certcache] {operation} key {key}")


def logging_cache(observer: Optional[CacheObserver] = None) -> FunctionalCache:
    """
    Build a layer that only reports events.

    Get reports the lookup and always misses, so a layered cache falls
    through to the next layer. Put and delete report and succeed.

    Args:
        observer: Called with (operation, key) for every event;
            defaults to log_cache_event

    Returns:
        FunctionalCache that stores nothing
    """
    notify = observer or log_cache_event

    async def get(key: str) -> bytes:
        notify("getting", key)
        raise CacheMiss(key)

    async def put(key: str, data: bytes) -> None:
        notify("putting", key)

    async def delete(key: str) -> None:
        notify("deleting", key)

    return FunctionalCache(get, put, delete)
