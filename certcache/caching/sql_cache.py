"""
SQL certificate cache.

Durable ICache backend on top of SQLAlchemy, one row per key. Usually the
deepest layer of a LayeredCache. Blocking session work runs in a worker
thread so the event loop stays free.
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import BackendError, CacheMiss
from ..interfaces.cache import ICache
from ..interfaces.database import IConnectionManager
from ..models.cache_entry_orm import CacheEntryORM

logger = logging.getLogger(__name__)


class SQLCache(ICache):
    """
    SQLAlchemy-backed certificate cache.

    - get: primary key lookup, CacheMiss when no row exists
    - put: upsert via Session.merge
    - delete: removes the row if present
    Driver errors and use of a disconnected database raise BackendError.
    """

    backend_name = "sql"

    def __init__(self, database_service: IConnectionManager, create_schema: bool = True):
        """
        Initialize SQL cache.

        Args:
            database_service: Connection manager; connected here if it isn't yet
            create_schema: Create the cache table when missing
        """
        self.database = database_service
        if not self.database.is_connected():
            self.database.connect()
        if create_schema:
            self.database.initialize_schema()

    async def get(self, key: str) -> bytes:
        data = await asyncio.to_thread(self._get, key)
        if data is None:
            raise CacheMiss(key)
        return data

    async def put(self, key: str, data: bytes) -> None:
        await asyncio.to_thread(self._put, key, bytes(data))

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._delete, key)

    def _get(self, key: str) -> Optional[bytes]:
        try:
            with self.database.session_scope() as session:
                entry = session.get(CacheEntryORM, key)
                if entry is None:
                    return None
                return bytes(entry.data)
        except (SQLAlchemyError, RuntimeError) as e:
            logger.error(f"Error fetching {key} from database: {e}")
            raise BackendError("get", key, self.backend_name, e) from e

    def _put(self, key: str, data: bytes) -> None:
        try:
            with self.database.session_scope() as session:
                session.merge(CacheEntryORM(key=key, data=data))
        except (SQLAlchemyError, RuntimeError) as e:
            logger.error(f"Error storing {key} in database: {e}")
            raise BackendError("put", key, self.backend_name, e) from e

    def _delete(self, key: str) -> None:
        try:
            with self.database.session_scope() as session:
                session.query(CacheEntryORM).filter(CacheEntryORM.key == key).delete()
        except (SQLAlchemyError, RuntimeError) as e:
            logger.error(f"Error deleting {key} from database: {e}")
            raise BackendError("delete", key, self.backend_name, e) from e
