"""SQLAlchemy-based database service for the certificate cache"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..interfaces.database import IConnectionManager
from ..models.cache_entry_orm import Base

logger = logging.getLogger(__name__)


class DatabaseService(IConnectionManager):
    """SQLAlchemy connection manager - owns the engine and hands out sessions"""

    def __init__(self, database_url: str = "sqlite:///./data/certcache.db"):
        # Public: Database URL
        self.database_url = database_url

        # Private: SQLAlchemy engine and session factory
        self.__engine: Optional[Engine] = None
        self.__SessionLocal: Optional[sessionmaker] = None

    def connect(self) -> None:
        """Create the engine and session factory"""
        if self.__engine is not None:
            return

        engine_args = {"echo": False}  # Set to True for SQL debug logging
        if self.database_url.startswith("sqlite"):
            # Sessions are opened from worker threads
            engine_args["connect_args"] = {"check_same_thread": False}
            if self._is_sqlite_memory():
                # One shared connection, otherwise every thread sees an empty database
                engine_args["poolclass"] = StaticPool
            else:
                self._ensure_db_directory()

        self.__engine = create_engine(self.database_url, **engine_args)

        self.__SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.__engine
        )
        logger.info(f"Connected to database: {self.__engine.url.render_as_string(hide_password=True)}")

    def disconnect(self) -> None:
        """Dispose of the engine"""
        if self.__engine:
            self.__engine.dispose()
            self.__engine = None
            self.__SessionLocal = None
            logger.info("Disconnected from database")

    def is_connected(self) -> bool:
        return self.__engine is not None

    def initialize_schema(self) -> None:
        """Create the cache table if it doesn't exist"""
        if not self.__engine:
            raise RuntimeError("Database not connected")

        Base.metadata.create_all(self.__engine)
        logger.info("Database schema initialized")

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Context manager for a transactional session.

        Yields:
            Session that commits on success and rolls back on error
        """
        if not self.__SessionLocal:
            raise RuntimeError("Database not connected")

        session = self.__SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def _is_sqlite_memory(self) -> bool:
        return make_url(self.database_url).database in (None, "", ":memory:")

    def _ensure_db_directory(self) -> None:
        """Ensure the SQLite database directory exists."""
        db_path = make_url(self.database_url).database
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
