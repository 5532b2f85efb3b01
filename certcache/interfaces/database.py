"""
Database interfaces - separates connection management from cache storage.
"""

from abc import ABC, abstractmethod
from typing import ContextManager
from sqlalchemy.orm import Session


class IConnectionManager(ABC):
    """
    Interface for database connection management.

    Separates connection lifecycle from query execution,
    following Single Responsibility Principle.
    """

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close database connection."""
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        """
        Check if database is connected.

        Returns:
            True if connected, False otherwise
        """
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Create the cache tables if they don't exist."""
        pass

    @abstractmethod
    def session_scope(self) -> ContextManager[Session]:
        """
        Get a transactional database session.

        The session commits when the block exits normally and rolls back
        when it raises.

        Returns:
            Context manager yielding a SQLAlchemy Session
        """
        pass
