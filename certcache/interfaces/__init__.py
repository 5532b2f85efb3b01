"""
Core interface abstractions following Dependency Inversion Principle.

These interfaces define contracts that concrete backends must follow,
so storage layers can be swapped and mocked freely.
"""

from .cache import ICache, CacheStats
from .database import IConnectionManager

__all__ = [
    "ICache",
    "CacheStats",
    "IConnectionManager",
]
