"""
certcache - pluggable, layered storage for ACME certificate material.

Stack backends (memory, SQL, functional) into a LayeredCache that reads
shallow to deep and writes in the order of its WritePolicy.
"""

from .exceptions import CacheError, CacheMiss, BackendError, ConfigurationError
from .interfaces import ICache, CacheStats
from .models import WritePolicy
from .caching import (
    LayeredCache,
    new_layered,
    FunctionalCache,
    logging_cache,
    MemoryCache,
    SQLCache,
)
from .services import DatabaseService, build_cache

__version__ = "1.0.0"

__all__ = [
    "CacheError",
    "CacheMiss",
    "BackendError",
    "ConfigurationError",
    "ICache",
    "CacheStats",
    "WritePolicy",
    "LayeredCache",
    "new_layered",
    "FunctionalCache",
    "logging_cache",
    "MemoryCache",
    "SQLCache",
    "DatabaseService",
    "build_cache",
]
