"""
Certificate cache implementations following Strategy Pattern.

All backends implement ICache, so they are interchangeable and can be
stacked inside a LayeredCache.
"""

from .layered_cache import LayeredCache, new_layered
from .functional_cache import FunctionalCache, logging_cache, log_cache_event
from .memory_cache import MemoryCache
from .sql_cache import SQLCache

__all__ = [
    "LayeredCache",
    "new_layered",
    "FunctionalCache",
    "logging_cache",
    "log_cache_event",
    "MemoryCache",
    "SQLCache",
]
