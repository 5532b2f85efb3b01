from .database_service import DatabaseService
from .cache_factory import build_cache, build_layer

__all__ = [
    "DatabaseService",
    "build_cache",
    "build_layer",
]
