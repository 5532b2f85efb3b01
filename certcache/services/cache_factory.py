"""
Builds the certificate cache described by Settings.
"""

import logging
from typing import List, Optional

from ..caching.functional_cache import logging_cache
from ..caching.layered_cache import LayeredCache
from ..caching.memory_cache import MemoryCache
from ..caching.sql_cache import SQLCache
from ..config import Settings
from ..exceptions import ConfigurationError
from ..interfaces.cache import ICache
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

LAYER_NAMES = ("memory", "sql", "logger")


def build_layer(name: str, settings: Settings) -> ICache:
    """
    Create one cache layer by name.

    Args:
        name: Layer name (memory, sql, logger)
        settings: Configuration for the layer

    Returns:
        ICache backend

    Raises:
        ConfigurationError: If the name is unknown
    """
    if name == "memory":
        return MemoryCache(max_size=settings.memory_max_size)
    if name == "sql":
        return SQLCache(DatabaseService(settings.database_url))
    if name == "logger":
        return logging_cache()
    raise ConfigurationError(
        f"unknown cache layer {name!r}, expected one of {', '.join(LAYER_NAMES)}",
        config_key="layers",
        config_value=name,
    )


def build_cache(settings: Optional[Settings] = None) -> LayeredCache:
    """
    Build a layered cache from configuration.

    Args:
        settings: Settings to use (defaults to Settings loaded from the environment now)

    Returns:
        LayeredCache with layers ordered as configured

    Raises:
        ConfigurationError: If no layers are configured or a name is unknown
    """
    settings = settings or Settings()
    names = settings.layer_names
    if not names:
        raise ConfigurationError("no cache layers configured", config_key="layers")

    layers: List[ICache] = [build_layer(name, settings) for name in names]
    logger.info(f"Building certificate cache: {' -> '.join(names)}")
    return LayeredCache(layers, write_policy=settings.write_policy)
