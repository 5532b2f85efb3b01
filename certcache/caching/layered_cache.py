"""
Layered certificate cache.

Composes an ordered chain of ICache backends into a single ICache. Reads
fall back from the shallowest layer (index 0) to the deepest one; writes
and deletes visit every layer in the order chosen by the write policy.
"""

import logging
from typing import List, Sequence, Tuple, Union

from ..exceptions import CacheMiss, ConfigurationError
from ..interfaces.cache import ICache
from ..models.write_policy import WritePolicy

logger = logging.getLogger(__name__)


class LayeredCache(ICache):
    """
    Multi-layer certificate cache with miss-driven fallback.

    Read strategy:
    - Query layers shallow to deep, always, regardless of write policy
    - The first layer that answers without raising wins, even with empty bytes
    - Any failure in a layer (miss or backend error) moves on to the next one
    - Hits on deep layers are not copied back into shallower ones

    Write strategy (put and delete):
    - DEEP_FIRST: deepest layer first, so durable storage commits before
      ephemeral layers claim to hold the data
    - SHALLOW_FIRST: shallowest layer first
    - The first failure aborts the traversal and is raised unchanged

    The chain is fixed at construction. The cache keeps no other state and
    does no locking of its own; it is as safe for concurrent use as its
    layers are.
    """

    def __init__(
        self,
        layers: Sequence[ICache],
        write_policy: Union[WritePolicy, str] = WritePolicy.DEEP_FIRST,
    ):
        """
        Initialize layered cache.

        Args:
            layers: Backends ordered from shallowest to deepest
            write_policy: Traversal order for put and delete

        Raises:
            ConfigurationError: If no layers are given or the policy is unknown
        """
        self._layers: Tuple[ICache, ...] = tuple(layers)
        if not self._layers:
            raise ConfigurationError(
                "a layered cache needs at least one layer",
                config_key="layers",
            )
        self._write_policy = WritePolicy.parse(write_policy)

        logger.info(
            f"LayeredCache built with {len(self._layers)} layer(s), "
            f"write policy {self._write_policy.value}"
        )

    @property
    def layers(self) -> Tuple[ICache, ...]:
        """Layers ordered from shallowest to deepest."""
        return self._layers

    @property
    def write_policy(self) -> WritePolicy:
        return self._write_policy

    def __len__(self) -> int:
        return len(self._layers)

    def __repr__(self) -> str:
        names = ", ".join(type(layer).__name__ for layer in self._layers)
        return f"<LayeredCache(layers=[{names}], write_policy={self._write_policy.value})>"

    async def get(self, key: str) -> bytes:
        """
        Get certificate data from the first layer that has it.

        Args:
            key: Cache key

        Returns:
            Bytes from the shallowest layer that answered

        Raises:
            CacheMiss: If every layer failed or missed
        """
        for depth, layer in enumerate(self._layers):
            try:
                data = await layer.get(key)
            except CacheMiss:
                logger.debug(f"Layer {depth} missed {key}")
                continue
            except Exception as e:
                # Unreachable layers count as misses for reads
                logger.warning(f"Layer {depth} failed to get {key}, falling back: {e}")
                continue

            logger.debug(f"Layer {depth} hit for {key}")
            return data

        raise CacheMiss(key)

    async def put(self, key: str, data: bytes) -> None:
        """
        Store certificate data in every layer, in write policy order.

        Args:
            key: Cache key
            data: Bytes to store

        Raises:
            ConfigurationError: If the write policy is unknown (no layer written)
            Exception: The first layer failure, unchanged; later layers untouched
        """
        for depth, layer in self._write_order():
            try:
                await layer.put(key, data)
            except Exception as e:
                logger.error(f"Layer {depth} failed to put {key}, aborting write: {e}")
                raise
            logger.debug(f"Layer {depth} stored {key}")

    async def delete(self, key: str) -> None:
        """
        Delete certificate data from every layer, in write policy order.

        Args:
            key: Cache key to remove

        Raises:
            ConfigurationError: If the write policy is unknown (no layer touched)
            Exception: The first layer failure, unchanged; later layers untouched
        """
        for depth, layer in self._write_order():
            try:
                await layer.delete(key)
            except Exception as e:
                logger.error(f"Layer {depth} failed to delete {key}, aborting delete: {e}")
                raise
            logger.debug(f"Layer {depth} deleted {key}")

    def _write_order(self) -> List[Tuple[int, ICache]]:
        """Indexed layers in the order put and delete must visit them."""
        indexed = list(enumerate(self._layers))
        if self._write_policy is WritePolicy.DEEP_FIRST:
            return indexed[::-1]
        if self._write_policy is WritePolicy.SHALLOW_FIRST:
            return indexed
        raise ConfigurationError(
            f"unrecognized write policy: {self._write_policy!r}",
            config_key="write_policy",
            config_value=self._write_policy,
        )


def new_layered(
    *layers: ICache,
    write_policy: Union[WritePolicy, str] = WritePolicy.DEEP_FIRST,
) -> LayeredCache:
    """
    Build a layered cache from backends given shallowest first.

    Args:
        *layers: Backends ordered from shallowest to deepest
        write_policy: Traversal order for put and delete (default DEEP_FIRST)

    Returns:
        LayeredCache over the given layers
    """
    return LayeredCache(layers, write_policy=write_policy)
