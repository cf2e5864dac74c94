"""Bloom filter backed by a shared Redis bitmap."""

import logging
from typing import Any, Dict, Optional, Union

from redis_bloomfilter.config.settings import (
    DEFAULT_ERROR_RATE,
    DEFAULT_HASH_ENGINE,
    DEFAULT_KEY_NAME,
    FilterConfig,
)
from redis_bloomfilter.errors import InvalidArgument
from redis_bloomfilter.hashing.engines import (
    HashEngine,
    IndexSequence,
    indexes_for,
)
from redis_bloomfilter.store.bit_store import BitVectorStore

logger = logging.getLogger(__name__)


class RedisBloomFilter:
    """Probabilistic set whose bits live at ``key_name`` in Redis.

    Usage: ``RedisBloomFilter(1000, error_rate=0.01, store=redis_client)``
    sizes a filter for 1000 items with a 1% false-positive rate. Filters
    with the same key name share state, so they must also share capacity,
    error rate and hash engine.
    """

    def __init__(
        self,
        capacity: Optional[int],
        error_rate: Optional[float] = DEFAULT_ERROR_RATE,
        key_name: str = DEFAULT_KEY_NAME,
        hash_engine: Union[HashEngine, str] = DEFAULT_HASH_ENGINE,
        store: Any = None,
    ) -> None:
        self.config = FilterConfig.create(
            capacity,
            error_rate=error_rate,
            key_name=key_name,
            hash_engine=hash_engine,
        )
        if store is None:
            raise InvalidArgument("a store (Redis client) is required")
        self.store = (
            store if isinstance(store, BitVectorStore) else BitVectorStore(store)
        )
        logger.debug(
            "Bloom filter %r: n=%d p=%g m=%d k=%d engine=%s",
            self.key_name,
            self.config.capacity,
            self.config.error_rate,
            self.bit_count,
            self.hash_count,
            self.config.hash_engine.value,
        )

    @property
    def key_name(self) -> str:
        return self.config.key_name

    @property
    def bit_count(self) -> int:
        return self.config.bit_count

    @property
    def hash_count(self) -> int:
        return self.config.hash_count

    @property
    def options(self) -> Dict[str, Any]:
        return self.config.as_options()

    def indexes_for(
        self, element: Any, engine: Optional[Union[HashEngine, str]] = None
    ) -> IndexSequence:
        return indexes_for(
            element,
            self.hash_count,
            self.bit_count,
            engine if engine is not None else self.config.hash_engine,
        )

    def insert(self, element: Any) -> None:
        self.store.set_bits(self.key_name, self.indexes_for(element))

    def include(self, *elements: Any) -> bool:
        """True only if every element is possibly a member.

        The first index of each element is read on its own; most lookups are
        for non-members and stop there without a pipeline round trip.
        """
        for element in elements:
            indexes = iter(self.indexes_for(element))
            if self.store.get_bit(self.key_name, next(indexes)) == 0:
                return False
            rest = self.store.get_bits(self.key_name, indexes)
            if 0 in rest:
                return False
        return True

    def __contains__(self, element: Any) -> bool:
        return self.include(element)

    def clear(self) -> None:
        removed = self.store.delete_key(self.key_name)
        logger.debug(
            "Cleared bloom filter %r (%d key removed)", self.key_name, removed
        )

    def __repr__(self) -> str:
        return (
            f"RedisBloomFilter(key_name={self.key_name!r}, "
            f"capacity={self.config.capacity}, "
            f"error_rate={self.config.error_rate}, "
            f"bits={self.bit_count}, hashes={self.hash_count})"
        )
