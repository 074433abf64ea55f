"""In-memory remote client implementation."""

import math
import time
from collections.abc import Callable, Sequence
from typing import Any

from cachetools import TLRUCache  # type: ignore[import-untyped]

from tiercache.core.entities.cache_entry import MISS, CacheEntry, Hit
from tiercache.core.exceptions import RemoteStoreError
from tiercache.core.interfaces.serializer import ISerializer
from tiercache.infrastructure.serializers.json import JsonSerializer

# Stored item: serialized payload and absolute expiry on the cache timer
_Item = tuple[bytes, float]


def _time_to_use(_key: str, item: _Item, _now: float) -> float:
    return item[1]


class InMemoryRemoteClient:
    """Remote store living in the current process.

    Stands in for a shared server in single-process deployments and
    tests. Values are stored serialized, so every read returns a fresh
    object just as a network store would. Uses cachetools TLRUCache for
    per-key expiry and LRU eviction once ``maxsize`` is reached.
    """

    def __init__(
        self,
        maxsize: int = 10000,
        key_prefix: str = "",
        serializer: ISerializer | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory remote client.

        Args:
            maxsize: Maximum number of keys held.
            key_prefix: Prefix prepended to every key.
            serializer: Value codec. Defaults to JsonSerializer.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._key_prefix = key_prefix
        self._serializer = serializer or JsonSerializer()
        self._timer = timer
        self._cache: TLRUCache[str, _Item] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    def get(self, key: str) -> CacheEntry:
        item = self._cache.get(self._prefixed_key(key))
        if item is None:
            return MISS
        return Hit(self._serializer.deserialize(item[0]))

    def set(self, key: str, value: Any, ttl: int = 0) -> None:
        """Store a value.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Expiration in seconds; 0 means no expiration.
        """
        expires = self._timer() + ttl if ttl else math.inf
        self._cache[self._prefixed_key(key)] = (self._serializer.serialize(value), expires)

    def delete(self, key: str) -> bool:
        """Delete a key.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        return self._cache.pop(self._prefixed_key(key), None) is not None

    def exists(self, key: str) -> bool:
        return self._prefixed_key(key) in self._cache

    def incr_by(self, key: str, offset: int) -> int:
        """Add ``offset`` to an integer value, keeping its expiry.

        Raises:
            RemoteStoreError: If the stored value is not an integer.
        """
        prefixed_key = self._prefixed_key(key)
        item = self._cache.get(prefixed_key)

        if item is None:
            current, expires = 0, math.inf
        else:
            current = self._serializer.deserialize(item[0])
            expires = item[1]
            if not isinstance(current, int) or isinstance(current, bool):
                raise RemoteStoreError(f"Value at {key!r} is not an integer")

        value = current + offset
        self._cache[prefixed_key] = (self._serializer.serialize(value), expires)
        return value

    def mget(self, keys: Sequence[str]) -> list[CacheEntry]:
        return [self.get(key) for key in keys]

    def flush_all(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        """Nothing to release."""

    def _prefixed_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    def __len__(self) -> int:
        """Return the number of keys held."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum number of keys."""
        return self._maxsize
