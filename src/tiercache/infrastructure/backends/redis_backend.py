"""Redis remote client implementation."""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import redis

from tiercache.core.entities.cache_entry import MISS, CacheEntry, Hit
from tiercache.core.exceptions import RemoteStoreError
from tiercache.core.interfaces.serializer import ISerializer
from tiercache.infrastructure.serializers.json import JsonSerializer

logger = logging.getLogger(__name__)


class RedisRemoteClient:
    """Redis remote client for multi-process and distributed deployments.

    Uses the synchronous redis-py client; every call is one blocking
    round trip. Redis errors are re-raised as RemoteStoreError.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        key_prefix: str = "wp:",
        serializer: ISerializer | None = None,
        client: redis.Redis | None = None,
        **connection_kwargs: Any,
    ) -> None:
        """Initialize the Redis remote client.

        Args:
            redis_url: Redis connection URL, including the logical database.
                Also accepts ``unix://`` socket URLs.
            key_prefix: Prefix prepended to every key.
            serializer: Value codec. Defaults to JsonSerializer.
            client: Existing Redis client to use instead of ``redis_url``.
            **connection_kwargs: Extra options for ``redis.Redis.from_url``
                such as ``socket_timeout``.
        """
        if client is None:
            client = redis.Redis.from_url(redis_url, **connection_kwargs)
        self._redis: redis.Redis = client
        self._key_prefix = key_prefix
        self._serializer = serializer or JsonSerializer()

    def get(self, key: str) -> CacheEntry:
        with self._translate_errors("GET", key):
            data = self._redis.get(self._prefixed_key(key))
        if data is None:
            return MISS
        return Hit(self._serializer.deserialize(data))

    def set(self, key: str, value: Any, ttl: int = 0) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Expiration in seconds; 0 means no expiration.
        """
        data = self._serializer.serialize(value)
        prefixed_key = self._prefixed_key(key)

        with self._translate_errors("SET", key):
            if ttl:
                self._redis.setex(prefixed_key, ttl, data)
            else:
                self._redis.set(prefixed_key, data)

    def delete(self, key: str) -> bool:
        """Delete cached value.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        with self._translate_errors("DEL", key):
            result = self._redis.delete(self._prefixed_key(key))
        return result > 0

    def exists(self, key: str) -> bool:
        with self._translate_errors("EXISTS", key):
            result = self._redis.exists(self._prefixed_key(key))
        return result > 0

    def incr_by(self, key: str, offset: int) -> int:
        """Atomically add ``offset`` using INCRBY."""
        with self._translate_errors("INCRBY", key):
            return int(self._redis.incrby(self._prefixed_key(key), offset))

    def mget(self, keys: Sequence[str]) -> list[CacheEntry]:
        """Fetch many keys with a single MGET."""
        if not keys:
            return []

        with self._translate_errors("MGET", f"{len(keys)} keys"):
            values = self._redis.mget([self._prefixed_key(key) for key in keys])

        return [
            MISS if data is None else Hit(self._serializer.deserialize(data))
            for data in values
        ]

    def flush_all(self) -> None:
        """Flush the selected logical database.

        Note: This clears every key in the database, not just keys with
        our prefix.
        """
        with self._translate_errors("FLUSHDB", "*"):
            self._redis.flushdb()

    def close(self) -> None:
        """Close the Redis connection."""
        self._redis.close()

    def _prefixed_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    @contextmanager
    def _translate_errors(self, command: str, key: str) -> Iterator[None]:
        try:
            yield
        except redis.RedisError as e:
            logger.warning("Redis %s failed for %s: %s", command, key, e)
            raise RemoteStoreError(f"Redis {command} failed for {key!r}: {e}") from e

    def __enter__(self) -> "RedisRemoteClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
