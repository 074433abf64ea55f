"""Remote client implementations."""

from tiercache.infrastructure.backends.memory import InMemoryRemoteClient
from tiercache.infrastructure.backends.redis_backend import RedisRemoteClient

__all__ = [
    "InMemoryRemoteClient",
    "RedisRemoteClient",
]
