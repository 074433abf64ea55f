"""Infrastructure layer implementations for tiercache."""

from tiercache.infrastructure.backends import InMemoryRemoteClient, RedisRemoteClient
from tiercache.infrastructure.host import StaticHostContext
from tiercache.infrastructure.key_builders import DefaultKeyBuilder
from tiercache.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryRemoteClient",
    "RedisRemoteClient",
    "StaticHostContext",
    "DefaultKeyBuilder",
    "JsonSerializer",
]
