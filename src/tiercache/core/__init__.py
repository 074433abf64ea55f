"""Core domain layer for tiercache."""

from tiercache.core.entities import (
    MISS,
    CacheConfig,
    CacheEntry,
    CacheKey,
    CacheResult,
    GroupRegistry,
    Hit,
)
from tiercache.core.exceptions import (
    CacheError,
    CacheNotConfiguredError,
    InvalidKeyError,
    RemoteStoreError,
    SerializationError,
)
from tiercache.core.interfaces import (
    IHostContext,
    IKeyBuilder,
    IRemoteClient,
    ISerializer,
)
from tiercache.core.services import CacheManager, LocalCache

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "CacheResult",
    "GroupRegistry",
    "Hit",
    "MISS",
    # Exceptions
    "CacheError",
    "CacheNotConfiguredError",
    "InvalidKeyError",
    "RemoteStoreError",
    "SerializationError",
    # Interfaces
    "IHostContext",
    "IKeyBuilder",
    "IRemoteClient",
    "ISerializer",
    # Services
    "CacheManager",
    "LocalCache",
]
