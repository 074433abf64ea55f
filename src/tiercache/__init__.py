"""tiercache - two-tier object cache.

A request-scoped local cache in front of a shared remote key-value
store, with group-based routing, tenant namespacing, negative-result
caching and batched multi-key reads.

Example:
    from tiercache import (
        CacheManager,
        RedisRemoteClient,
        StaticHostContext,
    )

    cache = CacheManager(
        remote=RedisRemoteClient("redis://localhost:6379/0"),
        host=StaticHostContext(tenant_id="1", multi_tenant=True),
    )

    cache.set("home", {"title": "Welcome"}, group="posts", ttl=300)
    value, found = cache.get("home", group="posts")

    # Local-only groups never reach Redis
    cache.add_non_persistent_groups({"request-scratch"})

    # One MGET for everything not yet cached locally
    pages = cache.get_multi({"posts": ["home", "about"], "options": ["siteurl"]})

    cache.switch_tenant(2)
"""

from tiercache.core.entities import (
    DEFAULT_GLOBAL_GROUPS,
    DEFAULT_NON_PERSISTENT_GROUPS,
    MISS,
    CacheConfig,
    CacheEntry,
    CacheKey,
    CacheResult,
    GroupPolicy,
    GroupRegistry,
    Hit,
    Miss,
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
from tiercache.decorators import cached, invalidates
from tiercache.infrastructure import (
    DefaultKeyBuilder,
    InMemoryRemoteClient,
    JsonSerializer,
    RedisRemoteClient,
    StaticHostContext,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "CacheResult",
    "Hit",
    "Miss",
    "MISS",
    # Groups
    "GroupPolicy",
    "GroupRegistry",
    "DEFAULT_GLOBAL_GROUPS",
    "DEFAULT_NON_PERSISTENT_GROUPS",
    # Exceptions
    "CacheError",
    "CacheNotConfiguredError",
    "InvalidKeyError",
    "RemoteStoreError",
    "SerializationError",
    # Core interfaces
    "IHostContext",
    "IKeyBuilder",
    "IRemoteClient",
    "ISerializer",
    # Core services
    "CacheManager",
    "LocalCache",
    # Infrastructure implementations
    "InMemoryRemoteClient",
    "RedisRemoteClient",
    "StaticHostContext",
    "DefaultKeyBuilder",
    "JsonSerializer",
    # Decorators
    "cached",
    "invalidates",
]
