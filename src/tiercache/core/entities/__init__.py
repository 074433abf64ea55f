"""Domain entities for tiercache."""

from tiercache.core.entities.cache_config import CacheConfig, ttl_to_seconds
from tiercache.core.entities.cache_entry import (
    MISS,
    CacheEntry,
    CacheResult,
    Hit,
    Miss,
)
from tiercache.core.entities.cache_key import CacheKey
from tiercache.core.entities.group_registry import (
    DEFAULT_GLOBAL_GROUPS,
    DEFAULT_NON_PERSISTENT_GROUPS,
    GroupPolicy,
    GroupRegistry,
)

__all__ = [
    "CacheConfig",
    "ttl_to_seconds",
    "CacheEntry",
    "CacheResult",
    "Hit",
    "Miss",
    "MISS",
    "CacheKey",
    "GroupPolicy",
    "GroupRegistry",
    "DEFAULT_GLOBAL_GROUPS",
    "DEFAULT_NON_PERSISTENT_GROUPS",
]
