"""Module-level cache API.

A thin functional facade over one process-wide CacheManager, for hosts
that call the cache from many places without passing an instance around.

Example:
    from tiercache import functions as cache

    cache.cache_init()  # Redis on localhost, single tenant
    cache.cache_set("answer", 42, group="options")
    value, found = cache.cache_get("answer", group="options")
"""

from collections.abc import Iterable, Mapping
from typing import Any

from tiercache.core.entities.cache_entry import CacheResult
from tiercache.core.exceptions import CacheNotConfiguredError
from tiercache.core.services.cache_manager import TTL, CacheManager, Key
from tiercache.infrastructure.backends.redis_backend import RedisRemoteClient

# Module-level cache manager reference
_cache_manager: CacheManager | None = None


def cache_init(manager: CacheManager | None = None) -> CacheManager:
    """Install the process-wide cache manager.

    Args:
        manager: The manager to install. When omitted, a manager backed
            by a RedisRemoteClient with default settings is created.

    Returns:
        The installed manager.
    """
    global _cache_manager
    _cache_manager = manager if manager is not None else CacheManager(RedisRemoteClient())
    return _cache_manager


def get_cache_manager() -> CacheManager | None:
    """Get the installed cache manager, or None before cache_init()."""
    return _cache_manager


def _require_manager() -> CacheManager:
    if _cache_manager is None:
        raise CacheNotConfiguredError("Cache not configured. Call cache_init() first.")
    return _cache_manager


def cache_add(key: Key, value: Any, group: str = "default", ttl: TTL = None) -> bool:
    return _require_manager().add(key, value, group, ttl)


def cache_set(key: Key, value: Any, group: str = "default", ttl: TTL = None) -> bool:
    return _require_manager().set(key, value, group, ttl)


def cache_replace(key: Key, value: Any, group: str = "default", ttl: TTL = None) -> bool:
    return _require_manager().replace(key, value, group, ttl)


def cache_get(key: Key, group: str = "default", force: bool = False) -> CacheResult:
    return _require_manager().get(key, group, force)


def cache_get_multi(
    groups: Mapping[str, Iterable[Key]],
    default: Any = None,
) -> dict[str, dict[Key, Any]]:
    return _require_manager().get_multi(groups, default)


def cache_delete(key: Key, group: str = "default") -> bool:
    return _require_manager().delete(key, group)


def cache_incr(key: Key, offset: int = 1, group: str = "default") -> int:
    return _require_manager().incr(key, offset, group)


def cache_decr(key: Key, offset: int = 1, group: str = "default") -> int:
    return _require_manager().decr(key, offset, group)


def cache_flush() -> bool:
    return _require_manager().flush()


def cache_close() -> bool:
    """Close the remote connection; a no-op before cache_init()."""
    if _cache_manager is None:
        return True
    return _cache_manager.close()


def cache_switch_to_tenant(tenant_id: str | int) -> None:
    _require_manager().switch_tenant(tenant_id)


def cache_add_global_groups(groups: Iterable[str]) -> None:
    _require_manager().add_global_groups(groups)


def cache_add_non_persistent_groups(groups: Iterable[str]) -> None:
    _require_manager().add_non_persistent_groups(groups)
