"""Tests for the module-level cache API."""

import pytest

import tiercache.functions as cache
from tiercache import (
    CacheManager,
    CacheNotConfiguredError,
    InMemoryRemoteClient,
    RedisRemoteClient,
    StaticHostContext,
)


@pytest.fixture
def manager() -> CacheManager:
    """Install a multi-tenant cache manager."""
    host = StaticHostContext(tenant_id="1", multi_tenant=True)
    return cache.cache_init(CacheManager(remote=InMemoryRemoteClient(), host=host))


class TestCacheFunctions:
    """Tests for the cache_* functions."""

    def test_not_configured(self) -> None:
        """Test that calls before cache_init fail clearly."""
        cache._cache_manager = None

        with pytest.raises(CacheNotConfiguredError):
            cache.cache_get("k")

    def test_close_before_init(self) -> None:
        """Test that closing an unconfigured cache is harmless."""
        cache._cache_manager = None

        assert cache.cache_close() is True

    def test_default_init_uses_redis(self) -> None:
        """Test the default manager construction."""
        manager = cache.cache_init()

        assert isinstance(manager._remote, RedisRemoteClient)
        assert cache.get_cache_manager() is manager

    def test_round_trip(self, manager: CacheManager) -> None:
        """Test the basic operation set."""
        assert cache.cache_add("k", "v") is True
        assert cache.cache_add("k", "other") is False
        assert cache.cache_get("k") == ("v", True)
        assert cache.cache_replace("k", "w") is True
        assert cache.cache_get("k", force=True) == ("w", True)
        assert cache.cache_delete("k") is True
        assert cache.cache_get("k").found is False

    def test_counters(self, manager: CacheManager) -> None:
        """Test increment and decrement."""
        assert cache.cache_incr("n", 5) == 5
        assert cache.cache_decr("n", 2) == 3

    def test_get_multi(self, manager: CacheManager) -> None:
        """Test batched reads."""
        cache.cache_set("a", 1, group="posts")

        assert cache.cache_get_multi({"posts": ["a", "b"]}) == {
            "posts": {"a": 1, "b": None}
        }

    def test_tenants_and_groups(self, manager: CacheManager) -> None:
        """Test tenant switching and group registration."""
        cache.cache_add_global_groups(["shared"])
        cache.cache_add_non_persistent_groups(["scratch"])
        cache.cache_switch_to_tenant(9)

        assert manager.tenant_id == "9"
        assert manager.registry.is_global("shared")
        assert not manager.registry.is_persistent("scratch")

    def test_flush_and_close(self, manager: CacheManager) -> None:
        """Test flushing and closing."""
        cache.cache_set("k", "v")

        assert cache.cache_flush() is True
        assert cache.cache_get("k").found is False
        assert cache.cache_close() is True
