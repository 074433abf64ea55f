"""Tests for LocalCache."""

import pytest

from tiercache.core.entities import MISS, CacheKey, Hit
from tiercache.core.services import LocalCache

KEY = CacheKey(namespace="", group="default", key="k")


class TestLocalCache:
    """Tests for LocalCache."""

    @pytest.fixture
    def local(self) -> LocalCache:
        """Create a local cache for testing."""
        return LocalCache()

    def test_unknown_key(self, local: LocalCache) -> None:
        """Test that an unknown key has no entry."""
        assert local.lookup(KEY) is None
        assert KEY not in local

    def test_store_and_lookup(self, local: LocalCache) -> None:
        """Test storing a value."""
        local.store(KEY, "value")

        assert local.lookup(KEY) == Hit("value")
        assert local.has_value(KEY)

    def test_store_miss(self, local: LocalCache) -> None:
        """Test that a remembered miss is known but has no value."""
        local.store_miss(KEY)

        assert local.lookup(KEY) is MISS
        assert KEY in local
        assert not local.has_value(KEY)

    def test_lookup_copies_mutable_values(self, local: LocalCache) -> None:
        """Test that lookups hand out detached copies."""
        local.store(KEY, {"tags": ["a"]})

        entry = local.lookup(KEY)
        assert isinstance(entry, Hit)
        entry.value["tags"].append("b")

        assert local.lookup(KEY) == Hit({"tags": ["a"]})

    def test_immutable_values_not_copied(self, local: LocalCache) -> None:
        """Test that immutable values are returned as-is."""
        value = "x" * 100
        local.store(KEY, value)

        entry = local.lookup(KEY)
        assert isinstance(entry, Hit)
        assert entry.value is value

    def test_discard(self, local: LocalCache) -> None:
        """Test dropping an entry."""
        local.store(KEY, 1)

        assert local.discard(KEY) is True
        assert local.discard(KEY) is False
        assert len(local) == 0

    def test_clear(self, local: LocalCache) -> None:
        """Test clearing every entry."""
        local.store(KEY, 1)
        local.store_miss(CacheKey("", "default", "other"))

        local.clear()

        assert len(local) == 0
