"""Tests for DefaultKeyBuilder."""

import pytest

from tiercache.core.entities import GroupRegistry
from tiercache.core.exceptions import InvalidKeyError
from tiercache.infrastructure.key_builders.default import DefaultKeyBuilder


class TestDefaultKeyBuilder:
    """Tests for DefaultKeyBuilder."""

    @pytest.fixture
    def key_builder(self) -> DefaultKeyBuilder:
        """Create a key builder for testing."""
        return DefaultKeyBuilder()

    @pytest.fixture
    def registry(self) -> GroupRegistry:
        """Create a registry with one global group."""
        return GroupRegistry(global_groups={"users"})

    def test_build_tenant_key(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry
    ) -> None:
        """Test building a tenant-scoped key."""
        key = key_builder.build("home", "posts", "4", registry)

        assert str(key) == "4:posts:home"

    def test_build_single_tenant_key(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry
    ) -> None:
        """Test that an empty tenant yields no namespace."""
        key = key_builder.build("home", "posts", "", registry)

        assert str(key) == "posts:home"

    def test_global_group_same_across_tenants(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry
    ) -> None:
        """Test that global keys do not depend on the tenant."""
        key1 = key_builder.build("42", "users", "1", registry)
        key2 = key_builder.build("42", "users", "2", registry)

        assert key1 == key2
        assert str(key1) == "users:42"

    def test_tenant_group_differs_across_tenants(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry
    ) -> None:
        """Test that tenant-scoped keys differ per tenant."""
        key1 = key_builder.build("42", "posts", "1", registry)
        key2 = key_builder.build("42", "posts", "2", registry)

        assert str(key1) != str(key2)

    def test_integer_key(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry
    ) -> None:
        """Test that integer keys are stringified."""
        assert str(key_builder.build(7, "posts", "", registry)) == "posts:7"

    def test_key_may_contain_separator(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry
    ) -> None:
        """Test that keys themselves are not restricted."""
        key = key_builder.build("a:b", "posts", "1", registry)

        assert key.key == "a:b"
        assert str(key) == "1:posts:a:b"

    def test_same_inputs_same_key(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry
    ) -> None:
        """Test that building is deterministic."""
        assert key_builder.build("k", "g", "1", registry) == key_builder.build(
            "k", "g", "1", registry
        )

    @pytest.mark.parametrize("group", ["", "a:b"])
    def test_invalid_group(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry, group: str
    ) -> None:
        """Test that ambiguous group names are rejected."""
        with pytest.raises(InvalidKeyError):
            key_builder.build("k", group, "1", registry)

    def test_invalid_tenant(
        self, key_builder: DefaultKeyBuilder, registry: GroupRegistry
    ) -> None:
        """Test that tenant ids containing the separator are rejected."""
        with pytest.raises(InvalidKeyError):
            key_builder.build("k", "posts", "1:2", registry)
