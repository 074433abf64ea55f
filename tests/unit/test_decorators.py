"""Tests for memoization decorators."""

import pytest

from tiercache import CacheManager, InMemoryRemoteClient
from tiercache.decorators import cached, invalidates
from tiercache.functions import cache_init


@pytest.fixture
def manager() -> CacheManager:
    """Create and install a cache manager for testing."""
    return cache_init(CacheManager(remote=InMemoryRemoteClient()))


class TestCachedDecorator:
    """Tests for @cached decorator."""

    def test_cached_function(self, manager: CacheManager) -> None:
        """Test that @cached caches function results."""
        call_count = 0

        @cached()
        def get_data(id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id, "value": "data"}

        assert get_data(id="123") == {"id": "123", "value": "data"}
        assert get_data(id="123") == {"id": "123", "value": "data"}
        assert call_count == 1

    def test_positional_and_keyword_calls_share_entry(self, manager: CacheManager) -> None:
        """Test that argument binding normalizes the call."""
        call_count = 0

        @cached()
        def get_user(id: str, full: bool = False) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id}

        get_user("1")
        get_user(id="1")
        get_user("1", full=False)

        assert call_count == 1

    def test_cached_different_args(self, manager: CacheManager) -> None:
        """Test that different args create different cache entries."""
        call_count = 0

        @cached()
        def get_user(id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id}

        get_user(id="1")
        get_user(id="2")
        get_user(id="1")

        assert call_count == 2

    def test_cached_falsy_result(self, manager: CacheManager) -> None:
        """Test that falsy results are cached too."""
        call_count = 0

        @cached()
        def is_enabled() -> bool:
            nonlocal call_count
            call_count += 1
            return False

        assert is_enabled() is False
        assert is_enabled() is False
        assert call_count == 1

    def test_cached_with_key_template(self, manager: CacheManager) -> None:
        """Test @cached with an interpolated key."""

        @cached(group="users", key="user:{user_id}", ttl=60)
        def load_user(user_id: int) -> dict:
            return {"id": user_id}

        load_user(7)

        assert manager.get("user:7", group="users") == ({"id": 7}, True)

    def test_cached_with_key_function(self, manager: CacheManager) -> None:
        """Test @cached with a key builder function."""

        @cached(key=lambda slug: f"page:{slug}")
        def load_page(slug: str) -> str:
            return slug.upper()

        load_page("about")

        assert manager.get("page:about").value == "ABOUT"

    def test_cached_local_group(self, manager: CacheManager) -> None:
        """Test memoizing into a non-persistent group."""

        @cached(group="counts", key="total")
        def total() -> int:
            return 5

        total()

        assert manager.get("total", group="counts", force=True) == (None, False)
        assert manager.get("total", group="counts") == (5, True)

    def test_cached_without_configuration(self) -> None:
        """Test that an unconfigured cache runs the function directly."""
        import tiercache.functions

        tiercache.functions._cache_manager = None
        call_count = 0

        @cached()
        def compute() -> int:
            nonlocal call_count
            call_count += 1
            return 1

        compute()
        compute()

        assert call_count == 2


class TestInvalidatesDecorator:
    """Tests for @invalidates decorator."""

    def test_invalidates_entry(self, manager: CacheManager) -> None:
        """Test that the entry is deleted after the call."""

        @cached(group="users", key="user:{user_id}")
        def load_user(user_id: int) -> dict:
            return {"id": user_id, "name": "old"}

        @invalidates(group="users", key="user:{user_id}")
        def rename_user(user_id: int, name: str) -> None:
            pass

        load_user(3)
        rename_user(3, "new")

        assert manager.get("user:3", group="users").found is False

    def test_invalidates_not_run_on_error(self, manager: CacheManager) -> None:
        """Test that a failing call leaves the cache untouched."""
        manager.set("user:3", "cached", group="users")

        @invalidates(group="users", key="user:{user_id}")
        def rename_user(user_id: int) -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            rename_user(3)

        assert manager.get("user:3", group="users") == ("cached", True)
