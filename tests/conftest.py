"""Pytest configuration for tiercache tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_cache_manager():
    """Restore the module-level cache manager after each test."""
    import tiercache.functions

    original_manager = tiercache.functions._cache_manager

    yield

    tiercache.functions._cache_manager = original_manager


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a clock starting at a fixed time."""
    return FakeClock()
