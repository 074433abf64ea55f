"""Request-scoped local cache."""

import copy
from typing import Any

from tiercache.core.entities.cache_entry import MISS, CacheEntry, Hit
from tiercache.core.entities.cache_key import CacheKey

# Values of these types cannot be mutated through a shared reference
_IMMUTABLE_TYPES = (str, bytes, int, float, complex, bool, type(None), range)


class LocalCache:
    """In-process memo of the last known state of each key.

    Holds ``Hit(value)`` or ``MISS`` per ``CacheKey``. There is no TTL
    and no eviction; entries live until deleted, overwritten or cleared.
    Not safe for concurrent mutation.
    """

    def __init__(self, copy_values: bool = True) -> None:
        """Initialize the local cache.

        Args:
            copy_values: Deep-copy mutable values on store and lookup so
                callers never hold a reference into the cache.
        """
        self._copy_values = copy_values
        self._entries: dict[CacheKey, CacheEntry] = {}

    def lookup(self, cache_key: CacheKey) -> CacheEntry | None:
        """Return the entry for a key, or None when nothing is known.

        Hit values are detached copies when ``copy_values`` is set.
        """
        entry = self._entries.get(cache_key)
        if isinstance(entry, Hit):
            return Hit(self._detach(entry.value))
        return entry

    def peek(self, cache_key: CacheKey) -> CacheEntry | None:
        """Return the stored entry without copying its value."""
        return self._entries.get(cache_key)

    def has_value(self, cache_key: CacheKey) -> bool:
        """Whether a live (non-MISS) entry exists."""
        return isinstance(self._entries.get(cache_key), Hit)

    def store(self, cache_key: CacheKey, value: Any) -> None:
        self._entries[cache_key] = Hit(self._detach(value))

    def store_miss(self, cache_key: CacheKey) -> None:
        self._entries[cache_key] = MISS

    def discard(self, cache_key: CacheKey) -> bool:
        """Drop an entry. Returns True if one was present."""
        return self._entries.pop(cache_key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, cache_key: object) -> bool:
        return cache_key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _detach(self, value: Any) -> Any:
        if not self._copy_values or isinstance(value, _IMMUTABLE_TYPES):
            return value
        return copy.deepcopy(value)
