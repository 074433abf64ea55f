"""Remote client interface."""

from collections.abc import Sequence
from typing import Any, Protocol

from tiercache.core.entities.cache_entry import CacheEntry


class IRemoteClient(Protocol):
    """Contract for the persistent key-value store behind the local cache.

    Implementations own the wire protocol, connection handling and value
    codec. Keys arrive fully qualified. Absence is reported as ``MISS``,
    never as a falsy value, so stored ``False``/``None`` survive a round
    trip. Failures are raised as ``RemoteStoreError``.
    """

    def get(self, key: str) -> CacheEntry:
        """Fetch a value.

        Args:
            key: The fully-qualified key.

        Returns:
            ``Hit(value)`` if the key exists, ``MISS`` otherwise.
        """
        ...

    def set(self, key: str, value: Any, ttl: int = 0) -> None:
        """Store a value.

        Args:
            key: The fully-qualified key.
            value: The value to store.
            ttl: Expiration in seconds; 0 means no expiration.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete a key.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    def exists(self, key: str) -> bool:
        """Check whether a key exists."""
        ...

    def incr_by(self, key: str, offset: int) -> int:
        """Atomically add ``offset`` to an integer value.

        A missing key counts as 0.

        Returns:
            The value after the increment.
        """
        ...

    def mget(self, keys: Sequence[str]) -> list[CacheEntry]:
        """Fetch many keys in one round trip.

        Returns:
            One entry per requested key, in request order.
        """
        ...

    def flush_all(self) -> None:
        """Remove every key visible to this client."""
        ...

    def close(self) -> None:
        """Release the underlying connection."""
        ...
