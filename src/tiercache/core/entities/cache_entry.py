"""Cache entry variants.

A Local Cache slot holds either ``Hit(value)`` or the ``MISS`` sentinel.
``MISS`` means the remote store confirmed the key absent at the last
check, which is different from having no slot at all ("unknown") and
from a stored falsy value such as ``False``, ``0`` or ``None``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple


@dataclass(frozen=True)
class Hit:
    """A cached value that is known to exist."""

    value: Any


class Miss(Enum):
    """Negative-result marker (single member)."""

    MISS = "MISS"

    def __repr__(self) -> str:
        return "MISS"


MISS = Miss.MISS

# Tagged variant stored in the local cache and returned by remote clients
CacheEntry = Hit | Miss


class CacheResult(NamedTuple):
    """Outcome of a single-key read.

    Unpacks as ``value, found``. ``value`` is None whenever ``found``
    is False.
    """

    value: Any
    found: bool

    @classmethod
    def from_entry(cls, entry: CacheEntry) -> "CacheResult":
        """Build a result from a cache entry."""
        if isinstance(entry, Hit):
            return cls(entry.value, True)
        return cls(None, False)

    @classmethod
    def not_found(cls) -> "CacheResult":
        """Result for an absent key."""
        return cls(None, False)
