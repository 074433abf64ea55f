"""Cache configuration entity."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import timedelta

from tiercache.core.entities.group_registry import (
    DEFAULT_GLOBAL_GROUPS,
    DEFAULT_NON_PERSISTENT_GROUPS,
)


def ttl_to_seconds(ttl: int | float | timedelta | None) -> int:
    """Normalize a TTL to whole seconds, 0 meaning "no expiration".

    Fractions round up, so a positive sub-second TTL still expires
    instead of turning into "never".

    Raises:
        ValueError: If the TTL is negative.
    """
    if ttl is None:
        return 0
    seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else ttl
    if seconds < 0:
        raise ValueError(f"TTL must not be negative, got {ttl!r}")
    return math.ceil(seconds)


@dataclass
class CacheConfig:
    """Cache manager configuration.

    Attributes:
        default_ttl: TTL applied when a write passes ``ttl=None``.
            Seconds or a timedelta; 0 means no expiration.
        copy_values: Deep-copy mutable values going in and out of the
            local cache so callers never share an instance with it.
        global_groups: Groups that bypass tenant namespacing.
        non_persistent_groups: Groups that never reach the remote store.
        enabled_remote: When False every group is treated as
            non-persistent and the remote store is never contacted.
    """

    default_ttl: int | timedelta = 0
    copy_values: bool = True
    global_groups: Iterable[str] = field(
        default_factory=lambda: set(DEFAULT_GLOBAL_GROUPS)
    )
    non_persistent_groups: Iterable[str] = field(
        default_factory=lambda: set(DEFAULT_NON_PERSISTENT_GROUPS)
    )
    enabled_remote: bool = True

    def __post_init__(self) -> None:
        """Normalize the default TTL to seconds."""
        self.default_ttl = ttl_to_seconds(self.default_ttl)
        self.global_groups = frozenset(self.global_groups)
        self.non_persistent_groups = frozenset(self.non_persistent_groups)
