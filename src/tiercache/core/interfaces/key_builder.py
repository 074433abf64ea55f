"""Key builder interface."""

from typing import Protocol

from tiercache.core.entities.cache_key import CacheKey
from tiercache.core.entities.group_registry import GroupRegistry


class IKeyBuilder(Protocol):
    """Contract for deriving cache keys from (key, group, tenant).

    Builders must be pure: the same inputs always produce the same key,
    and distinct (tenant, group, key) triples never collide for
    tenant-scoped groups.
    """

    def build(
        self,
        key: str | int,
        group: str,
        tenant_id: str,
        registry: GroupRegistry,
    ) -> CacheKey:
        """Build the cache key.

        Args:
            key: The caller's key within the group.
            group: The cache group.
            tenant_id: Current tenant id, empty when single-tenant.
            registry: Group registry deciding whether the group is global.

        Returns:
            The structured key; ``str()`` gives the fully-qualified form.
        """
        ...
