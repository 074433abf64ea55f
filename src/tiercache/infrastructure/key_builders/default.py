"""Default key builder implementation."""

from tiercache.core.entities.cache_key import CacheKey
from tiercache.core.entities.group_registry import GroupRegistry
from tiercache.core.exceptions import InvalidKeyError

SEPARATOR = ":"


class DefaultKeyBuilder:
    """Key builder producing ``{tenant}:{group}:{key}`` keys.

    The tenant segment is omitted for global groups and in single-tenant
    mode. Group names and tenant ids may not contain the separator, which
    keeps the format unambiguous: everything after the group's separator
    belongs to the key.
    """

    def build(
        self,
        key: str | int,
        group: str,
        tenant_id: str,
        registry: GroupRegistry,
    ) -> CacheKey:
        """Build the cache key for (key, group) under a tenant.

        Args:
            key: The caller's key within the group.
            group: The cache group.
            tenant_id: Current tenant id, empty when single-tenant.
            registry: Group registry deciding whether the group is global.

        Returns:
            The structured cache key.

        Raises:
            InvalidKeyError: If the group is empty or the group or tenant
                contains the separator.
        """
        if not group or SEPARATOR in group:
            raise InvalidKeyError(f"Invalid cache group: {group!r}")
        if SEPARATOR in tenant_id:
            raise InvalidKeyError(f"Invalid tenant id: {tenant_id!r}")

        namespace = ""
        if tenant_id and not registry.is_global(group):
            namespace = f"{tenant_id}{SEPARATOR}"

        return CacheKey(namespace=namespace, group=group, key=str(key))
