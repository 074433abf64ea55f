"""Cache key value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    Holds the three components of a key before they are joined into
    the fully-qualified remote key. The local cache is keyed by this
    object, so entries built under different tenants never collide.
    """

    namespace: str
    group: str
    key: str

    def __str__(self) -> str:
        """Return the fully-qualified key: ``{namespace}{group}:{key}``."""
        return f"{self.namespace}{self.group}:{self.key}"

    @property
    def is_namespaced(self) -> bool:
        """Whether the key carries a tenant namespace."""
        return bool(self.namespace)
