"""Group registry: routing and namespacing policy per cache group."""

from collections.abc import Iterable
from typing import NamedTuple

DEFAULT_GLOBAL_GROUPS = frozenset(
    {
        "blog-details",
        "blog-id-cache",
        "blog-lookup",
        "global-posts",
        "networks",
        "rss",
        "sites",
        "site-details",
        "site-lookup",
        "site-options",
        "site-transient",
        "users",
        "useremail",
        "userlogins",
        "usermeta",
        "user_meta",
        "userslugs",
    }
)

DEFAULT_NON_PERSISTENT_GROUPS = frozenset({"comment", "counts"})


class GroupPolicy(NamedTuple):
    """How a group is routed and namespaced."""

    persistent: bool
    is_global: bool


class GroupRegistry:
    """Process-wide group membership owned by one cache manager.

    Both sets only grow: registration is additive and idempotent, and
    lookups are plain membership checks so registration order does not
    matter.
    """

    def __init__(
        self,
        global_groups: Iterable[str] = (),
        non_persistent_groups: Iterable[str] = (),
    ) -> None:
        self._global_groups: set[str] = set(global_groups)
        self._non_persistent_groups: set[str] = set(non_persistent_groups)

    @classmethod
    def with_defaults(cls) -> "GroupRegistry":
        """Create a registry preloaded with the stock group lists."""
        return cls(DEFAULT_GLOBAL_GROUPS, DEFAULT_NON_PERSISTENT_GROUPS)

    def add_global_groups(self, groups: Iterable[str]) -> None:
        """Exempt groups from tenant namespacing."""
        self._global_groups.update(_as_groups(groups))

    def add_non_persistent_groups(self, groups: Iterable[str]) -> None:
        """Keep groups out of the remote store."""
        self._non_persistent_groups.update(_as_groups(groups))

    def is_global(self, group: str) -> bool:
        return group in self._global_groups

    def is_persistent(self, group: str) -> bool:
        return group not in self._non_persistent_groups

    def classify(self, group: str) -> GroupPolicy:
        """Return the routing policy for a group."""
        return GroupPolicy(
            persistent=self.is_persistent(group),
            is_global=self.is_global(group),
        )

    @property
    def global_groups(self) -> frozenset[str]:
        return frozenset(self._global_groups)

    @property
    def non_persistent_groups(self) -> frozenset[str]:
        return frozenset(self._non_persistent_groups)


def _as_groups(groups: Iterable[str]) -> Iterable[str]:
    # A bare string would otherwise register each character
    if isinstance(groups, str):
        return (groups,)
    return groups
