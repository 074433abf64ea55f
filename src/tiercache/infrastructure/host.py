"""Default host context implementation."""

from dataclasses import dataclass


@dataclass
class StaticHostContext:
    """Host context backed by plain attributes.

    Suitable for scripts and tests, or for hosts that push their state
    into the cache rather than exposing query hooks.
    """

    tenant_id: str = ""
    multi_tenant: bool = False
    addition_suspended: bool = False

    def is_cache_addition_suspended(self) -> bool:
        return self.addition_suspended

    def current_tenant_id(self) -> str:
        return self.tenant_id

    def is_multi_tenant(self) -> bool:
        return self.multi_tenant

    def suspend_addition(self, suspend: bool = True) -> bool:
        """Toggle suspension of cache additions.

        Returns:
            The previous setting.
        """
        previous = self.addition_suspended
        self.addition_suspended = suspend
        return previous
