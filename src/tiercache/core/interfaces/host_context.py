"""Host application context interface."""

from typing import Protocol


class IHostContext(Protocol):
    """Queries the cache manager makes against the host application."""

    def is_cache_addition_suspended(self) -> bool:
        """Whether ``add`` is administratively disabled."""
        ...

    def current_tenant_id(self) -> str:
        """The tenant active when the manager is created."""
        ...

    def is_multi_tenant(self) -> bool:
        """Whether keys are namespaced per tenant at all."""
        ...
