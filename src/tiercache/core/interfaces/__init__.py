"""Core interfaces (Protocol classes) for tiercache."""

from tiercache.core.interfaces.host_context import IHostContext
from tiercache.core.interfaces.key_builder import IKeyBuilder
from tiercache.core.interfaces.remote_client import IRemoteClient
from tiercache.core.interfaces.serializer import ISerializer

__all__ = [
    "IHostContext",
    "IKeyBuilder",
    "IRemoteClient",
    "ISerializer",
]
