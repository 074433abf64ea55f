"""Domain services for tiercache."""

from tiercache.core.services.cache_manager import CacheManager
from tiercache.core.services.local_cache import LocalCache

__all__ = [
    "CacheManager",
    "LocalCache",
]
