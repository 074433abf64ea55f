"""Cache manager - two-tier object cache over a remote key-value store."""

import logging
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

from tiercache.core.entities.cache_config import CacheConfig, ttl_to_seconds
from tiercache.core.entities.cache_entry import CacheResult, Hit
from tiercache.core.entities.cache_key import CacheKey
from tiercache.core.entities.group_registry import GroupRegistry
from tiercache.core.exceptions import InvalidKeyError
from tiercache.core.interfaces.host_context import IHostContext
from tiercache.core.interfaces.key_builder import IKeyBuilder
from tiercache.core.interfaces.remote_client import IRemoteClient
from tiercache.core.services.local_cache import LocalCache
from tiercache.infrastructure.host import StaticHostContext
from tiercache.infrastructure.key_builders.default import DefaultKeyBuilder

logger = logging.getLogger(__name__)

Key = str | int
TTL = int | timedelta | None


class CacheManager:
    """Request-scoped object cache backed by a shared remote store.

    Every operation first asks the group registry how a group is routed.
    Non-persistent groups live only in the local cache. Persistent groups
    read through the local cache and fall back to the remote client,
    remembering negative results as ``MISS`` so a repeated miss costs no
    second round trip.

    One instance serves one sequential flow of control; there is no
    locking. Cross-process consistency, including atomic increments, is
    left to the remote store.
    """

    def __init__(
        self,
        remote: IRemoteClient,
        key_builder: IKeyBuilder | None = None,
        host: IHostContext | None = None,
        registry: GroupRegistry | None = None,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the cache manager.

        Args:
            remote: The remote key-value store client.
            key_builder: Key builder. Defaults to DefaultKeyBuilder.
            host: Host application context. Defaults to a single-tenant
                StaticHostContext.
            registry: Group registry. Built from the config's group lists
                when not provided.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._remote = remote
        self._key_builder = key_builder or DefaultKeyBuilder()
        self._host = host or StaticHostContext()
        self._config = config or CacheConfig()
        self._registry = registry or GroupRegistry(
            global_groups=self._config.global_groups,
            non_persistent_groups=self._config.non_persistent_groups,
        )
        self._local = LocalCache(copy_values=self._config.copy_values)
        self._tenant_id = (
            str(self._host.current_tenant_id()) if self._host.is_multi_tenant() else ""
        )

        # Statistics
        self._hits = 0
        self._misses = 0
        self._remote_calls = 0

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def registry(self) -> GroupRegistry:
        return self._registry

    @property
    def tenant_id(self) -> str:
        """The tenant used for key namespacing, empty when single-tenant."""
        return self._tenant_id

    @property
    def local(self) -> LocalCache:
        return self._local

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, remote calls and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "remote_calls": self._remote_calls,
            "total": self._hits + self._misses,
        }

    def build_key(self, key: Key, group: str = "default") -> CacheKey:
        """Build the key for (key, group) under the current tenant."""
        return self._key_builder.build(key, group, self._tenant_id, self._registry)

    # Read path

    def get(self, key: Key, group: str = "default", force: bool = False) -> CacheResult:
        """Read a value.

        Args:
            key: The key within the group.
            group: The cache group.
            force: Skip the local cache and ask the remote store.

        Returns:
            ``CacheResult(value, found)``. A remembered miss is answered
            locally with ``found=False``.
        """
        cache_key = self.build_key(key, group)

        if not force:
            entry = self._local.lookup(cache_key)
            if entry is not None:
                return self._record(CacheResult.from_entry(entry))

        if not self._is_persistent(group):
            return self._record(CacheResult.not_found())

        self._remote_calls += 1
        entry = self._remote.get(str(cache_key))

        if isinstance(entry, Hit):
            self._local.store(cache_key, entry.value)
        else:
            self._local.store_miss(cache_key)

        return self._record(CacheResult.from_entry(entry))

    def get_multi(
        self,
        groups: Mapping[str, Iterable[Key]],
        default: Any = None,
    ) -> dict[str, dict[Key, Any]]:
        """Read many keys, fetching all remote misses in one round trip.

        Args:
            groups: Keys to read, by group.
            default: Value reported for keys that are absent.

        Returns:
            ``{group: {key: value}}`` with every requested key present,
            in request order.
        """
        results: dict[str, dict[Key, Any]] = {}
        # Several requested keys can map to one remote key (1 and "1")
        batch: dict[str, list[tuple[str, Key, CacheKey]]] = {}

        for group, keys in groups.items():
            found = results.setdefault(group, {})

            if not self._is_persistent(group):
                for key in keys:
                    value, hit = self.get(key, group)
                    found[key] = value if hit else default
                continue

            for key in keys:
                cache_key = self.build_key(key, group)
                entry = self._local.lookup(cache_key)
                if entry is None:
                    # Placeholder keeps request order in the output
                    found[key] = default
                    batch.setdefault(str(cache_key), []).append((group, key, cache_key))
                else:
                    result = self._record(CacheResult.from_entry(entry))
                    found[key] = result.value if result.found else default

        if not batch:
            return results

        remote_keys = list(batch)
        logger.debug("Fetching %d keys from remote store in one batch", len(remote_keys))
        self._remote_calls += 1
        entries = self._remote.mget(remote_keys)

        for remote_key, entry in zip(remote_keys, entries):
            for group, key, cache_key in batch[remote_key]:
                if isinstance(entry, Hit):
                    self._local.store(cache_key, entry.value)
                    results[group][key] = entry.value
                else:
                    self._local.store_miss(cache_key)
                self._record(CacheResult.from_entry(entry))

        return results

    # Write path

    def set(self, key: Key, value: Any, group: str = "default", ttl: TTL = None) -> bool:
        """Store a value locally and, for persistent groups, remotely.

        Args:
            key: The key within the group.
            value: The value to store.
            group: The cache group.
            ttl: Expiration in seconds or as a timedelta; 0 means none,
                None means the configured default.

        Returns:
            True once stored.

        Raises:
            RemoteStoreError: If the remote store rejects the write.
            SerializationError: If the value cannot be stored without loss.

            On any remote failure the local entry is discarded first.
        """
        ttl_seconds = self._resolve_ttl(ttl)
        return self._write(self.build_key(key, group), value, ttl_seconds)

    def add(self, key: Key, value: Any, group: str = "default", ttl: TTL = None) -> bool:
        """Store a value only if no live local entry exists.

        Returns:
            False without side effects when cache addition is suspended
            by the host or the key already holds a value locally.
        """
        if self._host.is_cache_addition_suspended():
            return False

        cache_key = self.build_key(key, group)
        if self._local.has_value(cache_key):
            return False

        return self._write(cache_key, value, self._resolve_ttl(ttl))

    def replace(self, key: Key, value: Any, group: str = "default", ttl: TTL = None) -> bool:
        """Store a value only if the key already exists.

        Existence is checked in the local cache for non-persistent groups
        and in the remote store for persistent ones, since a fresh local
        cache knows nothing about values other processes wrote.
        """
        ttl_seconds = self._resolve_ttl(ttl)
        cache_key = self.build_key(key, group)

        if not self._is_persistent(group):
            if not self._local.has_value(cache_key):
                return False
        else:
            self._remote_calls += 1
            if not self._remote.exists(str(cache_key)):
                return False

        return self._write(cache_key, value, ttl_seconds)

    def delete(self, key: Key, group: str = "default") -> bool:
        """Remove a key.

        Returns:
            True for non-persistent groups; for persistent groups, whether
            the remote store held the key.
        """
        cache_key = self.build_key(key, group)
        self._local.discard(cache_key)

        if not self._is_persistent(group):
            return True

        self._remote_calls += 1
        return self._remote.delete(str(cache_key))

    def incr(self, key: Key, offset: int = 1, group: str = "default") -> int:
        """Add ``offset`` to an integer value, treating absence as 0.

        Persistent groups increment atomically in the remote store and
        mirror the result locally. Non-persistent groups are counted in
        the local cache only.

        Raises:
            TypeError: If a local-only value is not an integer.
            RemoteStoreError: If the remote store cannot increment the value.
        """
        cache_key = self.build_key(key, group)

        if not self._is_persistent(group):
            entry = self._local.peek(cache_key)
            current = entry.value if isinstance(entry, Hit) else 0
            if not _is_integer(current):
                raise TypeError(
                    f"Cannot increment non-integer value of type {type(current).__name__}"
                )
            value = current + offset
        else:
            self._remote_calls += 1
            value = self._remote.incr_by(str(cache_key), offset)

        self._local.store(cache_key, value)
        return value

    def decr(self, key: Key, offset: int = 1, group: str = "default") -> int:
        """Subtract ``offset`` from an integer value. See incr()."""
        return self.incr(key, -offset, group)

    def flush(self) -> bool:
        """Clear the local cache and everything the remote client can see.

        This is not scoped to a tenant.
        """
        self._local.clear()
        if not self._config.enabled_remote:
            return True

        logger.warning("Flushing local cache and all keys in the remote store")
        self._remote_calls += 1
        self._remote.flush_all()
        return True

    def close(self) -> bool:
        """Close the remote client connection."""
        self._remote.close()
        return True

    # Tenants and groups

    def switch_tenant(self, tenant_id: str | int) -> None:
        """Namespace subsequent keys under another tenant.

        Local entries built under the previous tenant are kept; they are
        keyed by namespace and are never served to the new tenant.
        Ignored when the host is single-tenant.
        """
        if not self._host.is_multi_tenant():
            self._tenant_id = ""
            return

        tenant = str(tenant_id)
        if not tenant:
            raise InvalidKeyError("Tenant id must not be empty in multi-tenant mode")
        logger.debug("Switching cache tenant from %r to %r", self._tenant_id, tenant)
        self._tenant_id = tenant

    def add_global_groups(self, groups: Iterable[str]) -> None:
        self._registry.add_global_groups(groups)

    def add_non_persistent_groups(self, groups: Iterable[str]) -> None:
        self._registry.add_non_persistent_groups(groups)

    # Internals

    def _write(self, cache_key: CacheKey, value: Any, ttl_seconds: int) -> bool:
        self._local.store(cache_key, value)

        if not self._is_persistent(cache_key.group):
            return True

        self._remote_calls += 1
        try:
            self._remote.set(str(cache_key), value, ttl_seconds)
        except Exception:
            self._local.discard(cache_key)
            logger.warning("Remote write failed for %s; local entry discarded", cache_key)
            raise

        return True

    def _is_persistent(self, group: str) -> bool:
        return self._config.enabled_remote and self._registry.is_persistent(group)

    def _resolve_ttl(self, ttl: TTL) -> int:
        if ttl is None:
            return int(self._config.default_ttl)
        return ttl_to_seconds(ttl)

    def _record(self, result: CacheResult) -> CacheResult:
        if result.found:
            self._hits += 1
        else:
            self._misses += 1
        return result


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
