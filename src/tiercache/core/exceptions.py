"""Exception hierarchy for tiercache."""


class CacheError(Exception):
    """Base class for all tiercache errors."""

    pass


class RemoteStoreError(CacheError):
    """Raised when the remote store rejects or fails an operation.

    Write failures are surfaced through this error instead of being
    reported as success, so callers can tell a lost write apart from
    a stored one.
    """

    pass


class SerializationError(CacheError):
    """Raised when serialization or deserialization fails."""

    pass


class InvalidKeyError(CacheError, ValueError):
    """Raised when a group name or tenant id cannot form a valid key."""

    pass


class CacheNotConfiguredError(CacheError, RuntimeError):
    """Raised when the module-level API is used before cache_init()."""

    pass
