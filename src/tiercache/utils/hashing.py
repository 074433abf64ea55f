"""Hashing utilities for deriving cache keys from function calls."""

import hashlib
import inspect
import json
from collections.abc import Callable
from typing import Any


def hash_value(value: Any) -> str:
    """Create a deterministic hash of a value.

    Args:
        value: Any value; non-JSON types are hashed by their ``str()``.

    Returns:
        A hexadecimal hash string (first 16 chars of SHA-256).
    """
    if value is None:
        return "none"

    # Sorted keys make equal mappings hash equally
    normalized = json.dumps(value, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def bind_arguments(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    """Map a call's positional and keyword arguments to parameter names.

    Defaults are applied, so ``f(1)`` and ``f(x=1)`` bind identically.
    Falls back to the raw keyword arguments when the signature cannot
    be inspected or does not accept the call.
    """
    try:
        bound = inspect.signature(func).bind(*args, **kwargs)
    except (TypeError, ValueError):
        return dict(kwargs)
    bound.apply_defaults()
    return dict(bound.arguments)


def call_key(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> str:
    """Build a stable cache key for one call of ``func``."""
    name = f"{func.__module__}.{func.__qualname__}"
    return f"{name}:{hash_value(bind_arguments(func, args, kwargs))}"
