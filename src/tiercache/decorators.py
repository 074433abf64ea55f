"""Memoization decorators.

These decorators cache the results of plain synchronous functions
through the manager installed with ``tiercache.functions.cache_init``.
When no manager is installed the wrapped function simply runs.
"""

import functools
import re
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar

from tiercache.functions import get_cache_manager
from tiercache.utils.hashing import bind_arguments, call_key

F = TypeVar("F", bound=Callable[..., Any])

KeySpec = str | Callable[..., str] | None


def cached(
    group: str = "default",
    ttl: int | timedelta | None = None,
    key: KeySpec = None,
) -> Callable[[F], F]:
    """Decorator for caching function results.

    Args:
        group: Cache group to store results in.
        ttl: Time-to-live for cached results. Uses config default if None.
        key: Custom cache key or function to generate key.
            If string, supports {arg_name} interpolation.
            If callable, receives (*args, **kwargs) and returns key string.

    Returns:
        Decorated function.

    Example:
        @cached(group="users", ttl=600, key="user:{user_id}")
        def load_user(user_id: int) -> dict:
            return db.fetch_user(user_id)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            manager = get_cache_manager()
            if manager is None:
                return func(*args, **kwargs)

            cache_key = _build_cache_key(func, args, kwargs, key)
            value, found = manager.get(cache_key, group)
            if found:
                return value

            result = func(*args, **kwargs)
            manager.set(cache_key, result, group, ttl)
            return result

        return wrapper  # type: ignore

    return decorator


def invalidates(key: str | Callable[..., str], group: str = "default") -> Callable[[F], F]:
    """Decorator deleting a cache entry after the wrapped call succeeds.

    Args:
        key: Key to delete. Supports {arg_name} interpolation, or a
            callable receiving (*args, **kwargs).
        group: Cache group of the key.

    Example:
        @invalidates(group="users", key="user:{user_id}")
        def rename_user(user_id: int, name: str) -> None:
            db.rename_user(user_id, name)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)

            manager = get_cache_manager()
            if manager is not None:
                manager.delete(_build_cache_key(func, args, kwargs, key), group)

            return result

        return wrapper  # type: ignore

    return decorator


def _build_cache_key(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    custom_key: KeySpec,
) -> str:
    """Build cache key for a function call.

    Args:
        func: The function being cached.
        args: Positional arguments.
        kwargs: Keyword arguments.
        custom_key: Custom key or key builder function.

    Returns:
        The cache key string.
    """
    if custom_key is None:
        return call_key(func, args, kwargs)
    if callable(custom_key):
        return custom_key(*args, **kwargs)
    return _interpolate_string(custom_key, bind_arguments(func, args, kwargs))


def _interpolate_string(template: str, arguments: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders in string.

    Unknown placeholders are left as they are.
    """

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in arguments:
            return str(arguments[name])
        return match.group(0)

    return re.sub(r"\{(\w+)\}", replacer, template)
