# speedometer/core/cache.py
"""
Single-slot memoization for the pure geometry functions.
A call hits the cache only when every argument is the very same object as in the
previous call; any new argument evicts the slot. Not thread-safe.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

_MISSING = object()


@dataclass
class CacheInfo:
    hits: int = 0
    misses: int = 0


def _same_args(
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    last_args: tuple[Any, ...],
    last_kwargs: dict[str, Any],
) -> bool:
    if len(args) != len(last_args) or kwargs.keys() != last_kwargs.keys():
        return False
    if any(a is not b for a, b in zip(args, last_args)):
        return False
    return all(kwargs[k] is last_kwargs[k] for k in kwargs)


def memoize_one(fn: F) -> F:
    """
    Wrap fn so that repeated calls with identical argument objects return the
    previously computed result object. Adds cache_clear() and cache_info().
    """
    last_args: tuple[Any, ...] = ()
    last_kwargs: dict[str, Any] = {}
    last_result: Any = _MISSING
    info = CacheInfo()

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        nonlocal last_args, last_kwargs, last_result
        if last_result is not _MISSING and _same_args(args, kwargs, last_args, last_kwargs):
            info.hits += 1
            return last_result
        info.misses += 1
        result = fn(*args, **kwargs)
        last_args, last_kwargs, last_result = args, dict(kwargs), result
        return result

    def cache_clear() -> None:
        nonlocal last_args, last_kwargs, last_result
        last_args, last_kwargs, last_result = (), {}, _MISSING
        info.hits = 0
        info.misses = 0

    def cache_info() -> CacheInfo:
        return CacheInfo(hits=info.hits, misses=info.misses)

    wrapper.cache_clear = cache_clear  # type: ignore[attr-defined]
    wrapper.cache_info = cache_info  # type: ignore[attr-defined]
    return cast(F, wrapper)
