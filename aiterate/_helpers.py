"""Internal helpers for aiterate.

The single deferred-value primitive (`resolve`) and the continuation helper
built on it. Not part of the public API but usable for custom steps."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import RejectedError
from ._types import Deferred


def is_deferred(value: object) -> bool:
    """True for anything that must be awaited before use."""
    return isinstance(value, LazyCoroResult) or inspect.isawaitable(value)


def _as_exception(payload: typing.Any) -> Exception:
    if isinstance(payload, Exception):
        return payload
    return RejectedError(payload)


async def resolve[T](value: Deferred[T]) -> Result[T, Exception]:
    """
    Settle a possibly-deferred value.

    Awaits until a plain value is reached, so nested awaitables flatten.
    A LazyCoroResult is run and unwrapped: Ok(v) continues with v, Error(e) fails.
    Exceptions raised while awaiting come back as Error, never raised.

    Usage:
        match await resolve(fetch_user(42)):
            case Ok(user): ...
            case Error(exc): ...
    """
    try:
        while is_deferred(value):
            if isinstance(value, LazyCoroResult):
                match await value():
                    case Ok(inner):
                        value = inner
                    case Error(e):
                        return Error(_as_exception(e))
            else:
                value = await typing.cast(Awaitable[typing.Any], value)
    except Exception as exc:
        return Error(exc)
    return Ok(typing.cast(T, value))


def chain[T, R](value: Deferred[T], after: Callable[[T], R]) -> Deferred[R]:
    """
    Apply `after` once `value` has settled.

    Plain values stay synchronous: `after(value)` is returned directly.
    Deferred values produce a LazyCoroResult, so a failure of `value` skips
    `after` and surfaces when the driving loop resolves the step result.
    """
    if not is_deferred(value):
        return after(typing.cast(T, value))

    async def run() -> Result[R, Exception]:
        match await resolve(value):
            case Ok(v):
                return Ok(after(v))
            case Error(e):
                return Error(e)

    return LazyCoroResult(run)


__all__ = (
    "chain",
    "is_deferred",
    "resolve",
)
