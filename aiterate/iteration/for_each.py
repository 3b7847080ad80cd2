from __future__ import annotations

import typing

from kungfu import LazyCoroResult

from .._helpers import chain
from .._types import Deferred, Key, Visitor
from ..policy import IterationPolicy
from .iterate import iterate


def _discard(_: object) -> None:
    return None


def for_each(
    source: typing.Any,
    fn: Visitor[object],
    *,
    policy: IterationPolicy | None = None,
) -> LazyCoroResult[None, Exception]:
    """
    Visit every element: fn(value, key, source).

    Awaitable results are awaited before the next element, then dropped.
    """
    def step(accumulator: None, value: typing.Any, key: Key, src: typing.Any) -> Deferred[None]:
        return chain(fn(value, key, src), _discard)

    return iterate(source, step, initial=None, policy=policy)


__all__ = ("for_each",)
