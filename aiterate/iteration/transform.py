from __future__ import annotations

import typing

from kungfu import LazyCoroResult, Result

from .._helpers import chain
from .._types import Deferred, Key, Mutator
from ..policy import IterationPolicy
from .iterate import iterate


def transform[A](
    source: typing.Any,
    fn: Mutator[A],
    initial: A | None = None,
    *,
    policy: IterationPolicy | None = None,
) -> LazyCoroResult[A, Exception]:
    """
    Mutate an accumulator in place: fn(accumulator, value, key, source).

    Whatever fn returns is awaited and ignored; the same accumulator object
    is passed to every step and returned. Without `initial`, each run
    starts from a fresh empty dict.
    """
    async def run() -> Result[A, Exception]:
        accumulator = initial if initial is not None else typing.cast(A, {})

        def step(acc: A, value: typing.Any, key: Key, src: typing.Any) -> Deferred[A]:
            return chain(fn(acc, value, key, src), lambda _: accumulator)

        return await iterate(source, step, initial=accumulator, policy=policy)()

    return LazyCoroResult(run)


__all__ = ("transform",)
