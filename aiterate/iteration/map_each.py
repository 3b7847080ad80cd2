from __future__ import annotations

import typing

from kungfu import LazyCoroResult, Result

from .._helpers import chain
from .._types import Deferred, Key, Visitor
from ..policy import IterationPolicy
from .iterate import iterate


def map_each[R](
    source: typing.Any,
    fn: Visitor[R],
    *,
    policy: IterationPolicy | None = None,
) -> LazyCoroResult[list[R], Exception]:
    """
    Collect fn(value, key, source) for every element into a list.

    Output position follows visitation order, not keys, so mappings and
    sparse sources still give a dense list. Each run starts a fresh list.
    """
    def step(accumulator: list[R], value: typing.Any, key: Key, src: typing.Any) -> Deferred[list[R]]:
        def place(result: R) -> list[R]:
            accumulator.append(result)
            return accumulator
        return chain(fn(value, key, src), place)

    async def run() -> Result[list[R], Exception]:
        output: list[R] = []
        return await iterate(source, step, initial=output, policy=policy)()

    return LazyCoroResult(run)


__all__ = ("map_each",)
