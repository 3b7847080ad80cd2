from __future__ import annotations

import typing

from kungfu import LazyCoroResult

from .._types import Folder
from ..policy import IterationPolicy
from .iterate import iterate


def reduce[A](
    source: typing.Any,
    fn: Folder[A],
    initial: A,
    *,
    policy: IterationPolicy | None = None,
) -> LazyCoroResult[A, Exception]:
    """Fold: fn(accumulator, value, key, source) returns the next accumulator."""
    return iterate(source, fn, initial=initial, policy=policy)


__all__ = ("reduce",)
