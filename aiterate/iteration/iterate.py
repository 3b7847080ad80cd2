"""Driving loop

Cooperative, strictly sequential traversal with extract + wrap pattern."""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import resolve
from .._types import Step
from ..policy import IterationPolicy
from ..source import Pair, adapt
from ..source.base import malformed

logger = logging.getLogger(__name__)


def _failed[A](steps: int, error: Exception) -> Result[A, Exception]:
    logger.debug("iteration failed after %d steps: %s", steps, type(error).__name__)
    return Error(error)


# Generic combinator (extract + wrap pattern)
def iterateM[M, A](
    source: typing.Any,
    step: Step[A],
    *,
    initial: A,
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Result[A, Exception]]]], M],
    policy: IterationPolicy | None = None,
) -> M:
    """
    Generic driving loop.

    Yields to the event loop before every pull, then calls
    `step(accumulator, value, key, source)` and resolves what it returns
    into the next accumulator. Step N+1 never starts before step N settled.
    The first failure ends the run; the accumulator is only handed out on success.
    """
    active = policy if policy is not None else IterationPolicy.default()

    async def run() -> Result[A, Exception]:
        try:
            pairs = adapt(source)
        except Exception as exc:
            return _failed(0, malformed(source, exc))

        accumulator = initial
        steps = 0
        logger.debug("iteration started over %s", type(pairs).__name__)

        try:
            while True:
                await active.yield_to_scheduler()

                match await pairs.pull():
                    case Error(e):
                        return _failed(steps, e)
                    case Ok(None):
                        logger.debug("iteration finished after %d steps", steps)
                        return Ok(accumulator)
                    case Ok(Pair(key, value)):
                        pass

                try:
                    produced = step(accumulator, value, key, source)
                except Exception as exc:
                    return _failed(steps, exc)

                match await resolve(produced):
                    case Ok(next_accumulator):
                        accumulator = next_accumulator
                        steps += 1
                    case Error(e):
                        return _failed(steps, e)
        finally:
            await pairs.aclose()

    return wrap(run)


# Sugar for LazyCoroResult
def iterate[A](
    source: typing.Any,
    step: Step[A],
    *,
    initial: A,
    policy: IterationPolicy | None = None,
) -> LazyCoroResult[A, Exception]:
    """Lazy traversal: nothing runs until the result is awaited, and each await runs it anew."""
    return iterateM(source, step, initial=initial, wrap=LazyCoroResult, policy=policy)


__all__ = ("iterate", "iterateM")
