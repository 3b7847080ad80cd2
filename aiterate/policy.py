"""
Iteration policy
================

Scheduler-yield configuration for the driving loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass


# YieldStrategy = () -> awaitable that hands control back to the event loop
type YieldStrategy = Callable[[], Awaitable[None]]


def _next_iteration() -> YieldStrategy:
    """Give up the rest of the current event-loop iteration."""
    async def strategy() -> None:
        await asyncio.sleep(0)
    return strategy


def _timer(seconds: float) -> YieldStrategy:
    """Park on a timer so I/O and due callbacks run first."""
    async def strategy() -> None:
        await asyncio.sleep(seconds)
    return strategy


@dataclass(frozen=True, slots=True)
class IterationPolicy:
    """
    How the driving loop yields before every pull.

    The yield always happens; the policy only picks the primitive.
    """

    yield_to_scheduler: YieldStrategy

    @classmethod
    def default(cls) -> IterationPolicy:
        """One full event-loop turn per element. Ready tasks and due timers run in between."""
        return cls(yield_to_scheduler=_next_iteration())

    @classmethod
    def with_delay(cls, seconds: float) -> IterationPolicy:
        """Timer-based yield. Throttles long traversals."""
        if seconds < 0.0:
            raise ValueError("seconds must be >= 0")
        return cls(yield_to_scheduler=_timer(seconds))


__all__ = ("IterationPolicy", "YieldStrategy")
