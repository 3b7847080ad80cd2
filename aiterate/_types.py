"""
Core type definitions for aiterate.

Type aliases used across the adapter, the driving loop and the operations.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Hashable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Key = index for sequences, mapping key / attribute name for keyed sources,
# None for scalars
type Key = Hashable | None

# Deferred = value that may still need awaiting before use
type Deferred[T] = T | Awaitable[T]

# Step = one turn of the driving loop: (accumulator, value, key, source) -> next accumulator
type Step[A] = Callable[[A, typing.Any, Key, typing.Any], Deferred[A]]

# Visitor = forEach / map callback: (value, key, source) -> anything
type Visitor[R] = Callable[[typing.Any, Key, typing.Any], Deferred[R]]

# Folder = reduce callback, must return the next accumulator
type Folder[A] = Callable[[A, typing.Any, Key, typing.Any], Deferred[A]]

# Mutator = transform callback, mutates the accumulator in place
type Mutator[A] = Callable[[A, typing.Any, Key, typing.Any], Deferred[object]]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Key",
    "Deferred",
    "Step",
    "Visitor",
    "Folder",
    "Mutator",
    "LCR",
)
