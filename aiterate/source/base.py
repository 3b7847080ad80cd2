"""Pair sources

The uniform pull contract every source variant implements."""

from __future__ import annotations

import typing
from typing import NamedTuple, Protocol

from kungfu import Error, Ok, Result

from .._errors import MalformedSourceError
from .._helpers import resolve
from .._types import Key


class Pair(NamedTuple):
    """One element of a traversal. `key` is None for scalar sources."""

    key: Key
    value: typing.Any


class PairSource(Protocol):
    """
    Pull-based pair sequence over one source collection.

    `pull()` returns Ok(Pair) per element, then Ok(None) on every later call.
    Failures come back as Error and end the sequence for the caller.
    `aclose()` is called once the traversal is over, however it ended.
    """

    async def pull(self) -> Result[Pair | None, Exception]: ...

    async def aclose(self) -> None:
        """Release whatever the source holds open. Safe to call more than once."""
        ...


async def settle(key: typing.Any, value: typing.Any) -> Result[Pair | None, Exception]:
    """Resolve a deferred key and value into a Pair."""
    match await resolve(key):
        case Error(e):
            return Error(e)
        case Ok(k):
            pass

    match await resolve(value):
        case Ok(v):
            return Ok(Pair(k, v))
        case Error(e):
            return Error(e)


def malformed(source: object, exc: Exception) -> MalformedSourceError:
    """Wrap an enumeration failure, keeping the original as __cause__."""
    error = MalformedSourceError(type(source), f"{type(exc).__name__}: {exc}")
    error.__cause__ = exc
    return error


__all__ = ("Pair", "PairSource", "malformed", "settle")
