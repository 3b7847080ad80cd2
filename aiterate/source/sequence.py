"""Sequence sources

Index-keyed pairs over sync and async iterables."""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from kungfu import Error, Ok, Result

from .base import Pair, malformed, settle


class SequenceSource:
    """(index, item) pairs in the iterable's own order, via enumerate()."""

    __slots__ = ("_source", "_iterator", "_items")

    def __init__(self, source: Iterable[typing.Any]) -> None:
        self._source = source
        self._iterator: Iterator[typing.Any] | None = None
        self._items: Iterator[tuple[int, typing.Any]] | None = None

    async def pull(self) -> Result[Pair | None, Exception]:
        try:
            if self._items is None:
                self._iterator = iter(self._source)
                self._items = enumerate(self._iterator)
            index, item = next(self._items)
        except StopIteration:
            return Ok(None)
        except Exception as exc:
            return Error(malformed(self._source, exc))
        return await settle(index, item)

    async def aclose(self) -> None:
        """Close a generator left mid-iteration so its cleanup runs now."""
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()


class AsyncIterableSource:
    """(index, item) pairs drawn from an async iterator, one anext() per pull."""

    __slots__ = ("_source", "_items", "_index")

    def __init__(self, source: AsyncIterable[typing.Any]) -> None:
        self._source = source
        self._items: AsyncIterator[typing.Any] | None = None
        self._index = 0

    async def pull(self) -> Result[Pair | None, Exception]:
        try:
            if self._items is None:
                self._items = aiter(self._source)
            item = await anext(self._items)
        except StopAsyncIteration:
            return Ok(None)
        except Exception as exc:
            return Error(malformed(self._source, exc))
        index = self._index
        self._index += 1
        return await settle(index, item)

    async def aclose(self) -> None:
        """Run the async generator's cleanup instead of leaving it to GC."""
        aclose = getattr(self._items, "aclose", None)
        if aclose is not None:
            await aclose()


__all__ = ("AsyncIterableSource", "SequenceSource")
