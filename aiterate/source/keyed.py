"""Keyed sources

Name-keyed pairs over mappings and attribute bags."""

from __future__ import annotations

import dataclasses
import functools
import typing
from collections.abc import Callable, Iterable, Iterator, Mapping

from kungfu import Error, Ok, Result

from .._types import Key
from .base import Pair, malformed, settle


class KeyedSource:
    """
    (key, value) pairs over a keyed collection.

    Keys are snapshotted on the first pull, so the key set is fixed at
    iteration start. Values are looked up lazily, one per pull.
    """

    __slots__ = ("_source", "_list_keys", "_lookup", "_keys")

    def __init__(
        self,
        source: object,
        *,
        keys: Callable[[], Iterable[Key]],
        lookup: Callable[[Key], typing.Any],
    ) -> None:
        self._source = source
        self._list_keys = keys
        self._lookup = lookup
        self._keys: Iterator[Key] | None = None

    @classmethod
    def of_mapping(cls, source: Mapping[typing.Any, typing.Any]) -> KeyedSource:
        """Keys in the mapping's iteration order (insertion order for dict)."""
        return cls(source, keys=source.keys, lookup=source.__getitem__)

    @classmethod
    def of_dataclass(cls, source: object) -> KeyedSource:
        """Field names in declaration order."""
        def field_names() -> list[str]:
            return [f.name for f in dataclasses.fields(typing.cast(typing.Any, source))]
        return cls(source, keys=field_names, lookup=functools.partial(getattr, source))

    @classmethod
    def of_attributes(cls, source: object) -> KeyedSource:
        """Instance attribute names (vars()) in assignment order."""
        return cls(source, keys=lambda: vars(source), lookup=functools.partial(getattr, source))

    async def pull(self) -> Result[Pair | None, Exception]:
        try:
            if self._keys is None:
                self._keys = iter(list(self._list_keys()))
            key = next(self._keys)
            value = self._lookup(key)
        except StopIteration:
            return Ok(None)
        except Exception as exc:
            return Error(malformed(self._source, exc))
        return await settle(key, value)

    async def aclose(self) -> None:
        return None


__all__ = ("KeyedSource",)
