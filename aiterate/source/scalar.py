from __future__ import annotations

import typing

from kungfu import Ok, Result

from .base import Pair, settle


class ScalarSource:
    """Exactly one unkeyed pair, then the end marker forever. None is a value too."""

    __slots__ = ("_value", "_done")

    def __init__(self, value: typing.Any) -> None:
        self._value = value
        self._done = False

    async def pull(self) -> Result[Pair | None, Exception]:
        if self._done:
            return Ok(None)
        self._done = True
        return await settle(None, self._value)

    async def aclose(self) -> None:
        return None


__all__ = ("ScalarSource",)
