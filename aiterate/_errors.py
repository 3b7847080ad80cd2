from __future__ import annotations

import typing


class MalformedSourceError(Exception):
    """Source collection could not be enumerated."""

    source_type: type

    def __init__(self, source_type: type, reason: str) -> None:
        self.source_type = source_type
        super().__init__(f"Cannot enumerate {source_type.__name__}: {reason}")


class RejectedError(Exception):
    """A LazyCoroResult resolved to Error with a non-exception payload."""

    payload: typing.Any

    def __init__(self, payload: typing.Any) -> None:
        self.payload = payload
        super().__init__(f"Deferred value rejected with {payload!r}")


__all__ = ("MalformedSourceError", "RejectedError")
