"""Source adaptation

Capability probe that picks the pair source for an arbitrary value."""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import AsyncIterable, Iterable, Mapping

from .._helpers import is_deferred
from .base import PairSource
from .keyed import KeyedSource
from .scalar import ScalarSource
from .sequence import AsyncIterableSource, SequenceSource

# Objects with a __dict__ that are still single values
_OPAQUE = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)


def adapt(source: typing.Any) -> PairSource:
    """
    Pick the pair source for `source`. Probed once, in this order:

    - text (str, bytes, bytearray) -> single value
    - awaitable -> single value, resolved on pull
    - Mapping -> keyed by the mapping's keys
    - dataclass instance -> keyed by field name
    - async iterable -> indexed, one anext() per pull
    - iterable -> indexed via enumerate()
    - instance with a __dict__ (SimpleNamespace, plain objects) -> keyed by attribute name
    - anything else, None and classes/functions/modules included -> single value

    Capabilities are checked on the type, so a source's own __getattr__
    is never consulted except by the final __dict__ lookup.
    """
    if isinstance(source, (str, bytes, bytearray)):
        return ScalarSource(source)
    if is_deferred(source):
        return ScalarSource(source)
    if isinstance(source, Mapping):
        return KeyedSource.of_mapping(source)
    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        return KeyedSource.of_dataclass(source)
    if isinstance(source, AsyncIterable):
        return AsyncIterableSource(source)
    if isinstance(source, Iterable):
        return SequenceSource(source)
    if not isinstance(source, _OPAQUE) and isinstance(getattr(source, "__dict__", None), dict):
        return KeyedSource.of_attributes(source)
    return ScalarSource(source)


__all__ = ("adapt",)
