"""
Cooperative async traversal over arbitrary collections.

Walks sequences, mappings and single values one element at a time,
handing control back to the event loop before every element.

Architecture:
- source.adapt() turns any value into a pull-based (key, value) pair source
- iterateM / iterate drive the pull loop (generic extract + wrap, LazyCoroResult sugar)
- for_each / map_each / reduce / transform are thin instantiations of the loop

Every operation returns a lazy LazyCoroResult[T, Exception]: awaiting it runs
the traversal and yields Ok(value) or Error(exception).
"""

# Core types
from ._types import LCR, Deferred, Folder, Key, Mutator, Step, Visitor

# Errors
from ._errors import MalformedSourceError, RejectedError

# Deferred-value primitives
from ._helpers import chain, is_deferred, resolve

# Configuration
from .policy import IterationPolicy, YieldStrategy

# Sequence adapter
from . import source
from .source import Pair, PairSource, adapt

# Driving loop and derived operations
from .iteration import (
    # LazyCoroResult
    for_each,
    iterate,
    map_each,
    reduce,
    transform,
    # Generic
    iterateM,
)

__all__ = (
    # Types
    "LCR",
    "Deferred",
    "Folder",
    "Key",
    "Mutator",
    "Step",
    "Visitor",
    # Errors
    "MalformedSourceError",
    "RejectedError",
    # Primitives
    "chain",
    "is_deferred",
    "resolve",
    # Configuration
    "IterationPolicy",
    "YieldStrategy",
    # Adapter
    "source",
    "Pair",
    "PairSource",
    "adapt",
    # Operations
    "for_each",
    "iterate",
    "map_each",
    "reduce",
    "transform",
    "iterateM",
)
