from .adapt import adapt
from .base import Pair, PairSource
from .keyed import KeyedSource
from .scalar import ScalarSource
from .sequence import AsyncIterableSource, SequenceSource

__all__ = (
    "adapt",
    "Pair",
    "PairSource",
    # Variants
    "AsyncIterableSource",
    "KeyedSource",
    "ScalarSource",
    "SequenceSource",
)
