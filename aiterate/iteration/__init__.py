from .for_each import for_each
from .iterate import iterate, iterateM
from .map_each import map_each
from .reduce import reduce
from .transform import transform

__all__ = (
    # LazyCoroResult
    "for_each",
    "iterate",
    "map_each",
    "reduce",
    "transform",
    # Generic
    "iterateM",
)
