

from .compressed_weighted_quick_union import CompressedWeightedQuickUnion
from .interface import OperationCounter, UnionFind
from .quick_find import QuickFind
from .quick_union import QuickUnion
from .registry import ALGORITHMS, create, get_algorithm
from .weighted_quick_union import WeightedQuickUnion

__all__ = [
    "ALGORITHMS",
    "CompressedWeightedQuickUnion",
    "OperationCounter",
    "QuickFind",
    "QuickUnion",
    "UnionFind",
    "WeightedQuickUnion",
    "create",
    "get_algorithm",
]
