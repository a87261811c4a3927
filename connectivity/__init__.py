"""connectivity: dynamic connectivity with Quick Find, Quick Union and their weighted variants."""

from connectivity.core.data.run_report import PairOutcome, RunReport
from connectivity.core.union_find import (
    CompressedWeightedQuickUnion,
    QuickFind,
    QuickUnion,
    UnionFind,
    WeightedQuickUnion,
)
from connectivity.pipelines.run_pipeline import compare, run

__all__ = [
    "CompressedWeightedQuickUnion",
    "PairOutcome",
    "QuickFind",
    "QuickUnion",
    "RunReport",
    "UnionFind",
    "WeightedQuickUnion",
    "compare",
    "run",
]
