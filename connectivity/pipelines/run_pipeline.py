# -----------------------------------------------------------------------------
# connectivity - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of connectivity.
#
# connectivity is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------


import contextlib
from collections.abc import Iterable, Iterator, Sequence
from typing import Literal

from loguru import logger
from rich.markup import escape

from connectivity.core.data.run_report import PairOutcome, RunReport
from connectivity.core.exceptions import OutOfRangeElement, PartitionCorruptedError
from connectivity.core.logging.utils import time_block
from connectivity.core.union_find import ALGORITHMS, QuickFind, UnionFind
from connectivity.core.union_find.registry import get_algorithm

OutOfRangePolicy = Literal["fail", "skip"]


@contextlib.contextmanager
def allocate_partition(algorithm: str, n: int) -> Iterator[UnionFind]:
    """Allocate a variant for one run and release its arrays on every exit path."""
    uf = get_algorithm(algorithm)(n)
    logger.debug(f"Allocated {uf.name} partition for {n} elements")
    try:
        yield uf
    finally:
        uf.release()
        logger.debug(f"Released {uf.name} partition")


def _final_groups(uf: QuickFind) -> list[list[int]]:
    groups = uf.groups()
    if len(groups) != uf.component_count:
        raise PartitionCorruptedError(
            f"Quick Find produced {len(groups)} groups, expected {uf.component_count}",
            f"n={uf.n} links={uf.links}",
        )
    return groups


def run(
    algorithm: str,
    n: int,
    pairs: Iterable[tuple[int, int]],
    *,
    out_of_range: OutOfRangePolicy = "fail",
    keep_trace: bool = True,
) -> RunReport:
    """
    Feed every pair of the stream into a fresh variant and report the result.

    Each pair is fully processed before the next is pulled from `pairs`.
    With out_of_range="skip" a pair naming an element outside [0, n) is
    recorded as rejected and the run continues; otherwise the run aborts
    with OutOfRangeElement before the partition is touched.
    """
    pairs_cnt = 0
    rejected_cnt = 0
    outcomes: list[PairOutcome] = []

    with allocate_partition(algorithm, n) as uf, time_block(f"{uf.abbreviation} run") as timer:
        for p, q in pairs:
            pairs_cnt += 1
            try:
                linked = uf.union(p, q)
            except OutOfRangeElement as e:
                if out_of_range != "skip":
                    raise
                rejected_cnt += 1
                logger.warning(escape(f"Rejected pair {p} {q}: {e.message}"))
                if keep_trace:
                    outcomes.append(PairOutcome(p, q, "rejected"))
                continue

            if keep_trace:
                outcomes.append(PairOutcome(p, q, "linked" if linked else "discarded"))

        groups = _final_groups(uf) if isinstance(uf, QuickFind) else None
        counter = uf.counter
        links_cnt = uf.links

    logger.debug(
        "{abbr}: pairs={pairs} links={links} rejected={rejected} finds={finds} unions={unions}",
        abbr=uf.abbreviation,
        pairs=pairs_cnt,
        links=links_cnt,
        rejected=rejected_cnt,
        finds=counter.find_cnt,
        unions=counter.union_cnt,
    )

    return RunReport(
        algorithm=uf.name,
        abbreviation=uf.abbreviation,
        n=n,
        pairs_cnt=pairs_cnt,
        links_cnt=links_cnt,
        find_cnt=counter.find_cnt,
        union_cnt=counter.union_cnt,
        rejected_cnt=rejected_cnt,
        groups=groups,
        outcomes=outcomes,
        elapsed_ms=timer.elapsed_ms,
    )


def compare(
    n: int,
    pairs: Iterable[tuple[int, int]],
    algorithms: Sequence[str] | None = None,
    *,
    out_of_range: OutOfRangePolicy = "fail",
    keep_trace: bool = False,
) -> list[RunReport]:
    """Run several variants over the same pair stream."""
    pairs = list(pairs)
    algorithms = list(algorithms or ALGORITHMS)
    return [
        run(name, n, pairs, out_of_range=out_of_range, keep_trace=keep_trace)
        for name in algorithms
    ]
