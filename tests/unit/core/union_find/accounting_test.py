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


import math
import random

import pytest

from connectivity.core.union_find import (
    CompressedWeightedQuickUnion,
    OperationCounter,
    QuickFind,
    QuickUnion,
    WeightedQuickUnion,
)

# (0, 1) and (1, 2) link, (0, 2) is discarded
SMALL_PAIRS = [(0, 1), (1, 2), (0, 2)]


def run_pairs(cls, n, pairs):
    uf = cls(n)
    for p, q in pairs:
        uf.union(p, q)
    return uf


# -----------------------------------------------------------------------------
# Exact counts
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "cls, finds, unions, ids",
    [
        # one read per check; a full sweep plus one write per relabelled element
        (QuickFind, 3, 11, (2, 2, 2, 3)),
        # every hop, plus one for the root comparison; one write per link
        (QuickUnion, 5, 2, (1, 2, 2, 3)),
        # size read, pointer write, size write per link
        (WeightedQuickUnion, 5, 6, (1, 1, 1, 3)),
        # as above, plus one per pointer rewritten while compressing
        (CompressedWeightedQuickUnion, 5, 8, (1, 1, 1, 3)),
    ],
    ids=["QF", "QU", "WQU", "CWQU"],
)
def test_operation_counts(cls, finds, unions, ids):
    uf = run_pairs(cls, 4, SMALL_PAIRS)

    assert uf.links == 2
    assert uf.counter.find_cnt == finds
    assert uf.counter.union_cnt == unions
    assert uf.counter.total_cnt == finds + unions
    assert uf.snapshot() == ids


def test_quick_find_connected_charges_one_find():
    uf = QuickFind(5)
    uf.connected(0, 4)
    uf.connected(1, 2)
    assert uf.counter.find_cnt == 2
    assert uf.counter.union_cnt == 0


def test_quick_union_connected_charges_every_hop():
    uf = run_pairs(QuickUnion, 4, [(0, 1), (1, 2), (2, 3)])
    before = uf.counter.find_cnt

    # 0 -> 1 -> 2 -> 3 is three hops, 3 is already a root
    assert uf.connected(0, 3)
    assert uf.counter.find_cnt - before == 3 + 0 + 1


def test_depth_is_not_charged():
    uf = run_pairs(QuickUnion, 4, [(0, 1), (1, 2)])
    before = uf.counter.total_cnt
    assert uf.depth(0) == 2
    assert uf.counter.total_cnt == before


def test_counter_reset():
    counter = OperationCounter(find_cnt=4, union_cnt=6)
    assert counter.total_cnt == 10
    counter.reset()
    assert counter.total_cnt == 0


# -----------------------------------------------------------------------------
# Weighting and compression
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("cls", [WeightedQuickUnion, CompressedWeightedQuickUnion])
def test_equal_sizes_attach_p_root_under_q_root(cls):
    uf = cls(4)
    uf.union(0, 1)
    assert uf.id[0] == 1
    assert uf.sizes()[1] == 2

    uf.union(2, 3)
    uf.union(1, 3)
    # both trees have two elements: root 1 goes under root 3
    assert uf.id[1] == 3
    assert uf.sizes()[3] == 4


@pytest.mark.parametrize("cls", [WeightedQuickUnion, CompressedWeightedQuickUnion])
def test_smaller_tree_goes_under_larger(cls):
    uf = cls(5)
    uf.union(0, 1)
    uf.union(2, 1)
    # {0, 1, 2} rooted at 1 absorbs 4 even though 4 is the q side
    uf.union(1, 4)
    assert uf.find(4) == 1
    assert uf.sizes()[1] == 4


@pytest.mark.parametrize("cls", [WeightedQuickUnion, CompressedWeightedQuickUnion])
def test_sizes_of_roots_sum_to_n(cls):
    n = 32
    rng = random.Random(5)
    uf = cls(n)
    for _ in range(40):
        uf.union(rng.randrange(n), rng.randrange(n))
        roots = {uf.find(x) for x in range(n)}
        assert sum(uf.sizes()[r] for r in roots) == n


@pytest.mark.parametrize("cls", [WeightedQuickUnion, CompressedWeightedQuickUnion])
def test_weighted_height_is_logarithmic(cls):
    n = 64
    rng = random.Random(99)
    uf = cls(n)
    for _ in range(200):
        uf.union(rng.randrange(n), rng.randrange(n))
        assert max(uf.depth(x) for x in range(n)) <= math.floor(math.log2(n))


def test_compression_flattens_both_paths():
    uf = CompressedWeightedQuickUnion(8)
    # two trees of height two under weighting alone
    for p, q in [(0, 1), (2, 3), (1, 3), (4, 5), (6, 7), (5, 7)]:
        uf.union(p, q)

    uf.union(0, 4)
    root = uf.find(0)
    for x in (0, 1, 3, 4, 5, 7):
        assert uf.id[x] == root


def test_compression_never_deepens_any_element():
    n = 48
    rng = random.Random(1234)
    weighted = WeightedQuickUnion(n)
    compressed = CompressedWeightedQuickUnion(n)

    for _ in range(120):
        p, q = rng.randrange(n), rng.randrange(n)
        assert weighted.union(p, q) == compressed.union(p, q)
        for x in range(n):
            assert compressed.depth(x) <= weighted.depth(x)
            assert compressed.find(x) == weighted.find(x)


def test_elements_of_a_union_are_one_hop_from_root():
    n = 16
    rng = random.Random(8)
    uf = CompressedWeightedQuickUnion(n)
    for _ in range(30):
        p, q = rng.randrange(n), rng.randrange(n)
        if uf.union(p, q):
            assert uf.depth(p) <= 1
            assert uf.depth(q) <= 1


# -----------------------------------------------------------------------------
# Cost ordering on an adversarial input
# -----------------------------------------------------------------------------


def test_cost_ordering_on_chain_input():
    n = 64
    # joining everything onto element 0 builds a chain under Quick Union
    pairs = [(0, i) for i in range(1, n)]
    qf, qu, wqu, cwqu = (
        run_pairs(cls, n, pairs)
        for cls in (QuickFind, QuickUnion, WeightedQuickUnion, CompressedWeightedQuickUnion)
    )

    assert qf.counter.total_cnt > qu.counter.total_cnt > wqu.counter.total_cnt
    assert cwqu.counter.find_cnt <= wqu.counter.find_cnt
    assert qu.counter.find_cnt == n * (n - 1) // 2
    assert max(qu.depth(x) for x in range(n)) == n - 1
