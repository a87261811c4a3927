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


from connectivity.core.exceptions import unknown_algorithm

from .compressed_weighted_quick_union import CompressedWeightedQuickUnion
from .interface import UnionFind
from .quick_find import QuickFind
from .quick_union import QuickUnion
from .weighted_quick_union import WeightedQuickUnion

# order is the order variants are run and reported in
ALGORITHMS: dict[str, type[UnionFind]] = {
    "qf": QuickFind,
    "qu": QuickUnion,
    "wqu": WeightedQuickUnion,
    "cwqu": CompressedWeightedQuickUnion,
}


def get_algorithm(name: str) -> type[UnionFind]:
    try:
        return ALGORITHMS[name.lower()]
    except KeyError:
        raise unknown_algorithm(name, ALGORITHMS) from None


def create(name: str, n: int) -> UnionFind:
    return get_algorithm(name)(n)
