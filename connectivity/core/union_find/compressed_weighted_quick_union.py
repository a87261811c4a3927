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


from .weighted_quick_union import WeightedQuickUnion


class CompressedWeightedQuickUnion(WeightedQuickUnion):
    """
    Weighted Quick Union with full path compression after every link.

    Once two trees are joined, the paths from p and from q are walked a
    second time and every node on them is pointed straight at the new root.
    """

    name = "Compressed Weighted Quick Union"
    abbreviation = "CWQU"

    def union(self, p: int, q: int) -> bool:
        self._check(p, q)
        i, j = self._roots(p, q)
        if i == j:
            return False

        t = self._link(i, j)
        self.links += 1
        self._compress(p, t)
        self._compress(q, t)
        return True

    def _compress(self, x: int, root: int) -> None:
        id_ = self.id
        counter = self.counter
        while x != id_[x]:
            parent = id_[x]
            id_[x] = root
            counter.union_cnt += 1
            x = parent
