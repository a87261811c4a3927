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


from .interface import UnionFind


class QuickFind(UnionFind):
    """
    Quick Find: id[x] is the label of x's component.

    connected is a single comparison; union relabels every element of p's
    component with q's label in a full sweep over the array.
    """

    name = "Quick Find"
    abbreviation = "QF"

    def connected(self, p: int, q: int) -> bool:
        self._check(p, q)
        self.counter.find_cnt += 1
        return self.id[p] == self.id[q]

    def find(self, x: int) -> int:
        self._check(x)
        self.counter.find_cnt += 1
        return self.id[x]

    def depth(self, x: int) -> int:
        self._check(x)
        return 0

    def union(self, p: int, q: int) -> bool:
        if self.connected(p, q):
            return False

        id_ = self.id
        t = id_[p]
        label = id_[q]
        counter = self.counter
        for i in range(self.n):
            counter.union_cnt += 1
            if id_[i] == t:
                id_[i] = label
                counter.union_cnt += 1

        self.links += 1
        return True

    def groups(self) -> list[list[int]]:
        """One-pass scan grouping elements by shared label."""
        return self.components()

    def _representative(self, x: int) -> int:
        return self.id[x]
