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


from .interface import QuickUnionFamily


class WeightedQuickUnion(QuickUnionFamily):
    """
    Weighted Quick Union: parent pointers plus the size of every tree.

    The smaller tree is always attached under the root of the larger one,
    which keeps every tree at most floor(log2(N)) high. On equal sizes the
    p-side root goes under the q-side root.
    """

    name = "Weighted Quick Union"
    abbreviation = "WQU"

    def _allocate(self, n: int) -> None:
        self.sz = [1] * n

    def release(self) -> None:
        super().release()
        self.sz = None

    def sizes(self) -> tuple[int, ...]:
        self._check_alive()
        return tuple(self.sz)

    def union(self, p: int, q: int) -> bool:
        self._check(p, q)
        i, j = self._roots(p, q)
        if i == j:
            return False

        self._link(i, j)
        self.links += 1
        return True

    def _link(self, i: int, j: int) -> int:
        """Attach the smaller of roots i and j under the other; returns the new root."""
        id_, sz = self.id, self.sz
        # size comparison, pointer write, size write
        self.counter.union_cnt += 3
        if sz[i] > sz[j]:
            id_[j] = i
            sz[i] += sz[j]
            return i
        id_[i] = j
        sz[j] += sz[i]
        return j
