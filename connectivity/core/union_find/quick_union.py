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


class QuickUnion(QuickUnionFamily):
    """
    Quick Union: id[x] is the parent of x, roots point at themselves.

    union is a single pointer write once both roots are known, but nothing
    bounds the height of the trees, so a chain of unions can make find O(N).
    """

    name = "Quick Union"
    abbreviation = "QU"

    def union(self, p: int, q: int) -> bool:
        self._check(p, q)
        i, j = self._roots(p, q)
        if i == j:
            return False

        self.id[i] = j
        self.counter.union_cnt += 1
        self.links += 1
        return True
