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


from abc import ABC, abstractmethod
from dataclasses import dataclass

from connectivity.core.exceptions import (
    PartitionCorruptedError,
    ValidationError,
    allocation_failed,
    element_out_of_range,
)


@dataclass
class OperationCounter:
    """Elementary array accesses attributed to find and to union logic."""

    find_cnt: int = 0
    union_cnt: int = 0

    @property
    def total_cnt(self) -> int:
        return self.find_cnt + self.union_cnt

    def reset(self) -> None:
        self.find_cnt = 0
        self.union_cnt = 0


class UnionFind(ABC):
    """
    A partition of the integers 0..n-1 answering connectivity queries.

    Subclasses differ only in how the `id` array is interpreted (component
    label or parent pointer) and in how much work union and find do. Every
    public operation range-checks its arguments before touching an array.
    """

    name: str = ""
    abbreviation: str = ""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValidationError(
                f"Number of elements must be non-negative, got {n}",
                "A universe holds the integers 0..N-1",
            )
        self.n = n
        self.counter = OperationCounter()
        self.links = 0
        try:
            self.id = list(range(n))
            self._allocate(n)
        except (MemoryError, OverflowError) as e:
            self.id = None
            raise allocation_failed(n, e) from e

    def _allocate(self, n: int) -> None:
        """Hook for variants needing arrays beyond `id`."""

    @abstractmethod
    def union(self, p: int, q: int) -> bool:
        """Merge the components of p and q. Returns False if already connected."""

    @abstractmethod
    def connected(self, p: int, q: int) -> bool:
        """True when p and q belong to the same component."""

    @abstractmethod
    def find(self, x: int) -> int:
        """Representative of x's component."""

    @abstractmethod
    def depth(self, x: int) -> int:
        """Parent hops from x to its representative, without charging the counter."""

    @property
    def component_count(self) -> int:
        return self.n - self.links

    def components(self) -> list[list[int]]:
        """Group every element by representative; groups in first-seen order."""
        self._check_alive()
        groups: dict[int, list[int]] = {}
        for x in range(self.n):
            groups.setdefault(self._representative(x), []).append(x)
        return list(groups.values())

    def snapshot(self) -> tuple[int, ...]:
        self._check_alive()
        return tuple(self.id)

    def release(self) -> None:
        """Drop the partition arrays; the instance is unusable afterwards."""
        self.id = None

    @property
    def released(self) -> bool:
        return self.id is None

    def _representative(self, x: int) -> int:
        return self._root(x, charge=False)

    def _check_alive(self) -> None:
        if self.id is None:
            raise ValidationError(
                f"{self.name} partition has been released",
                "Create a new instance to start another run",
            )

    def _check(self, *elements: int) -> None:
        self._check_alive()
        for x in elements:
            # negatives would silently wrap around on a Python list
            if not 0 <= x < self.n:
                raise element_out_of_range(x, self.n)

    def _walk(self, x: int) -> tuple[int, int]:
        """
        Follow parent pointers from x until id[x] == x, returning (root, hops).

        Unions only ever attach a root under another root, so the structure
        is a forest and any path has at most n - 1 hops. Exceeding n hops
        means the array was corrupted.
        """
        id_ = self.id
        start = x
        hops = 0
        while x != id_[x]:
            x = id_[x]
            hops += 1
            if hops > self.n:
                raise PartitionCorruptedError(
                    f"{self.name}: parent pointers form a cycle",
                    f"More than {self.n} hops while following element {start}",
                )
        return x, hops

    def _root(self, x: int, charge: bool = True) -> int:
        root, hops = self._walk(x)
        if charge:
            self.counter.find_cnt += hops
        return root

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n}, components={self.component_count})"


class QuickUnionFamily(UnionFind):
    """Shared root-finding for the parent-pointer variants."""

    def find(self, x: int) -> int:
        self._check(x)
        return self._root(x)

    def depth(self, x: int) -> int:
        self._check(x)
        return self._walk(x)[1]

    def connected(self, p: int, q: int) -> bool:
        self._check(p, q)
        i, j = self._roots(p, q)
        return i == j

    def _roots(self, p: int, q: int) -> tuple[int, int]:
        """Roots of p and q, charging every hop plus one for the comparison."""
        i = self._root(p)
        j = self._root(q)
        self.counter.find_cnt += 1
        return i, j
