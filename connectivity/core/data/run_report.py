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


from dataclasses import asdict, dataclass, field
from typing import Literal

PairStatus = Literal["linked", "discarded", "rejected"]


@dataclass(frozen=True)
class PairOutcome:
    p: int
    q: int
    status: PairStatus


@dataclass(frozen=True)
class RunReport:
    """Statistics and final state of one variant over one pair stream."""

    algorithm: str
    abbreviation: str
    n: int
    pairs_cnt: int
    links_cnt: int
    find_cnt: int
    union_cnt: int
    rejected_cnt: int = 0
    # only Quick Find reports its final grouping
    groups: list[list[int]] | None = None
    outcomes: list[PairOutcome] = field(default_factory=list)
    elapsed_ms: int = 0

    @property
    def total_cnt(self) -> int:
        return self.find_cnt + self.union_cnt

    @property
    def component_count(self) -> int:
        return self.n - self.links_cnt

    @property
    def discarded_cnt(self) -> int:
        return self.pairs_cnt - self.links_cnt - self.rejected_cnt

    def to_dict(self) -> dict:
        data = asdict(self)
        data["total_cnt"] = self.total_cnt
        data["component_count"] = self.component_count
        data["discarded_cnt"] = self.discarded_cnt
        return data
