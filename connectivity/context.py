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


from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

AlgorithmName = Literal["qf", "qu", "wqu", "cwqu"]


class GlobalConfig(BaseModel):
    algorithm: AlgorithmName = Field(
        default="cwqu",
        description="Union-find variant used by 'run' (qf, qu, wqu or cwqu)",
    )
    trace: bool = Field(
        default=False, description="Print every pair as it is linked or discarded"
    )
    out_of_range: Literal["fail", "skip"] = Field(
        default="fail",
        description="What to do with a pair naming an element outside [0, N)",
    )
    show_groups: bool = Field(
        default=True, description="Print the final Quick Find components"
    )
    output_format: Literal["text", "json"] = Field(
        default="text", description="Report format written to stdout"
    )
    verbose: bool = Field(default=False, description="Enable verbose logging output")
    silent: bool = Field(
        default=False, description="Do not output any log text to the console"
    )


@dataclass(frozen=True)
class GlobalContext:
    algorithm: AlgorithmName
    trace: bool
    out_of_range: Literal["fail", "skip"]
    show_groups: bool
    output_format: Literal["text", "json"]
    verbose: bool
    silent: bool

    @classmethod
    def from_global_config(cls, config: GlobalConfig):
        return GlobalContext(
            config.algorithm,
            config.trace,
            config.out_of_range,
            config.show_groups,
            config.output_format,
            config.verbose,
            config.silent,
        )


@dataclass(frozen=True)
class RunContext:
    source: str | Path | None = None
    size: int | None = None
