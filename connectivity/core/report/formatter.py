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


"""Text rendering of run reports. Nothing here affects the counts themselves."""

import json
from collections.abc import Sequence

from rich.table import Table

from connectivity.core.data.run_report import PairOutcome, RunReport

GROUP_SEPARATOR = "-"


def format_outcome(outcome: PairOutcome) -> str:
    if outcome.status == "linked":
        return f" {outcome.p} {outcome.q}"
    if outcome.status == "discarded":
        return f"\t{outcome.p} {outcome.q}"
    return f"!{outcome.p} {outcome.q}"


def format_trace(report: RunReport) -> list[str]:
    return [format_outcome(o) for o in report.outcomes]


def format_summary(report: RunReport) -> list[str]:
    lines = [
        f"{report.abbreviation}: The number of links performed is "
        f"{report.links_cnt} for {report.pairs_cnt} input pairs.",
        f"Total number of table rw operations: {report.total_cnt} "
        f"(find {report.find_cnt}, union {report.union_cnt})",
    ]
    if report.rejected_cnt:
        lines.append(f"Rejected out-of-range pairs: {report.rejected_cnt}")
    return lines


def format_groups(report: RunReport) -> list[str]:
    if report.groups is None:
        return []
    lines = [f"{report.component_count} components:"]
    lines.extend(GROUP_SEPARATOR.join(str(x) for x in group) for group in report.groups)
    return lines


def format_report(report: RunReport, trace: bool = False, show_groups: bool = True) -> str:
    lines = format_trace(report) if trace else []
    lines.extend(format_summary(report))
    if show_groups:
        lines.extend(format_groups(report))
    return "\n".join(lines)


def comparison_table(reports: Sequence[RunReport]) -> Table:
    table = Table(title="Connectivity comparison", show_lines=True)
    table.add_column("Algorithm", style="cyan")
    table.add_column("Pairs", justify="right")
    table.add_column("Links", justify="right", style="green")
    table.add_column("Components", justify="right")
    table.add_column("Find ops", justify="right")
    table.add_column("Union ops", justify="right")
    table.add_column("Total ops", justify="right", style="magenta")

    for r in reports:
        table.add_row(
            f"{r.algorithm} ({r.abbreviation})",
            str(r.pairs_cnt),
            str(r.links_cnt),
            str(r.component_count),
            str(r.find_cnt),
            str(r.union_cnt),
            str(r.total_cnt),
        )
    return table


def _report_data(report: RunReport, include_trace: bool) -> dict:
    data = report.to_dict()
    if not include_trace:
        data.pop("outcomes")
    return data


def report_to_json(report: RunReport, include_trace: bool = False) -> str:
    return json.dumps(_report_data(report, include_trace), indent=2)


def reports_to_json(reports: Sequence[RunReport], include_trace: bool = False) -> str:
    return json.dumps([_report_data(r, include_trace) for r in reports], indent=2)
