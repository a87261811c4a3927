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


import typer
from loguru import logger
from rich.console import Console

from connectivity.context import GlobalContext, RunContext
from connectivity.core.exceptions import handle_connectivity_exception
from connectivity.core.input.pair_reader import open_source, read_input
from connectivity.core.logging.utils import time_block
from connectivity.core.report.formatter import (
    comparison_table,
    format_groups,
    reports_to_json,
)
from connectivity.core.union_find.registry import ALGORITHMS, get_algorithm
from connectivity.pipelines.run_pipeline import compare

console = Console()


@handle_connectivity_exception
def main(
    ctx: typer.Context,
    source: str | None = typer.Argument(
        None, help="File of whitespace separated pairs. Omit or pass '-' for stdin."
    ),
    algorithms: list[str] | None = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Restrict the comparison to these variants (repeatable). Defaults to all four.",
    ),
    size: int | None = typer.Option(
        None,
        "--size",
        "-n",
        min=0,
        help="Number of elements. When omitted the first input value is used.",
    ),
) -> None:
    """
    Run several union-find variants over the same pairs and compare their cost.

    Examples:
        # All four variants
        connectivity compare pairs.txt

        # Only the weighted variants, as JSON
        connectivity --format json compare pairs.txt -a wqu -a cwqu
    """
    global_context: GlobalContext = ctx.obj
    run_context = RunContext(source, size)
    names = [n.lower() for n in algorithms] if algorithms else list(ALGORITHMS)
    for name in names:
        get_algorithm(name)

    logger.debug(f"Compare command started algorithms={names} source={run_context.source}")

    with open_source(run_context.source) as stream, time_block("Compare Command E2E"):
        n, pairs = read_input(stream, run_context.size)
        reports = compare(
            n,
            pairs,
            names,
            out_of_range=global_context.out_of_range,
        )

    if global_context.output_format == "json":
        typer.echo(reports_to_json(reports))
        return

    console.print(comparison_table(reports))
    if global_context.show_groups:
        for report in reports:
            for line in format_groups(report):
                typer.echo(line)
