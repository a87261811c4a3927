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

from connectivity.context import GlobalContext, RunContext
from connectivity.core.exceptions import handle_connectivity_exception
from connectivity.core.input.pair_reader import open_source, read_input
from connectivity.core.logging.utils import time_block
from connectivity.core.report.formatter import format_report, report_to_json
from connectivity.core.union_find.registry import get_algorithm
from connectivity.pipelines.run_pipeline import run


@handle_connectivity_exception
def main(
    ctx: typer.Context,
    source: str | None = typer.Argument(
        None, help="File of whitespace separated pairs. Omit or pass '-' for stdin."
    ),
    algorithm: str | None = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Variant to run: qf, qu, wqu or cwqu. Overrides the configured algorithm.",
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
    Run one union-find variant over a stream of pairs.

    Examples:
        # Read N and the pairs from a file
        connectivity run pairs.txt --algorithm wqu

        # Pairs on stdin, N given explicitly, printing every pair
        connectivity --trace run - --size 10 < pairs.txt
    """
    global_context: GlobalContext = ctx.obj
    run_context = RunContext(source, size)
    name = algorithm or global_context.algorithm
    # fail on a bad name before any input is read
    get_algorithm(name)

    logger.debug(f"Run command started algorithm={name} source={run_context.source}")

    with open_source(run_context.source) as stream, time_block("Run Command E2E"):
        n, pairs = read_input(stream, run_context.size)
        report = run(
            name,
            n,
            pairs,
            out_of_range=global_context.out_of_range,
            keep_trace=global_context.trace,
        )

    if global_context.output_format == "json":
        typer.echo(report_to_json(report, include_trace=global_context.trace))
    else:
        typer.echo(
            format_report(
                report,
                trace=global_context.trace,
                show_groups=global_context.show_groups,
            )
        )
