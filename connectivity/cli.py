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


from pathlib import Path

import typer
from dotenv import load_dotenv
from loguru import logger
from platformdirs import user_config_dir
from rich.markup import escape
from rich.traceback import install

from connectivity.commands import compare, config, run
from connectivity.context import GlobalConfig, GlobalContext
from connectivity.core.config.config_loader import ConfigLoader
from connectivity.core.exceptions import connectivityError, handle_connectivity_exception
from connectivity.core.logging.logging import setup_logger
from connectivity.runtimeutil import (
    CANCELLED_EXIT_CODE,
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

# create app
app = typer.Typer(
    help="connectivity: incremental dynamic connectivity with four union-find algorithms",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)

# attach commands
app.command(name="run")(run.main)
app.command(name="compare")(compare.main)
app.command(name="config")(config.main)

# commands that do not need a global context
config_command = "config"


def setup_config_args(**kwargs):
    config_args = {}

    for key, item in kwargs.items():
        if item is not None:
            config_args[key] = item

    return config_args


@app.callback(invoke_without_command=True)
@handle_connectivity_exception
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        "-LD",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show log path (where logs for connectivity live) and exit",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
    trace: bool | None = typer.Option(
        None,
        "--trace/--no-trace",
        help="Print every pair: linked pairs indented by a space, discarded pairs by a tab.",
    ),
    out_of_range: str | None = typer.Option(
        None,
        "--out-of-range",
        help="'fail' aborts the run on an element outside [0, N), 'skip' rejects just that pair.",
    ),
    show_groups: bool | None = typer.Option(
        None,
        "--groups/--no-groups",
        help="Print the final Quick Find components.",
    ),
    output_format: str | None = typer.Option(
        None,
        "--format",
        help="Report format: text or json.",
    ),
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
    silent: bool | None = typer.Option(
        None,
        "--silent",
        "-s",
        help="Do not output any log text to the console.",
    ),
) -> None:
    """
    Global setup callback. Initialize shared objects here.
    """
    # skip --help in subcommands
    if any(arg in ctx.help_option_names for arg in ctx.args):
        return

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    # initial setup of logger, will be updated later if needed
    setup_logger(ctx.invoked_subcommand, debug=verbose or False, silent=silent or False)

    if ctx.invoked_subcommand == config_command:
        return

    config_args = setup_config_args(
        trace=trace,
        out_of_range=out_of_range,
        show_groups=show_groups,
        output_format=output_format,
        verbose=verbose,
        silent=silent,
    )

    local_config_path = Path("connectivityconfig.toml")
    env_prefix = "connectivity_"
    global_config_path = Path(user_config_dir("connectivity")) / "connectivityconfig.toml"
    custom_config_path = Path(custom_config) if custom_config else None

    config, used_configs, used_defaults = ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        local_config_path,
        env_prefix,
        global_config_path,
        custom_config_path,
    )

    setup_logger(ctx.invoked_subcommand, debug=config.verbose, silent=config.silent)

    if used_defaults:
        logger.debug("Some settings not configured, using default values.")

    logger.debug(f"Used {used_configs} to build global context.")
    ctx.obj = GlobalContext.from_global_config(config)


def run_app():
    """Run the application with global exception handling."""
    try:
        # force stdout to be utf8
        ensure_utf8_output()
        # Set up signal handlers for graceful shutdown
        setup_signal_handlers()
        # Disable showing locals in tracebacks (way too much text)
        install(show_locals=False)
        # load any .env files
        load_dotenv()
        # launch cli
        app(prog_name="connectivity")

    except connectivityError as e:
        logger.error(escape(str(e)))
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(CANCELLED_EXIT_CODE)


if __name__ == "__main__":
    run_app()
