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


"""Process-level setup for the CLI entry point and its eager options."""

import importlib.metadata
import signal
import sys

import typer
from loguru import logger

from connectivity.core.logging.logging import get_log_directory

DIST_NAME = "connectivity"

# 128 + SIGINT, what a shell reports for an interrupted command
CANCELLED_EXIT_CODE = 130


def ensure_utf8_output():
    """Reconfigure stdout and stderr to utf-8 where the stream allows it."""
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")


def _cancel(signum, frame):
    logger.info(f"\n[yellow]Run cancelled ({signal.Signals(signum).name})[/yellow]")
    raise typer.Exit(CANCELLED_EXIT_CODE)


def setup_signal_handlers():
    """Stop a long run cleanly on Ctrl+C or SIGTERM; partitions are released on the way out."""
    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, _cancel)


def installed_version() -> str:
    try:
        return importlib.metadata.version(DIST_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "development"


def version_callback(value: bool):
    if not value:
        return
    typer.echo(f"connectivity version {installed_version()}")
    raise typer.Exit()


def get_log_dir_callback(value: bool):
    if not value:
        return
    typer.echo(str(get_log_directory()))
    raise typer.Exit()
