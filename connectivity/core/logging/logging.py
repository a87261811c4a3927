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


"""
Logging configuration for the connectivity CLI application.

Console output goes through a rich Console so that markup in messages is
rendered; a detailed, rotating log file is kept for every invocation.
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from platformdirs import user_log_path
from rich.console import Console

LOG_DIR = user_log_path(appname="connectivity")


class StructuredLogger:
    """Structured logging helper for consistent log formatting."""

    def __init__(self, command_name: str, silent: bool = False):
        self.command_name = command_name
        self.silent = silent
        self.console = Console(stderr=True)
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Set up loguru with proper formatting and sinks."""
        # Clear existing sinks to avoid duplicates
        logger.remove()

        log_level = os.getenv("CONNECTIVITY_LOG_LEVEL", "INFO").upper()
        console_level = os.getenv("CONNECTIVITY_CONSOLE_LOG_LEVEL", log_level).upper()

        def console_sink(message):
            text = message.record["message"].rstrip("\n")
            self.console.print(text)

        if not self.silent:
            logger.add(console_sink, level=console_level, format="{message}", catch=True)

        self.logfile = None
        try:
            LOG_DIR.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug(f"Log directory unavailable, file logging disabled: {e}")
            return

        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = LOG_DIR / f"connectivity_{timestamp}.log"

        logger.add(
            logfile,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
            backtrace=True,
            diagnose=True,
        )

        logger.bind(
            command=self.command_name, logfile=str(logfile), log_level=log_level
        ).debug("Logger initialized")

        self.logfile = logfile

    def get_logfile(self) -> Path | None:
        """Get the current log file path."""
        return self.logfile


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path | None:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Enable debug logging on the console
        silent: Suppress all console logging

    Returns:
        Path to the log file, or None if file logging is unavailable
    """
    if debug:
        os.environ["CONNECTIVITY_LOG_LEVEL"] = "DEBUG"
        os.environ["CONNECTIVITY_CONSOLE_LOG_LEVEL"] = "DEBUG"

    structured_logger = StructuredLogger(command_name, silent=silent)
    return structured_logger.get_logfile()


def get_log_directory() -> Path:
    """Get the directory where log files are stored."""
    return LOG_DIR
