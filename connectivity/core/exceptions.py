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
Custom exception hierarchy for the connectivity CLI application.

Every error raised by the union-find variants, the input reader and the
run pipeline derives from connectivityError so that the CLI can report
them uniformly and exit with a non-zero status.
"""

import functools

import typer
from loguru import logger
from rich.markup import escape


class connectivityError(Exception):
    """
    Base exception for all connectivity-related errors.

    All connectivity-specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str = None):
        """
        Initialize a connectivityError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(connectivityError):
    """
    Input validation errors.

    Raised when caller supplied values fail validation checks,
    such as a negative universe size or an unknown algorithm name.
    """

    pass


class ConfigurationError(connectivityError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid or contain
    incompatible settings.
    """

    pass


class FileSystemError(connectivityError):
    """
    File system operation errors.

    Raised when the pair input file is missing or unreadable.
    """

    pass


class AllocationFailure(connectivityError):
    """
    The partition arrays for a universe of N elements could not be allocated.

    Fatal: the run is aborted before any pair is read.
    """

    pass


class OutOfRangeElement(connectivityError):
    """Raised when an element lies outside [0, N)."""

    def __init__(self, element: int, n: int):
        self.element = element
        self.n = n
        details = f"Valid elements are 0..{n - 1}" if n > 0 else "The universe is empty"
        super().__init__(
            f"Element {element} is out of range for a universe of {n}", details
        )


class MalformedInput(connectivityError):
    """
    Input that cannot be read as integers.

    Inside the pair stream a malformed token simply ends the stream; this
    error is only raised when the universe size itself cannot be read.
    """

    pass


class PartitionCorruptedError(connectivityError):
    """
    The partition no longer satisfies its structural invariants.

    Raised when root-finding exceeds N hops (a cycle) or when a final
    grouping does not contain exactly N - links components.
    """

    pass


# Convenience functions for creating common errors
def element_out_of_range(element: int, n: int) -> OutOfRangeElement:
    """Create an OutOfRangeElement for an element outside the universe."""
    return OutOfRangeElement(element, n)


def allocation_failed(n: int, cause: BaseException) -> AllocationFailure:
    """Create an AllocationFailure for a universe that could not be allocated."""
    return AllocationFailure(
        f"Could not allocate partition arrays for {n} elements",
        f"{type(cause).__name__}: {cause}",
    )


def input_not_found(path: str) -> FileSystemError:
    """Create a FileSystemError for a missing input file."""
    return FileSystemError(
        f"Input file not found: {path}",
        "Please check that the path exists, or pass '-' to read pairs from stdin",
    )


def missing_universe_size(token: str | None) -> MalformedInput:
    """Create a MalformedInput for an unreadable universe size."""
    if token is None:
        return MalformedInput(
            "Input is empty: expected the number of elements as the first value",
            "Pass --size N or start the input with N",
        )
    return MalformedInput(
        f"Invalid number of elements: {token!r}",
        "The first value of the input must be a non-negative integer when --size is not given",
    )


def unknown_algorithm(name: str, available) -> ValidationError:
    """Create a ValidationError for an unknown union-find variant."""
    return ValidationError(
        f"Unknown algorithm: {name}",
        f"Choose one of: {', '.join(available)}",
    )


def handle_connectivity_exception(func):
    """Log a connectivityError for the user and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except connectivityError as e:
            logger.error(f"[red]Error:[/red] {escape(e.message)}")
            if e.details:
                logger.info(escape(e.details))
            raise typer.Exit(1) from e

    return wrapper
