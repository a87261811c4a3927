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
Reading whitespace-delimited integer pairs.

The stream is consumed lazily so that each pair is fully processed before
the next one is read. A token that is not an integer ends the stream, the
same way a failed two-integer read ends the loop of a scanf based reader.
"""

import contextlib
import re
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from loguru import logger
from rich.markup import escape

from connectivity.core.exceptions import input_not_found, missing_universe_size

# optional sign and ASCII digits, as a %d conversion reads them
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def tokenize(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _parse_int(token: str) -> int | None:
    # int() alone would also take "1_000" and non-ASCII digits
    if INTEGER_TOKEN.fullmatch(token) is None:
        return None
    return int(token)


def read_universe_size(tokens: Iterator[str]) -> int:
    """Consume the first token as the number of elements."""
    token = next(tokens, None)
    n = _parse_int(token) if token is not None else None
    if n is None or n < 0:
        raise missing_universe_size(token)
    return n


def read_pairs(tokens: Iterator[str]) -> Iterator[tuple[int, int]]:
    for first in tokens:
        p = _parse_int(first)
        if p is None:
            logger.warning(f"Stopping at non-integer token {escape(repr(first))}")
            return

        second = next(tokens, None)
        if second is None:
            logger.warning(f"Ignoring dangling value {p} at end of input")
            return

        q = _parse_int(second)
        if q is None:
            logger.warning(f"Stopping at non-integer token {escape(repr(second))}")
            return

        yield p, q


def read_input(
    stream: Iterable[str], size: int | None = None
) -> tuple[int, Iterator[tuple[int, int]]]:
    """Universe size (from `size` or the first token) and the lazy pair stream."""
    tokens = tokenize(stream)
    n = size if size is not None else read_universe_size(tokens)
    return n, read_pairs(tokens)


@contextlib.contextmanager
def open_source(path: str | Path | None) -> Iterator[TextIO]:
    """Open the pair source; None or '-' reads from stdin."""
    if path is None or str(path) == "-":
        logger.debug("Reading pairs from stdin")
        yield sys.stdin
        return

    path = Path(path)
    if not path.is_file():
        raise input_not_found(str(path))

    logger.debug(f"Reading pairs from {path}")
    with open(path, encoding="utf-8") as f:
        yield f
