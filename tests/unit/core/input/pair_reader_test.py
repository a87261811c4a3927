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


import io

import pytest
from loguru import logger
from rich.console import Console

from connectivity.core.exceptions import FileSystemError, MalformedInput
from connectivity.core.input.pair_reader import (
    open_source,
    read_input,
    read_pairs,
    read_universe_size,
    tokenize,
)


def test_tokenize_splits_on_any_whitespace():
    stream = io.StringIO("10\n4 3\t3   8\n\n6 5\n")
    assert list(tokenize(stream)) == ["10", "4", "3", "3", "8", "6", "5"]


def test_read_pairs():
    tokens = iter("4 3 3 8 6 5".split())
    assert list(read_pairs(tokens)) == [(4, 3), (3, 8), (6, 5)]


def test_pairs_may_span_lines():
    stream = io.StringIO("4\n3 3\n8\n")
    assert list(read_pairs(tokenize(stream))) == [(4, 3), (3, 8)]


def test_non_integer_token_ends_stream():
    tokens = iter("4 3 x 8 6 5".split())
    assert list(read_pairs(tokens)) == [(4, 3)]


def test_non_integer_second_token_ends_stream():
    tokens = iter("4 3 3 eight 6 5".split())
    assert list(read_pairs(tokens)) == [(4, 3)]


def test_dangling_value_is_ignored():
    tokens = iter("4 3 7".split())
    assert list(read_pairs(tokens)) == [(4, 3)]


def test_negative_values_are_read_as_integers():
    # range checking belongs to the union-find variants
    tokens = iter("-1 3".split())
    assert list(read_pairs(tokens)) == [(-1, 3)]


def test_read_pairs_is_lazy():
    consumed = []

    def stream():
        for line in ["1 2\n", "3 4\n", "oops\n"]:
            consumed.append(line)
            yield line

    pairs = read_pairs(tokenize(stream()))
    assert next(pairs) == (1, 2)
    assert consumed == ["1 2\n"]


def test_read_universe_size():
    tokens = iter(["10", "4", "3"])
    assert read_universe_size(tokens) == 10
    assert list(tokens) == ["4", "3"]


@pytest.mark.parametrize("text", ["", "ten 4 3", "-3 1 2"])
def test_invalid_universe_size(text):
    with pytest.raises(MalformedInput):
        read_universe_size(iter(text.split()))


def test_read_input_takes_size_from_first_value():
    n, pairs = read_input(io.StringIO("10\n4 3\n3 8\n"))
    assert n == 10
    assert list(pairs) == [(4, 3), (3, 8)]


def test_read_input_with_explicit_size():
    n, pairs = read_input(io.StringIO("4 3\n3 8\n"), size=10)
    assert n == 10
    assert list(pairs) == [(4, 3), (3, 8)]


def test_open_source_file(tmp_path):
    path = tmp_path / "pairs.txt"
    path.write_text("3\n0 1\n")

    with open_source(path) as stream:
        assert stream.read() == "3\n0 1\n"


def test_open_source_missing_file(tmp_path):
    with pytest.raises(FileSystemError) as exc_info:
        with open_source(tmp_path / "missing.txt"):
            pass

    assert "missing.txt" in exc_info.value.message


@pytest.mark.parametrize("path", [None, "-"])
def test_open_source_stdin(path, monkeypatch):
    fake_stdin = io.StringIO("2\n0 1\n")
    monkeypatch.setattr("sys.stdin", fake_stdin)

    with open_source(path) as stream:
        assert stream is fake_stdin


@pytest.fixture
def logged_warnings():
    messages = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(sink_id)


def render(message: str) -> str:
    """Print a log message the way the console sink does."""
    console = Console(record=True, width=200)
    console.print(message)
    return console.export_text().strip()


def test_markup_like_token_is_reported_verbatim(logged_warnings):
    tokens = iter("1 2 [/x] 3".split())
    assert list(read_pairs(tokens)) == [(1, 2)]

    assert len(logged_warnings) == 1
    assert render(logged_warnings[0]) == "Stopping at non-integer token '[/x]'"


def test_styling_token_is_not_swallowed(logged_warnings):
    list(read_pairs(iter("1 2 3 [bold]".split())))
    assert render(logged_warnings[0]) == "Stopping at non-integer token '[bold]'"


@pytest.mark.parametrize("token", ["1_000", "٣", "4.0", "0x1f", "--2"])
def test_only_plain_decimal_integers_are_accepted(token):
    tokens = iter(["1", "2", token, "3"])
    assert list(read_pairs(tokens)) == [(1, 2)]


def test_signed_integers_are_accepted():
    assert list(read_pairs(iter("+4 -0 07 3".split()))) == [(4, 0), (7, 3)]


def test_universe_size_with_underscore_is_malformed():
    with pytest.raises(MalformedInput):
        read_universe_size(iter(["1_0"]))
