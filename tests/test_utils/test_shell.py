"""Tests for shell quoting helpers."""

import shlex

from zopen_mcp.utils.shell import double_quote, join_args, quote_arg


def test_double_quote_wraps_verbatim() -> None:
    """Compatibility quoting does not escape anything."""
    assert double_quote("curl") == '"curl"'
    assert double_quote("$HOME") == '"$HOME"'


def test_quote_arg_safe_word_unchanged() -> None:
    assert quote_arg("curl") == "curl"


def test_quote_arg_round_trips() -> None:
    for arg in ["a b", "it's", "$(id)", "`id`", 'x"y', ""]:
        assert shlex.split(quote_arg(arg)) == [arg]


def test_join_args() -> None:
    assert join_args(["install", "curl"], double_quote) == '"install" "curl"'
    assert join_args([], double_quote) == ""
