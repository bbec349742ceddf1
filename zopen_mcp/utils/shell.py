"""Shell quoting for remote command lines."""

import shlex
from collections.abc import Callable, Iterable

Quoter = Callable[[str], str]


def double_quote(arg: str) -> str:
    """Wrap an argument in double quotes without escaping.

    Matches the quoting existing remote profiles were written against.
    Embedded double quotes and ``$``/backtick expansions are NOT escaped.
    """
    return f'"{arg}"'


def quote_arg(arg: str) -> str:
    """Safely quote a shell argument.

    Args:
        arg: Argument to quote

    Returns:
        Shell-safe quoted argument
    """
    return shlex.quote(arg)


def join_args(args: Iterable[str], quoter: Quoter) -> str:
    """Quote each argument individually and join with spaces."""
    return " ".join(quoter(arg) for arg in args)
