"""Shared result formatting and parameter helpers for tool handlers."""

from collections.abc import Iterable
from typing import Any

from zopen_mcp.models import (
    CommandFailed,
    CommandTimedOut,
    ExecutableNotFound,
    ExecutionResult,
    Success,
    ToolResult,
)

SUCCESS_MARKER = "✅ Command successful with no output."
FAILURE_MARKER = "❌"


def error_result(message: str) -> ToolResult:
    """Error result with the failure marker prefix."""
    return ToolResult(text=f"{FAILURE_MARKER} Error: {message}", is_error=True)


def _human_join(names: list[str]) -> str:
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return f"{', '.join(names[:-1])}, and {names[-1]}"


def check_required(**params: Any) -> ToolResult | None:
    """Validate that every declared required parameter is present.

    Empty strings, empty lists and None count as missing.

    Returns:
        Error result naming all required parameters, or None if all are set
    """
    if all(params.values()):
        return None
    names = list(params)
    verb = "is" if len(names) == 1 else "are"
    return error_result(f"Required parameters missing. {_human_join(names)} {verb} required.")


def flag(enabled: bool, token: str) -> list[str]:
    """Flag token when enabled, nothing otherwise."""
    return [token] if enabled else []


def option(token: str, value: str | None) -> list[str]:
    """Flag token followed by its value when the value is non-empty."""
    return [token, value] if value else []


def values(items: Iterable[str] | None) -> list[str]:
    """Non-empty positional values, in order."""
    return [item for item in items or () if item]


def _join_streams(first: str, second: str) -> str:
    """First stream, then the second after a newline when it is non-empty."""
    if second:
        return f"{first}\n{second}"
    return first


def format_result(
    result: ExecutionResult,
    merge_streams: bool = False,
    stdout_first: bool = False,
) -> ToolResult:
    """Translate an execution result into the tool result envelope.

    Args:
        result: Outcome from the process runner
        merge_streams: Include the other stream too (stderr on success,
            stdout on failure)
        stdout_first: On failure, put stdout before stderr in the merged
            text, the way zopen build reports a failed build

    Returns:
        ToolResult with error flag derived from the result variant
    """
    if isinstance(result, Success):
        text = result.stdout
        if merge_streams:
            text = _join_streams(text, result.stderr)
        return ToolResult(text=text or SUCCESS_MARKER)

    if isinstance(result, CommandFailed):
        if not merge_streams:
            body = result.stderr
        elif stdout_first:
            body = _join_streams(result.stdout, result.stderr)
        else:
            body = f"{result.stderr}\n{result.stdout}"
        text = f"{FAILURE_MARKER} Error (Exit Code: {result.exit_code}):\n{body}"
        return ToolResult(text=text, is_error=True)

    if isinstance(result, ExecutableNotFound):
        return error_result(f"Command '{result.name}' not found. Is it in your PATH?")

    if isinstance(result, CommandTimedOut):
        text = f"{FAILURE_MARKER} Error: Command timed out after {result.timeout:g}s"
        partial = "\n".join(part for part in (result.stdout, result.stderr) if part)
        if partial:
            text = f"{text}\n{partial}"
        return ToolResult(text=text, is_error=True)

    raise TypeError(f"Unknown execution result: {result!r}")
