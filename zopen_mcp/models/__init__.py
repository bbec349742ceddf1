"""Data models for zopen MCP."""

from zopen_mcp.models.command import CommandSpec
from zopen_mcp.models.result import (
    CommandFailed,
    CommandTimedOut,
    ExecutableNotFound,
    ExecutionResult,
    Success,
    ToolResult,
)

__all__ = [
    "CommandFailed",
    "CommandSpec",
    "CommandTimedOut",
    "ExecutableNotFound",
    "ExecutionResult",
    "Success",
    "ToolResult",
]
