"""Services for zopen MCP."""

from zopen_mcp.services.builder import (
    SSH_HARDENING_OPTIONS,
    ZOPEN,
    ZOPEN_GENERATE,
    CommandBuilder,
)
from zopen_mcp.services.executor import ZopenExecutor
from zopen_mcp.services.runner import resolve_executable, run_command

__all__ = [
    "SSH_HARDENING_OPTIONS",
    "ZOPEN",
    "ZOPEN_GENERATE",
    "CommandBuilder",
    "ZopenExecutor",
    "resolve_executable",
    "run_command",
]
