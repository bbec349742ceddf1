"""Utilities for zopen MCP."""

from zopen_mcp.utils.console import ColorfulFormatter, MCPRequestFormatter
from zopen_mcp.utils.shell import double_quote, join_args, quote_arg

__all__ = [
    "ColorfulFormatter",
    "MCPRequestFormatter",
    "double_quote",
    "join_args",
    "quote_arg",
]
