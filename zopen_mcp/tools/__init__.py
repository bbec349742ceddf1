"""MCP tools for zopen MCP."""

from zopen_mcp.tools.generate import ZopenGenerateTools
from zopen_mcp.tools.registry import TOOL_DESCRIPTIONS, register_tools
from zopen_mcp.tools.zopen import ZopenTools

__all__ = ["TOOL_DESCRIPTIONS", "ZopenGenerateTools", "ZopenTools", "register_tools"]
