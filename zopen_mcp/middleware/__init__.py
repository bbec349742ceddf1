"""zopen MCP middleware components."""

from zopen_mcp.middleware.base import ZopenMiddleware
from zopen_mcp.middleware.errors import ErrorHandlingMiddleware
from zopen_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "ZopenMiddleware",
]
