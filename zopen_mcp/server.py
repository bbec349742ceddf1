"""zopen MCP FastMCP server.

This is a thin wrapper that wires together the MCP server with tools and middleware.
All command logic is delegated to the tools/ and services/ modules.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from zopen_mcp.config import Settings
from zopen_mcp.dependencies import Dependencies
from zopen_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from zopen_mcp.tools import TOOL_DESCRIPTIONS, register_tools
from zopen_mcp.utils.console import MCPRequestFormatter

SERVER_NAME = "zopen_mcp"

THIRD_PARTY_LOGGERS = (
    "fastmcp",
    "mcp",
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "starlette",
    "anyio",
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure logging for the zopen_mcp package.

    stdout carries the MCP protocol, so log output only ever goes to
    stderr, and only when DEBUG is set. Otherwise all logging is muted.
    """
    zopen_logger = logging.getLogger("zopen_mcp")
    zopen_logger.handlers = []
    zopen_logger.propagate = False

    if settings.debug:
        use_colors = settings.log_colors and sys.stderr.isatty()
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(MCPRequestFormatter(use_colors=use_colors))
        zopen_logger.addHandler(handler)
        zopen_logger.setLevel(getattr(logging, settings.log_level, logging.DEBUG))
        third_party_level = logging.WARNING
    else:
        zopen_logger.addHandler(logging.NullHandler())
        zopen_logger.setLevel(logging.CRITICAL + 1)
        third_party_level = logging.CRITICAL + 1

    for name in THIRD_PARTY_LOGGERS:
        lg = logging.getLogger(name)
        lg.setLevel(third_party_level)
        if not settings.debug:
            lg.handlers = [logging.NullHandler()]
            lg.propagate = False

    # Suppress root logger so nothing reaches stdout through it
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.WARNING)


def configure_middleware(server: FastMCP, settings: Settings) -> ErrorHandlingMiddleware:
    """Configure middleware stack for the server.

    Adds middleware in order: ErrorHandling -> Logging (with integrated timing)

    Args:
        server: The FastMCP server to configure.
        settings: Environment settings with payload, threshold and traceback flags.

    Returns:
        The error middleware, whose counts are reported at shutdown.
    """
    error_middleware = ErrorHandlingMiddleware(
        include_traceback=settings.include_traceback
    )
    server.add_middleware(error_middleware)
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )
    return error_middleware


def create_server(deps: Dependencies) -> FastMCP:
    """Create and configure the MCP server with all middleware and tools.

    Args:
        deps: Startup configuration, settings and shared executor

    Returns:
        Configured FastMCP server instance
    """
    config = deps.config

    @asynccontextmanager
    async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
        if config.remote:
            logger.info(
                "Starting zopen MCP server in %s mode (target=%s, port=%d)",
                config.mode,
                config.target,
                config.port,
            )
        else:
            logger.info("Starting zopen MCP server in %s mode", config.mode)
        try:
            yield {"mode": config.mode}
        finally:
            error_stats = error_middleware.get_error_stats()
            if error_stats:
                logger.info("Errors during session: %s", error_stats)
                error_middleware.reset_stats()
            logger.info("zopen MCP server shutting down")

    server = FastMCP(SERVER_NAME, lifespan=app_lifespan)

    error_middleware = configure_middleware(server, deps.settings)
    register_tools(server, deps.executor)
    logger.info("Registered %d tools", len(TOOL_DESCRIPTIONS))

    # Add health check endpoint for HTTP transport
    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server
