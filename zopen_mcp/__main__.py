"""Entry point for zopen_mcp server."""

import logging
import sys
from collections.abc import Sequence

from fastmcp import FastMCP

from zopen_mcp.config import ConfigError, Settings, build_parser
from zopen_mcp.dependencies import Dependencies
from zopen_mcp.server import configure_logging, create_server

logger = logging.getLogger(__name__)


def run_server(server: FastMCP, settings: Settings) -> None:
    """Run the MCP server with configured transport.

    Exits with status 1 if the transport fails.
    """
    try:
        if settings.transport == "stdio":
            logger.debug("Running transport=stdio")
            server.run(transport="stdio", show_banner=False)
        else:
            logger.debug(
                "Running transport=http, host=%s, port=%d",
                settings.http_host,
                settings.http_port,
            )
            server.run(
                transport="http",
                host=settings.http_host,
                port=settings.http_port,
                show_banner=False,
            )
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Server exited with error")
        sys.exit(1)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse flags, build the server and run it until the transport ends."""
    try:
        deps = Dependencies.from_args(argv)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        build_parser().print_usage(sys.stderr)
        sys.exit(1)

    configure_logging(deps.settings)
    server = create_server(deps)
    run_server(server, deps.settings)


if __name__ == "__main__":
    main()
