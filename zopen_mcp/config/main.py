"""Startup configuration parsed from command-line flags."""

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_SSH_PORT = 22


class ConfigError(ValueError):
    """Invalid combination of startup flags."""

    pass


@dataclass(frozen=True)
class Config:
    """Server configuration.

    Populated once at startup and shared read-only by every tool call.
    """

    remote: bool = False
    host: str = ""
    user: str = ""
    key: str = ""
    port: int = DEFAULT_SSH_PORT
    zopen_path: str = ""

    def __post_init__(self) -> None:
        """Validate that remote mode always carries a host."""
        if self.remote and not self.host:
            raise ConfigError("--host is required when using --remote mode.")

    @property
    def mode(self) -> str:
        """Execution mode label for logging."""
        return "REMOTE" if self.remote else "LOCAL"

    @property
    def target(self) -> str:
        """SSH target, ``user@host`` when a user is configured."""
        if self.user:
            return f"{self.user}@{self.host}"
        return self.host

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "Config":
        """Create config from parsed command-line arguments."""
        return cls(
            remote=args.remote,
            host=args.host,
            user=args.user,
            key=args.key,
            port=args.port,
            zopen_path=args.zopen_path,
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser for the server."""
    parser = argparse.ArgumentParser(
        prog="zopen-mcp-server",
        description="MCP server exposing zopen package management tools.",
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Run in remote mode. Requires SSH details.",
    )
    parser.add_argument(
        "--host",
        default="",
        help="Remote z/OS hostname or IP (required for remote mode)",
    )
    parser.add_argument("--user", default="", help="SSH username for the remote system")
    parser.add_argument("--key", default="", help="Path to the SSH private key file")
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_SSH_PORT,
        help="SSH port number (default: 22)",
    )
    parser.add_argument(
        "--zopen-path",
        default="",
        help="Path to the zopen executable (optional, will use PATH if not specified)",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line flags into a Config.

    Args:
        argv: Arguments to parse, defaults to ``sys.argv[1:]``

    Returns:
        Validated Config

    Raises:
        ConfigError: If remote mode is requested without a host
    """
    args = build_parser().parse_args(argv)
    return Config.from_namespace(args)
