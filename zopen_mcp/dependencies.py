"""Dependency injection container for zopen MCP.

Configuration is built once at startup and handed to the server explicitly.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from zopen_mcp.config import Config, Settings, parse_args
from zopen_mcp.services import ZopenExecutor


@dataclass(frozen=True)
class Dependencies:
    """Container for zopen MCP dependencies.

    Holds the startup config, the environment settings and the executor
    shared by every tool handler.

    Example:
        deps = Dependencies.from_args(["--remote", "--host", "zos.example.com"])
        server = create_server(deps)
    """

    config: Config
    settings: Settings
    executor: ZopenExecutor

    @classmethod
    def from_config(
        cls,
        config: Config,
        settings: Settings | None = None,
    ) -> "Dependencies":
        """Create dependencies from an existing config.

        Args:
            config: Startup configuration
            settings: Environment settings, loaded from env if omitted

        Returns:
            Dependencies with executor initialized from config
        """
        settings = settings or Settings.from_env()
        executor = ZopenExecutor(
            config,
            quoting=settings.quoting,
            timeout=settings.timeout_seconds,
        )
        return cls(config=config, settings=settings, executor=executor)

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> "Dependencies":
        """Create dependencies from command-line flags and environment.

        Raises:
            ConfigError: If the flags are inconsistent
        """
        return cls.from_config(parse_args(argv))
