"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

QUOTING_MODES = ("double", "posix")
TRANSPORTS = ("stdio", "http")


@dataclass(frozen=True)
class Settings:
    """Ambient settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Logging
    debug: bool = field(default=False)
    log_level: str = field(default="DEBUG")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    # Command execution
    command_timeout: int = field(default=0)  # seconds, 0 disables
    quoting: str = field(default="double")

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            debug=bool(os.getenv("DEBUG")),
            log_level=os.getenv("ZOPEN_MCP_LOG_LEVEL", "DEBUG").upper(),
            log_colors=cls._get_bool("ZOPEN_MCP_LOG_COLORS", True),
            log_payloads=cls._get_bool("ZOPEN_MCP_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("ZOPEN_MCP_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("ZOPEN_MCP_INCLUDE_TRACEBACK", False),
            command_timeout=cls._get_int("ZOPEN_MCP_COMMAND_TIMEOUT", 0),
            quoting=cls._get_choice("ZOPEN_MCP_QUOTING", QUOTING_MODES, "double"),
            transport=cls._get_choice("ZOPEN_MCP_TRANSPORT", TRANSPORTS, "stdio"),
            http_host=os.getenv("ZOPEN_MCP_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("ZOPEN_MCP_HTTP_PORT", 8000),
        )

    @property
    def timeout_seconds(self) -> float | None:
        """Command timeout for the process runner, None when disabled."""
        return float(self.command_timeout) if self.command_timeout > 0 else None

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_choice(key: str, choices: tuple[str, ...], default: str) -> str:
        """Get one of a fixed set of values from environment.

        Unknown values fall back to the default with a warning.
        """
        value = os.getenv(key, "").strip().lower()
        if not value:
            return default
        if value in choices:
            return value
        logger.warning(
            "Invalid value for %s: %s (expected one of %s), using default %s",
            key,
            value,
            ", ".join(choices),
            default,
        )
        return default
