"""Configuration module for zopen MCP.

Provides focused classes for different configuration concerns:
- Config: Startup flags (execution mode, SSH details, zopen path)
- Settings: Environment variable configuration
"""

from zopen_mcp.config.main import Config, ConfigError, build_parser, parse_args
from zopen_mcp.config.settings import Settings

__all__ = ["Config", "ConfigError", "Settings", "build_parser", "parse_args"]
