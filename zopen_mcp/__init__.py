"""zopen MCP: package management tools for z/OS Open Tools over MCP."""

__version__ = "1.0.0"
