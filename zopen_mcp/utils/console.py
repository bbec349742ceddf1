"""Colorful stderr logging formatter."""

import logging
import re
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "yellow": "\033[33m",
    "green": "\033[32m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "zopen_mcp.server": COLORS["bright_cyan"],
    "zopen_mcp.services": COLORS["bright_magenta"],
    "zopen_mcp.tools": COLORS["bright_blue"],
    "zopen_mcp.middleware": COLORS["yellow"],
    "zopen_mcp.config": COLORS["green"],
    "default": COLORS["white"],
}

TOOL_PATTERN = re.compile(r"\b(zopen_[a-z_]+)")
DURATION_PATTERN = re.compile(r"(\d+\.?\d*ms)")
SSH_TARGET_PATTERN = re.compile(r"(\w+@[\w.\-]+)")
EXIT_CODE_PATTERN = re.compile(r"(exited with \d+|Exit Code: \d+)")


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d} {dt.strftime('%m/%d')}"

    def _format_level(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("zopen_mcp."):
            name = name[len("zopen_mcp.") :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<20}", color)

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as ``time | level | component | message``."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _highlight_message(self, message: str) -> str:
        """Highlight tool names, durations, ssh targets and exit codes."""
        if not self.use_colors:
            return message

        message = TOOL_PATTERN.sub(
            f"{COLORS['bright_cyan']}\\1{COLORS['reset']}", message
        )
        message = DURATION_PATTERN.sub(
            f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
        )
        message = SSH_TARGET_PATTERN.sub(
            f"{COLORS['bright_magenta']}\\1{COLORS['reset']}", message
        )
        message = EXIT_CODE_PATTERN.sub(
            f"{COLORS['bright_red']}\\1{COLORS['reset']}", message
        )
        return message


class MCPRequestFormatter(ColorfulFormatter):
    """Formatter that prefixes lifecycle and request events with markers."""

    def format(self, record: logging.LogRecord) -> str:
        """Format with a leading marker for notable events."""
        base = super().format(record)
        if not self.use_colors:
            return base

        message = record.getMessage().lower()

        if "starting" in message or "ready" in message:
            return f"{COLORS['bright_green']}>>>{COLORS['reset']} {base}"
        elif "shutting down" in message or "shutdown" in message:
            return f"{COLORS['bright_red']}<<<{COLORS['reset']} {base}"
        elif "error" in message or "failed" in message or "failure" in message:
            return f"{COLORS['bright_red']}!!{COLORS['reset']}  {base}"
        elif "timed out" in message or "slow" in message:
            return f"{COLORS['bright_yellow']}!{COLORS['reset']}   {base}"
        elif "executing" in message:
            return f"{COLORS['bright_cyan']}+{COLORS['reset']}   {base}"
        elif "cancelled" in message:
            return f"{COLORS['bright_yellow']}-{COLORS['reset']}   {base}"

        return f"    {base}"
