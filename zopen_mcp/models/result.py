"""Process outcome and tool result models.

The process runner returns exactly one of the ``ExecutionResult`` variants.
Tool handlers branch on the variant type and produce a ``ToolResult``.
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Success:
    """Process exited with status 0."""

    stdout: str
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class CommandFailed:
    """Process exited with a non-zero status."""

    exit_code: int
    stderr: str
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class ExecutableNotFound:
    """Executable could not be located or spawned."""

    name: str

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class CommandTimedOut:
    """Process was killed after exceeding the command timeout."""

    timeout: float
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return False


ExecutionResult: TypeAlias = Success | CommandFailed | ExecutableNotFound | CommandTimedOut


@dataclass(frozen=True)
class ToolResult:
    """Text payload plus error flag for the MCP result envelope."""

    text: str
    is_error: bool = False
