"""Command execution data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandSpec:
    """Exact argument vector to execute, local or wrapped in ssh."""

    argv: tuple[str, ...]
    remote: bool = False
    cwd: str | None = None

    @property
    def executable(self) -> str:
        """First element of the argument vector."""
        return self.argv[0]

    def __str__(self) -> str:
        return " ".join(self.argv)
