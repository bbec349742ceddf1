"""Executor combining command construction and process execution."""

import logging
from collections.abc import Sequence

from zopen_mcp.config import Config
from zopen_mcp.models import ExecutionResult
from zopen_mcp.services.builder import CommandBuilder
from zopen_mcp.services.runner import run_command

logger = logging.getLogger(__name__)


class ZopenExecutor:
    """Runs zopen programs locally or via ssh according to the config.

    One call, one child process, one result.
    """

    def __init__(
        self,
        config: Config,
        quoting: str = "double",
        timeout: float | None = None,
    ) -> None:
        """Initialize executor.

        Args:
            config: Startup configuration
            quoting: Remote argument quoting mode
            timeout: Per-command timeout in seconds, None for no limit
        """
        self.config = config
        self.builder = CommandBuilder(config, quoting=quoting)
        self.timeout = timeout

    @property
    def remote(self) -> bool:
        """Whether commands run on the remote host."""
        return self.config.remote

    async def run(
        self,
        program: str,
        args: Sequence[str],
        directory: str | None = None,
    ) -> ExecutionResult:
        """Build and execute a command.

        Args:
            program: Logical program name
            args: Program arguments
            directory: Working directory for the program

        Returns:
            Classified execution result
        """
        spec = self.builder.build(program, args, directory=directory)
        return await run_command(spec, timeout=self.timeout)
