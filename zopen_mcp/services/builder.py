"""Command construction for local and ssh execution."""

import os
from collections.abc import Sequence

from zopen_mcp.config import Config
from zopen_mcp.models import CommandSpec
from zopen_mcp.utils.shell import double_quote, join_args, quote_arg

ZOPEN = "zopen"
ZOPEN_GENERATE = "zopen-generate"

SSH_BINARY = "ssh"
PROFILE_SCRIPT = "~/.profile"
REMOTE_SHELL = "/bin/sh"

# Non-interactive connection: no host key prompt, nothing persisted, no banners
SSH_HARDENING_OPTIONS: tuple[str, ...] = (
    "-o",
    "StrictHostKeyChecking=no",
    "-o",
    "UserKnownHostsFile=/dev/null",
    "-o",
    "LogLevel=ERROR",
)


class CommandBuilder:
    """Turns a program and its arguments into an exact argument vector.

    In local mode the vector is ``[binary, *args]``. In remote mode the
    program runs through a login-profile-sourcing ``/bin/sh -c`` on the
    configured host via the ``ssh`` client.

    Example:
        >>> builder = CommandBuilder(Config())
        >>> builder.build(ZOPEN, ["list"]).argv
        ('zopen', 'list')
    """

    def __init__(self, config: Config, quoting: str = "double") -> None:
        """Initialize builder.

        Args:
            config: Startup configuration
            quoting: ``double`` wraps remote arguments in plain double quotes,
                ``posix`` escapes them with shlex
        """
        if quoting not in ("double", "posix"):
            raise ValueError(f"Unknown quoting mode: {quoting!r}")
        self.config = config
        self.quoting = quoting
        # A remote zopen path belongs to the remote host and is left as given
        self.zopen_path = (
            config.zopen_path if config.remote else self._local_path(config.zopen_path)
        )

    @staticmethod
    def _local_path(path: str) -> str:
        """Anchor a relative path to the server's working directory.

        Builds run with the project as cwd, so a relative executable path
        must not be left for the child to resolve.
        """
        if path and os.sep in path and not os.path.isabs(path):
            return os.path.abspath(path)
        return path

    def binary(self, program: str) -> str:
        """Resolve the executable for a logical program name."""
        if program == ZOPEN and self.zopen_path:
            return self.zopen_path
        return program

    def build(
        self,
        program: str,
        args: Sequence[str],
        directory: str | None = None,
    ) -> CommandSpec:
        """Build the command for the configured execution mode.

        Args:
            program: Logical program (``zopen`` or ``zopen-generate``)
            args: Arguments passed to the program, in order
            directory: Working directory, local cwd or remote ``cd`` target

        Returns:
            Immutable CommandSpec
        """
        if self.config.remote:
            return CommandSpec(
                argv=tuple(self.ssh_command(program, args, directory)),
                remote=True,
            )
        return CommandSpec(
            argv=(self.binary(program), *args),
            remote=False,
            cwd=directory,
        )

    def ssh_options(self) -> list[str]:
        """ssh client arguments preceding the target."""
        options = ["-p", str(self.config.port)]
        if self.config.key:
            options.extend(["-i", self.config.key])
        options.extend(SSH_HARDENING_OPTIONS)
        return options

    def remote_command(
        self,
        program: str,
        args: Sequence[str],
        directory: str | None = None,
    ) -> str:
        """Command line handed to the remote login shell."""
        if self.quoting == "posix":
            quoted_args = join_args(args, quote_arg)
            quoted_dir = quote_arg(directory) if directory else None
        else:
            quoted_args = join_args(args, double_quote)
            quoted_dir = directory

        steps = [f". {PROFILE_SCRIPT}"]
        if quoted_dir:
            steps.append(f"cd {quoted_dir}")
        steps.append(f"{self.binary(program)} {quoted_args}".rstrip())
        inner = " && ".join(steps)

        if self.quoting == "posix":
            return f"{REMOTE_SHELL} -c {quote_arg(inner)}"
        return f'{REMOTE_SHELL} -c "{inner}"'

    def ssh_command(
        self,
        program: str,
        args: Sequence[str],
        directory: str | None = None,
    ) -> list[str]:
        """Full ssh argument vector for remote execution."""
        return [
            SSH_BINARY,
            *self.ssh_options(),
            self.config.target,
            self.remote_command(program, args, directory),
        ]
