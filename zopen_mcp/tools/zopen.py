"""Handlers for zopen package management tools."""

import logging
import os

from zopen_mcp.models import ToolResult
from zopen_mcp.services import ZOPEN, ZopenExecutor
from zopen_mcp.tools.common import (
    check_required,
    error_result,
    flag,
    format_result,
    option,
    values,
)

logger = logging.getLogger(__name__)


class ZopenTools:
    """One handler per zopen subcommand.

    Every handler returns a ToolResult; command failures are reported as
    result text, never raised.
    """

    def __init__(self, executor: ZopenExecutor) -> None:
        self.executor = executor

    async def _run(
        self,
        args: list[str],
        directory: str | None = None,
        merge_streams: bool = False,
        stdout_first: bool = False,
    ) -> ToolResult:
        result = await self.executor.run(ZOPEN, args, directory=directory)
        return format_result(
            result, merge_streams=merge_streams, stdout_first=stdout_first
        )

    async def list_packages(self, verbose: bool = False) -> ToolResult:
        """Lists information about zopen community packages."""
        return await self._run(["list", *flag(verbose, "--verbose")])

    async def query(
        self,
        packages: list[str] | None = None,
        verbose: bool = False,
    ) -> ToolResult:
        """Local or remote info about zopen community packages."""
        return await self._run(["query", *flag(verbose, "--verbose"), *values(packages)])

    async def install(
        self,
        packages: list[str] | None = None,
        verbose: bool = False,
    ) -> ToolResult:
        """Install one or more packages."""
        packages = values(packages)
        if missing := check_required(packages=packages):
            return missing
        return await self._run(["install", *flag(verbose, "--verbose"), *packages])

    async def remove(
        self,
        packages: list[str] | None = None,
        verbose: bool = False,
    ) -> ToolResult:
        """Remove installed packages."""
        packages = values(packages)
        if missing := check_required(packages=packages):
            return missing
        return await self._run(["remove", *flag(verbose, "--verbose"), *packages])

    async def upgrade(
        self,
        packages: list[str] | None = None,
        verbose: bool = False,
        yes: bool = False,
    ) -> ToolResult:
        """Upgrade the given packages, or everything when none are given."""
        return await self._run(
            [
                "upgrade",
                *flag(yes, "--yes"),
                *flag(verbose, "--verbose"),
                *values(packages),
            ]
        )

    async def info(self, package: str = "", verbose: bool = False) -> ToolResult:
        """Detailed information about a package."""
        if missing := check_required(package=package):
            return missing
        return await self._run(["info", package, *flag(verbose, "--verbose")])

    async def version(self) -> ToolResult:
        return await self._run(["version"])

    async def init(self) -> ToolResult:
        return await self._run(["init"])

    async def clean(
        self,
        cache: bool = False,
        unused: bool = False,
        dangling: bool = False,
        all: bool = False,
    ) -> ToolResult:
        """Remove unused resources."""
        return await self._run(
            [
                "clean",
                *flag(cache, "--cache"),
                *flag(unused, "--unused"),
                *flag(dangling, "--dangling"),
                *flag(all, "--all"),
            ]
        )

    async def alt(self, package: str = "", switch: str = "") -> ToolResult:
        """List or switch alternative versions of a package."""
        return await self._run(["alt", *values([package]), *option("-s", switch)])

    async def build(
        self,
        directory: str = "",
        verbose: bool = False,
        force: bool = False,
    ) -> ToolResult:
        """Build a zopen project in the given directory.

        Locally the directory must exist and becomes the working directory.
        Remotely the command changes into it before running the build.
        """
        if missing := check_required(directory=directory):
            return missing

        args = ["build", *flag(verbose, "-vv"), *flag(force, "-f")]

        if self.executor.remote:
            return await self._run(
                args, directory=directory, merge_streams=True, stdout_first=True
            )

        abs_path = os.path.abspath(directory)
        if not os.path.exists(abs_path):
            return error_result(f"directory does not exist: {abs_path}")
        if not os.path.isdir(abs_path):
            return error_result(f"not a directory: {abs_path}")

        logger.debug("Building in %s", abs_path)
        return await self._run(
            args, directory=abs_path, merge_streams=True, stdout_first=True
        )

    async def build_help(self) -> ToolResult:
        return await self._run(["build", "--help"])

    async def create_repo(
        self,
        name: str = "",
        description: str = "",
        user: str = "",
    ) -> ToolResult:
        """Create a new port repository in zopencommunity."""
        if missing := check_required(name=name):
            return missing
        return await self._run(
            [
                "create-repo",
                "-v",
                "-n",
                name,
                *option("-d", description),
                *option("-u", user),
            ]
        )
