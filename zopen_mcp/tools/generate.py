"""Handlers for zopen-generate project scaffolding tools."""

from zopen_mcp.models import ToolResult
from zopen_mcp.services import ZOPEN_GENERATE, ZopenExecutor
from zopen_mcp.tools.common import check_required, flag, format_result, option

# zopen-generate prompts on the terminal unless told otherwise
NON_INTERACTIVE = "--non-interactive"


class ZopenGenerateTools:
    """One handler per zopen-generate operation.

    zopen-generate reports progress on stderr, so both streams are kept
    in the result text.
    """

    def __init__(self, executor: ZopenExecutor) -> None:
        self.executor = executor

    async def _run(self, args: list[str]) -> ToolResult:
        result = await self.executor.run(ZOPEN_GENERATE, args)
        return format_result(result, merge_streams=True)

    async def generate(
        self,
        name: str = "",
        description: str = "",
        categories: str = "",
        license: str = "",
        type: str = "",
        build_system: str = "",
        stable_url: str = "",
        stable_deps: str = "",
        dev_url: str = "",
        dev_deps: str = "",
        build_line: str = "",
        runtime_deps: str = "",
        force: bool = False,
    ) -> ToolResult:
        """Generate a zopen compatible project.

        Args:
            name: Project name
            description: Project description
            categories: Space separated categories
            license: License identifier
            type: Project type
            build_system: Build system
            stable_url: Source URL of the stable build line
            stable_deps: Dependencies of the stable build line
            dev_url: Source URL of the dev build line
            dev_deps: Dependencies of the dev build line
            build_line: Default build line (stable or dev)
            runtime_deps: Runtime dependencies
            force: Overwrite an existing project directory
        """
        if missing := check_required(
            name=name,
            description=description,
            categories=categories,
            license=license,
        ):
            return missing

        args = [
            "--name",
            name,
            "--description",
            description,
            "--categories",
            categories,
            "--license",
            license,
            NON_INTERACTIVE,
            *option("--type", type),
            *option("--build-system", build_system),
            *option("--stable-url", stable_url),
            *option("--stable-deps", stable_deps),
            *option("--dev-url", dev_url),
            *option("--dev-deps", dev_deps),
            *option("--build-line", build_line),
            *option("--runtime-deps", runtime_deps),
            *flag(force, "--force"),
        ]
        return await self._run(args)

    async def help(self) -> ToolResult:
        return await self._run(["--help"])

    async def version(self) -> ToolResult:
        return await self._run(["--version"])

    async def list_licenses(self) -> ToolResult:
        return await self._run(["--json", "--list-licenses"])

    async def list_categories(self) -> ToolResult:
        return await self._run(["--json", "--list-categories"])

    async def list_build_systems(self) -> ToolResult:
        return await self._run(["--json", "--list-build-systems"])
