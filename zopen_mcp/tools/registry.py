"""Registration of every zopen tool with the FastMCP server."""

import logging
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from zopen_mcp.models import ToolResult
from zopen_mcp.services import ZopenExecutor
from zopen_mcp.tools.generate import ZopenGenerateTools
from zopen_mcp.tools.zopen import ZopenTools

logger = logging.getLogger(__name__)

TOOL_DESCRIPTIONS: dict[str, str] = {
    "zopen_list": "Lists information about zopen community packages",
    "zopen_query": "List local or remote info about zopen community packages",
    "zopen_install": "Installs one or more zopen community packages",
    "zopen_remove": "Removes installed zopen community packages",
    "zopen_upgrade": "Upgrades existing zopen community packages",
    "zopen_info": "Displays detailed information about a package",
    "zopen_version": "Display the installed zopen version",
    "zopen_init": "Initializes the zopen environment",
    "zopen_clean": "Removes unused resources",
    "zopen_alt": "Switch between different versions of a package",
    "zopen_build": "Build a zopen project in the specified directory",
    "zopen_build_help": "Display help information for zopen build",
    "zopen_create_repo": (
        "Create a new port repository in zopencommunity (core contributors only)"
    ),
    "zopen_generate": "Generate a zopen compatible project with customizable parameters",
    "zopen_generate_help": "Display help information for zopen-generate",
    "zopen_generate_version": "Display version information for zopen-generate",
    "zopen_generate_list_licenses": "List all valid license identifiers (returns JSON)",
    "zopen_generate_list_categories": "List all valid project categories (returns JSON)",
    "zopen_generate_list_build_systems": "List all valid build systems (returns JSON)",
}

Verbose = Annotated[bool, Field(description="Show verbose output")]
Packages = Annotated[list[str] | None, Field(description="Package names")]


def respond(result: ToolResult) -> str:
    """Hand a tool result to FastMCP.

    Error results are raised as ToolError, which FastMCP returns as a
    CallToolResult with isError set and the text as content.
    """
    if result.is_error:
        raise ToolError(result.text)
    return result.text


def register_tools(server: FastMCP, executor: ZopenExecutor) -> None:
    """Register all zopen and zopen-generate tools on the server.

    Args:
        server: FastMCP server to register on
        executor: Shared executor for every handler
    """
    zopen = ZopenTools(executor)
    generate = ZopenGenerateTools(executor)

    def tool(name: str) -> Any:
        return server.tool(
            name=name,
            description=TOOL_DESCRIPTIONS[name],
            output_schema=None,
        )

    @tool("zopen_list")
    async def zopen_list(verbose: Verbose = False) -> str:
        return respond(await zopen.list_packages(verbose=verbose))

    @tool("zopen_query")
    async def zopen_query(packages: Packages = None, verbose: Verbose = False) -> str:
        return respond(await zopen.query(packages=packages, verbose=verbose))

    @tool("zopen_install")
    async def zopen_install(packages: Packages = None, verbose: Verbose = False) -> str:
        return respond(await zopen.install(packages=packages, verbose=verbose))

    @tool("zopen_remove")
    async def zopen_remove(packages: Packages = None, verbose: Verbose = False) -> str:
        return respond(await zopen.remove(packages=packages, verbose=verbose))

    @tool("zopen_upgrade")
    async def zopen_upgrade(
        packages: Packages = None,
        verbose: Verbose = False,
        yes: Annotated[bool, Field(description="Answer yes to all prompts")] = False,
    ) -> str:
        return respond(await zopen.upgrade(packages=packages, verbose=verbose, yes=yes))

    @tool("zopen_info")
    async def zopen_info(
        package: Annotated[str, Field(description="Package name")] = "",
        verbose: Verbose = False,
    ) -> str:
        return respond(await zopen.info(package=package, verbose=verbose))

    @tool("zopen_version")
    async def zopen_version() -> str:
        return respond(await zopen.version())

    @tool("zopen_init")
    async def zopen_init() -> str:
        return respond(await zopen.init())

    @tool("zopen_clean")
    async def zopen_clean(
        cache: Annotated[bool, Field(description="Remove cached package files")] = False,
        unused: Annotated[bool, Field(description="Remove unused package versions")] = False,
        dangling: Annotated[bool, Field(description="Remove dangling symlinks")] = False,
        all: Annotated[bool, Field(description="Remove all of the above")] = False,
    ) -> str:
        return respond(
            await zopen.clean(cache=cache, unused=unused, dangling=dangling, all=all)
        )

    @tool("zopen_alt")
    async def zopen_alt(
        package: Annotated[str, Field(description="Package name")] = "",
        switch: Annotated[str, Field(description="Version to switch to")] = "",
    ) -> str:
        return respond(await zopen.alt(package=package, switch=switch))

    @tool("zopen_build")
    async def zopen_build(
        directory: Annotated[str, Field(description="Project directory to build in")] = "",
        verbose: Annotated[bool, Field(description="Very verbose build output (-vv)")] = False,
        force: Annotated[bool, Field(description="Force a rebuild (-f)")] = False,
    ) -> str:
        return respond(await zopen.build(directory=directory, verbose=verbose, force=force))

    @tool("zopen_build_help")
    async def zopen_build_help() -> str:
        return respond(await zopen.build_help())

    @tool("zopen_create_repo")
    async def zopen_create_repo(
        name: Annotated[str, Field(description="Repository name")] = "",
        description: Annotated[str, Field(description="Repository description")] = "",
        user: Annotated[str, Field(description="GitHub user creating the repository")] = "",
    ) -> str:
        return respond(
            await zopen.create_repo(name=name, description=description, user=user)
        )

    @tool("zopen_generate")
    async def zopen_generate(
        name: Annotated[str, Field(description="Project name")] = "",
        description: Annotated[str, Field(description="Project description")] = "",
        categories: Annotated[str, Field(description="Space separated categories")] = "",
        license: Annotated[str, Field(description="License identifier")] = "",
        type: Annotated[str, Field(description="Project type")] = "",
        build_system: Annotated[str, Field(description="Build system")] = "",
        stable_url: Annotated[str, Field(description="Stable source URL")] = "",
        stable_deps: Annotated[str, Field(description="Stable build dependencies")] = "",
        dev_url: Annotated[str, Field(description="Dev source URL")] = "",
        dev_deps: Annotated[str, Field(description="Dev build dependencies")] = "",
        build_line: Annotated[str, Field(description="Default build line")] = "",
        runtime_deps: Annotated[str, Field(description="Runtime dependencies")] = "",
        force: Annotated[bool, Field(description="Overwrite existing project")] = False,
    ) -> str:
        return respond(
            await generate.generate(
                name=name,
                description=description,
                categories=categories,
                license=license,
                type=type,
                build_system=build_system,
                stable_url=stable_url,
                stable_deps=stable_deps,
                dev_url=dev_url,
                dev_deps=dev_deps,
                build_line=build_line,
                runtime_deps=runtime_deps,
                force=force,
            )
        )

    @tool("zopen_generate_help")
    async def zopen_generate_help() -> str:
        return respond(await generate.help())

    @tool("zopen_generate_version")
    async def zopen_generate_version() -> str:
        return respond(await generate.version())

    @tool("zopen_generate_list_licenses")
    async def zopen_generate_list_licenses() -> str:
        return respond(await generate.list_licenses())

    @tool("zopen_generate_list_categories")
    async def zopen_generate_list_categories() -> str:
        return respond(await generate.list_categories())

    @tool("zopen_generate_list_build_systems")
    async def zopen_generate_list_build_systems() -> str:
        return respond(await generate.list_build_systems())

    logger.debug("Registered %d tools", len(TOOL_DESCRIPTIONS))
