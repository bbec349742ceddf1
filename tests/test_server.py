"""End-to-end tests through an in-memory MCP client."""

from pathlib import Path
from unittest.mock import call, patch

import pytest
from fastmcp import Client

from zopen_mcp.config import Config, Settings
from zopen_mcp.dependencies import Dependencies
from zopen_mcp.server import SERVER_NAME, create_server
from zopen_mcp.tools import TOOL_DESCRIPTIONS
from zopen_mcp.tools.common import SUCCESS_MARKER


def make_server(config: Config | None = None):
    deps = Dependencies.from_config(config or Config(), Settings())
    return create_server(deps)


class TestToolCatalogue:
    """Tests for the advertised tools."""

    @pytest.mark.asyncio
    async def test_all_tools_registered(self) -> None:
        async with Client(make_server()) as client:
            tools = await client.list_tools()

        assert {tool.name for tool in tools} == set(TOOL_DESCRIPTIONS)
        assert len(tools) == 19

    @pytest.mark.asyncio
    async def test_descriptions(self) -> None:
        async with Client(make_server()) as client:
            tools = {tool.name: tool for tool in await client.list_tools()}

        assert tools["zopen_install"].description == (
            "Installs one or more zopen community packages"
        )

    @pytest.mark.asyncio
    async def test_parameter_schema(self) -> None:
        async with Client(make_server()) as client:
            tools = {tool.name: tool for tool in await client.list_tools()}

        install = tools["zopen_install"].inputSchema["properties"]
        assert set(install) == {"packages", "verbose"}
        generate = tools["zopen_generate"].inputSchema["properties"]
        assert {"name", "description", "categories", "license", "force"} <= set(generate)
        assert tools["zopen_version"].inputSchema.get("properties", {}) == {}

    def test_server_name(self) -> None:
        assert make_server().name == SERVER_NAME


class TestToolCalls:
    """Tests for calling tools end to end."""

    @pytest.mark.asyncio
    async def test_success(self, fake_zopen: Path) -> None:
        async with Client(make_server()) as client:
            result = await client.call_tool_mcp(
                "zopen_install", {"packages": ["curl", "git"], "verbose": True}
            )

        assert result.isError is False
        assert result.content[0].text == "install\n--verbose\ncurl\ngit\n"

    @pytest.mark.asyncio
    async def test_empty_output(self, make_script) -> None:
        make_script("zopen", "exit 0")

        async with Client(make_server()) as client:
            result = await client.call_tool_mcp("zopen_init", {})

        assert result.isError is False
        assert result.content[0].text == SUCCESS_MARKER

    @pytest.mark.asyncio
    async def test_command_failure_is_error_result(self, make_script) -> None:
        make_script("zopen", "echo 'unknown package: nope' >&2\nexit 2")

        async with Client(make_server()) as client:
            result = await client.call_tool_mcp("zopen_info", {"package": "nope"})

        assert result.isError is True
        assert result.content[0].text == "❌ Error (Exit Code: 2):\nunknown package: nope\n"

    @pytest.mark.asyncio
    async def test_missing_required_parameter(self) -> None:
        async with Client(make_server()) as client:
            result = await client.call_tool_mcp("zopen_install", {})

        assert result.isError is True
        assert result.content[0].text == (
            "❌ Error: Required parameters missing. packages is required."
        )

    @pytest.mark.asyncio
    async def test_zopen_path_override(self, make_script) -> None:
        script = make_script("my-zopen", 'echo "custom $1"')

        async with Client(make_server(Config(zopen_path=str(script)))) as client:
            result = await client.call_tool_mcp("zopen_version", {})

        assert result.content[0].text == "custom version\n"

    @pytest.mark.asyncio
    async def test_remote_mode(self, fake_ssh: Path) -> None:
        config = Config(remote=True, host="zos", user="ibmuser")

        async with Client(make_server(config)) as client:
            result = await client.call_tool_mcp("zopen_build", {"directory": "/u/ibmuser/p"})

        assert result.isError is False
        lines = result.content[0].text.splitlines()
        assert "ibmuser@zos" in lines
        assert lines[-1] == (
            '/bin/sh -c ". ~/.profile && cd /u/ibmuser/p && zopen "build""'
        )

    @pytest.mark.asyncio
    async def test_generate(self, fake_generate: Path) -> None:
        async with Client(make_server()) as client:
            result = await client.call_tool_mcp("zopen_generate_list_licenses", {})

        assert result.isError is False
        assert result.content[0].text == "--json\n--list-licenses\n\ngenerating\n"


class TestLifespan:
    """Tests for server startup and shutdown."""

    @pytest.mark.asyncio
    async def test_error_counts_reported_at_shutdown(self) -> None:
        server = make_server()

        with patch("zopen_mcp.server.logger") as mock_logger:
            async with Client(server) as client:
                await client.call_tool_mcp("zopen_install", {})
                await client.call_tool_mcp("zopen_remove", {})

        assert call("Errors during session: %s", {"ToolError": 2}) in (
            mock_logger.info.call_args_list
        )

    @pytest.mark.asyncio
    async def test_clean_session_reports_no_errors(self, fake_zopen: Path) -> None:
        with patch("zopen_mcp.server.logger") as mock_logger:
            async with Client(make_server()) as client:
                await client.call_tool_mcp("zopen_version", {})

        logged = str(mock_logger.info.call_args_list)
        assert "Errors during session" not in logged
        assert "shutting down" in logged
