"""Tests for logging middleware."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from zopen_mcp.middleware.logging import LoggingMiddleware


@pytest.fixture
def mock_tool_context() -> MagicMock:
    """Create a mock middleware context for tool calls."""
    context = MagicMock()
    context.method = "tools/call"
    context.source = "client"
    context.message = MagicMock()
    context.message.name = "zopen_install"
    context.message.arguments = {"packages": ["curl"], "verbose": True}
    return context


@pytest.fixture
def mock_generic_context() -> MagicMock:
    """Create a mock middleware context for generic messages."""
    context = MagicMock()
    context.method = "initialize"
    context.source = "client"
    context.message = MagicMock()
    return context


@pytest.mark.asyncio
async def test_logging_middleware_logs_tool_call(
    mock_tool_context: MagicMock,
) -> None:
    """LoggingMiddleware logs tool calls with name and arguments."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    call_next = AsyncMock(return_value="result")

    result = await middleware.on_call_tool(mock_tool_context, call_next)

    assert result == "result"
    all_info_calls = str(mock_logger.info.call_args_list)
    all_log_calls = str(mock_logger.log.call_args_list)
    assert ">>> TOOL" in all_info_calls
    assert "zopen_install" in all_info_calls
    assert "packages=" in all_info_calls
    assert "<<< TOOL" in all_log_calls


@pytest.mark.asyncio
async def test_completion_logged_at_info_when_fast(
    mock_tool_context: MagicMock,
) -> None:
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger, slow_threshold_ms=60_000)
    call_next = AsyncMock(return_value="result")

    await middleware.on_call_tool(mock_tool_context, call_next)

    assert mock_logger.log.call_args.args[0] == logging.INFO


@pytest.mark.asyncio
async def test_slow_calls_logged_as_warning(
    mock_tool_context: MagicMock,
) -> None:
    """Calls over the threshold are flagged SLOW at warning level."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger, slow_threshold_ms=0)
    call_next = AsyncMock(return_value="result")

    await middleware.on_call_tool(mock_tool_context, call_next)

    assert mock_logger.log.call_args.args[0] == logging.WARNING
    assert "SLOW!" in str(mock_logger.log.call_args)


@pytest.mark.asyncio
async def test_logging_middleware_includes_payloads_when_enabled(
    mock_tool_context: MagicMock,
) -> None:
    """LoggingMiddleware includes request payloads when enabled."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger, include_payloads=True)
    call_next = AsyncMock(return_value="result")

    await middleware.on_call_tool(mock_tool_context, call_next)

    all_calls = str(mock_logger.debug.call_args_list)
    assert "curl" in all_calls


@pytest.mark.asyncio
async def test_logging_middleware_omits_payloads_by_default(
    mock_tool_context: MagicMock,
) -> None:
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    call_next = AsyncMock(return_value="result")

    await middleware.on_call_tool(mock_tool_context, call_next)

    mock_logger.debug.assert_not_called()


@pytest.mark.asyncio
async def test_logging_middleware_truncates_long_payloads(
    mock_tool_context: MagicMock,
) -> None:
    """LoggingMiddleware truncates payloads exceeding max length."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(
        logger=mock_logger,
        include_payloads=True,
        max_payload_length=20,
    )
    mock_tool_context.message.arguments = {"description": "x" * 100}
    call_next = AsyncMock(return_value="result")

    await middleware.on_call_tool(mock_tool_context, call_next)

    all_calls = str(mock_logger.debug.call_args_list)
    assert "[truncated]" in all_calls
    assert "x" * 100 not in all_calls


@pytest.mark.asyncio
async def test_logging_middleware_logs_tool_errors(
    mock_tool_context: MagicMock,
) -> None:
    """LoggingMiddleware logs failed tool calls and re-raises."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    call_next = AsyncMock(side_effect=ValueError("test error"))

    with pytest.raises(ValueError):
        await middleware.on_call_tool(mock_tool_context, call_next)

    mock_logger.warning.assert_called_once()
    warning_call = str(mock_logger.warning.call_args)
    assert "!!! TOOL" in warning_call
    assert "ValueError" in warning_call


@pytest.mark.asyncio
async def test_logging_middleware_skips_handled_methods_in_on_message(
    mock_tool_context: MagicMock,
) -> None:
    """on_message skips methods that have dedicated handlers."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    call_next = AsyncMock(return_value="result")

    result = await middleware.on_message(mock_tool_context, call_next)

    assert result == "result"
    mock_logger.info.assert_not_called()
    mock_logger.debug.assert_not_called()


@pytest.mark.asyncio
async def test_logging_middleware_logs_generic_messages(
    mock_generic_context: MagicMock,
) -> None:
    """on_message logs generic messages not handled by specific methods."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    call_next = AsyncMock(return_value="result")

    await middleware.on_message(mock_generic_context, call_next)

    assert "initialize" in str(mock_logger.debug.call_args_list)


@pytest.mark.asyncio
async def test_list_tools_counts_tools(mock_generic_context: MagicMock) -> None:
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    call_next = AsyncMock(return_value=[MagicMock()] * 19)

    await middleware.on_list_tools(mock_generic_context, call_next)

    assert "19" in str(mock_logger.debug.call_args)


class TestSummarizeResult:
    """Tests for result summaries."""

    def test_none(self) -> None:
        assert LoggingMiddleware()._summarize_result(None) == "null"

    def test_multiline_string(self) -> None:
        assert LoggingMiddleware()._summarize_result("a\nb") == "3 chars, 2 lines"

    def test_content_items(self) -> None:
        item = MagicMock()
        item.text = "hello"
        result = MagicMock()
        result.content = [item]

        assert LoggingMiddleware()._summarize_result(result) == "1 content item(s), 5 chars"
