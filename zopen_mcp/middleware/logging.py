"""Logging middleware for tool call tracking."""

import json
import logging
import time
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from zopen_mcp.middleware.base import ZopenMiddleware


class LoggingMiddleware(ZopenMiddleware):
    """Middleware that logs tool calls with arguments and timing.

    Every line goes to the zopen_mcp logger, which only has a stderr
    handler when DEBUG is set.

    Example:
        >>> middleware = LoggingMiddleware(include_payloads=True)
        >>> mcp.add_middleware(middleware)
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_payloads: bool = False,
        max_payload_length: int = 1000,
        slow_threshold_ms: float = 1000.0,
    ) -> None:
        """Initialize logging middleware.

        Args:
            logger: Optional custom logger.
            include_payloads: Whether to log tool arguments and results.
            max_payload_length: Maximum payload length before truncation.
            slow_threshold_ms: Threshold in ms for slow call warnings.
        """
        super().__init__(logger=logger)
        self.include_payloads = include_payloads
        self.max_payload_length = max_payload_length
        self.slow_threshold_ms = slow_threshold_ms

    def _truncate(self, data: Any) -> str:
        try:
            text = json.dumps(data, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            text = str(data)

        if len(text) > self.max_payload_length:
            return text[: self.max_payload_length] + "... [truncated]"
        return text

    def _format_args(self, args: dict[str, Any] | None) -> str:
        if not args:
            return "()"
        parts = []
        for key, value in args.items():
            if isinstance(value, str) and len(value) > 50:
                value = value[:50] + "..."
            parts.append(f"{key}={value!r}")
        return f"({', '.join(parts)})"

    def _format_duration(self, duration_ms: float) -> str:
        if duration_ms >= self.slow_threshold_ms:
            return f"{duration_ms:.1f}ms SLOW!"
        return f"{duration_ms:.1f}ms"

    def _summarize_result(self, result: Any) -> str:
        """Brief summary of a tool result for logging."""
        if result is None:
            return "null"

        if isinstance(result, str):
            lines = result.count("\n") + 1
            if lines > 1:
                return f"{len(result)} chars, {lines} lines"
            return f"{len(result)} chars"

        content = getattr(result, "content", None)
        if isinstance(content, (list, tuple)):
            chars = sum(len(getattr(item, "text", "") or "") for item in content)
            return f"{len(content)} content item(s), {chars} chars"

        return type(result).__name__

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log tool calls with name, arguments, and timing."""
        start = time.perf_counter()
        tool_name = getattr(context.message, "name", "unknown")
        args = getattr(context.message, "arguments", None)

        self.logger.info(">>> TOOL: %s%s", tool_name, self._format_args(args))

        if self.include_payloads and args:
            self.logger.debug("    Args: %s", self._truncate(args))

        try:
            result = await call_next(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.warning(
                "!!! TOOL: %s -> %s [%s]",
                tool_name,
                type(e).__name__,
                self._format_duration(duration_ms),
            )
            if self.include_payloads:
                self.logger.debug("    Error: %s", self._truncate(str(e)))
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        log_level = (
            logging.WARNING if duration_ms >= self.slow_threshold_ms else logging.INFO
        )
        self.logger.log(
            log_level,
            "<<< TOOL: %s -> %s [%s]",
            tool_name,
            self._summarize_result(result),
            self._format_duration(duration_ms),
        )

        if self.include_payloads and result is not None:
            self.logger.debug("    Result: %s", self._truncate(result))

        return result

    async def on_list_tools(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log tool listing requests."""
        start = time.perf_counter()
        result = await call_next(context)
        duration_ms = (time.perf_counter() - start) * 1000

        tool_count: int | str = "?"
        if hasattr(result, "tools"):
            tool_count = len(result.tools)
        elif isinstance(result, (list, tuple)):
            tool_count = len(result)

        self.logger.debug(
            "<<< LIST TOOLS -> %s tool(s) [%s]",
            tool_count,
            self._format_duration(duration_ms),
        )
        return result

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log messages that aren't caught by the tool handlers."""
        method = context.method
        if method in ("tools/call", "tools/list"):
            return await call_next(context)

        start = time.perf_counter()
        self.logger.debug(">>> MCP: %s", method)
        result = await call_next(context)
        self.logger.debug(
            "<<< MCP: %s [%s]",
            method,
            self._format_duration((time.perf_counter() - start) * 1000),
        )
        return result
