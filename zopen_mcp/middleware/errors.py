"""Error handling middleware for consistent error logging."""

import logging
import traceback
from collections import defaultdict
from typing import Any

from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import MiddlewareContext

from zopen_mcp.middleware.base import ZopenMiddleware


class ErrorHandlingMiddleware(ZopenMiddleware):
    """Middleware that logs and counts errors, then re-raises them.

    ToolError is how a failed zopen command travels back to the client,
    so it is logged as a warning. Anything else is an unexpected failure
    and logged as an error.

    Example:
        >>> middleware = ErrorHandlingMiddleware(include_traceback=True)
        >>> mcp.add_middleware(middleware)
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include full traceback in logs.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._error_counts: dict[str, int] = defaultdict(int)

    def get_error_stats(self) -> dict[str, int]:
        """Get error statistics by exception type."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        """Reset error statistics."""
        self._error_counts.clear()

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log errors raised while handling a message and re-raise them."""
        try:
            return await call_next(context)

        except Exception as e:
            error_type = type(e).__name__
            self._error_counts[error_type] += 1

            if isinstance(e, ToolError):
                self.logger.warning(
                    "Tool failure in %s: %s",
                    context.method,
                    str(e).splitlines()[0] if str(e) else error_type,
                )
            elif self.include_traceback:
                self.logger.error(
                    "Error in %s: %s: %s\n%s",
                    context.method,
                    error_type,
                    str(e),
                    traceback.format_exc(),
                )
            else:
                self.logger.error(
                    "Error in %s: %s: %s",
                    context.method,
                    error_type,
                    str(e),
                )

            raise
