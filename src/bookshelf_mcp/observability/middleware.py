"""FastMCP middleware for instrumentation."""

from typing import Any

from fastmcp.server.middleware import Middleware, MiddlewareContext

from . import is_enabled, logfire


class MCPInstrumentationMiddleware(Middleware):
    """Middleware to trace all MCP protocol operations."""

    async def on_message(self, context: MiddlewareContext, call_next) -> Any:
        """Wrap each MCP message in a Logfire span once observability is configured."""
        if not is_enabled():
            return await call_next(context)

        method = context.method or "unknown"
        operation_type = self._get_operation_type(method)

        with logfire.span(
            "MCP {mcp_method}",
            mcp_method=method,
            mcp_operation_type=operation_type,
            mcp_source=getattr(context, "source", "unknown"),
        ) as span:
            name = getattr(context.message, "name", None)
            if name is not None:
                span.set_attribute("tool.name", name)

            try:
                result = await call_next(context)
            except Exception as e:
                span.set_attribute("mcp.status", "error")
                span.set_attribute("error.type", type(e).__name__)
                span.set_attribute("error.message", str(e))
                raise

            span.set_attribute("mcp.status", "success")
            return result

    def _get_operation_type(self, method: str) -> str:
        """Categorize MCP method into operation type."""
        if method.startswith("tools/"):
            return "tool"
        if method.startswith("resources/"):
            return "resource"
        if method.startswith("prompts/"):
            return "prompt"
        return "system"
