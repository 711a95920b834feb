"""HTTP entry point for the Bookshelf MCP Server.

One ASGI application serves both remote MCP transports:

- ``/sse`` and ``/sse/message``: the SSE transport (event stream plus the
  endpoint clients POST their messages to)
- ``/mcp``: the streamable HTTP transport
- anything else: ``404 Not found``

Session handling belongs to fastmcp; this module only routes by path.
"""

import logging

from fastmcp import FastMCP
from fastmcp.server.http import create_sse_app
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/message"
MCP_PATH = "/mcp"

SSE_PATHS = frozenset({SSE_PATH, SSE_MESSAGE_PATH})


class TransportRouter:
    """Dispatch requests to the SSE or streamable HTTP app by URL path."""

    def __init__(self, sse_app: ASGIApp, mcp_app: ASGIApp):
        self.sse_app = sse_app
        self.mcp_app = mcp_app

    def resolve(self, path: str) -> ASGIApp | None:
        """Return the app handling ``path``, or None when nothing does."""
        if path == f"{SSE_MESSAGE_PATH}/":
            # fastmcp announces the message endpoint with a trailing slash
            path = SSE_MESSAGE_PATH
        if path in SSE_PATHS:
            return self.sse_app
        if path == MCP_PATH:
            return self.mcp_app
        return None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            # The streamable HTTP session manager starts and stops with the app
            await self.mcp_app(scope, receive, send)
            return

        app = self.resolve(scope.get("path", ""))
        if app is None:
            logger.debug("No transport for path %s", scope.get("path"))
            app = PlainTextResponse("Not found", status_code=404)

        await app(scope, receive, send)


def build_http_app(mcp: FastMCP) -> TransportRouter:
    """Create the combined ASGI app for ``mcp``."""
    sse_app = create_sse_app(
        server=mcp,
        message_path=f"{SSE_MESSAGE_PATH}/",
        sse_path=SSE_PATH,
    )
    mcp_app = mcp.http_app(path=MCP_PATH, transport="streamable-http")
    return TransportRouter(sse_app=sse_app, mcp_app=mcp_app)
