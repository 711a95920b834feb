"""Bookshelf MCP Server - FastMCP Implementation

Exposes three tools to MCP clients:
- add: sum of two numbers
- calculate: add, subtract, multiply or divide two numbers
- searchBooks: catalog search summarised by a hosted language model

Clients connect over stdio, or over HTTP where ``/sse`` serves the SSE
transport and ``/mcp`` the streamable HTTP transport.
"""

import logging
import signal
import sys
from typing import Any

import uvicorn
from fastmcp import FastMCP

from .config import ServerConfig, get_config
from .database.book_store import BookStore
from .database.session import get_db_manager
from .inference.client import InferenceClient, WorkersAIClient
from .observability import initialize_observability
from .observability.middleware import MCPInstrumentationMiddleware
from .tools import build_tools, register_tools
from .transport import build_http_app

# Initialize logging - stderr for logs, stdout for MCP protocol
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Bookshelf MCP Server - a calculator and a book catalog assistant. "
    "Use add or calculate for arithmetic. Use searchBooks to ask about books: "
    "top rated titles, recommendations, books by an author or any free-text "
    "search, optionally filtered by rating range and bookshelf."
)


def create_server(
    config: ServerConfig | None = None,
    store: BookStore | None = None,
    inference: InferenceClient | None = None,
) -> FastMCP:
    """Build the FastMCP server with its tools.

    Collaborators that are not passed in are created from ``config``.
    """
    config = config or get_config()
    store = store or BookStore.from_url(config.get_database_url())
    inference = inference or WorkersAIClient.from_config(config)

    mcp = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=INSTRUCTIONS,
    )
    mcp.add_middleware(MCPInstrumentationMiddleware())

    register_tools(mcp, build_tools(store, inference))
    return mcp


def configure_logging(config: ServerConfig) -> None:
    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled - verbose protocol logging active")
    else:
        logging.getLogger().setLevel(config.log_level)
        logging.getLogger("fastmcp").setLevel(logging.WARNING)


def install_signal_handlers() -> None:
    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)


def run_stdio_server(mcp: FastMCP, config: ServerConfig) -> None:
    """Run the MCP server using stdio transport.

    Stdin receives JSON-RPC requests, stdout sends responses.
    """
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)
    install_signal_handlers()

    try:
        logger.info("MCP Server ready and waiting for connections...")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


def run_http_server(mcp: FastMCP, config: ServerConfig) -> None:
    """Serve the SSE and streamable HTTP transports with uvicorn."""
    logger.info(
        "Starting %s v%s on http://%s:%d (/sse, /mcp)",
        config.server_name,
        config.server_version,
        config.http_host,
        config.http_port,
    )

    try:
        uvicorn.run(
            build_http_app(mcp),
            host=config.http_host,
            port=config.http_port,
            log_level=config.log_level.lower(),
        )
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


def main() -> None:
    """Main entry point for the MCP server (``bookshelf-mcp``)."""
    try:
        config = get_config()
        configure_logging(config)
        initialize_observability()

        logger.info("=" * 60)
        logger.info("Bookshelf MCP Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Transport: %s", config.transport)
        logger.info("Debug Mode: %s", config.debug)
        logger.info("=" * 60)

        if not get_db_manager(config.get_database_url()).verify_connection():
            logger.warning("Book catalog unreachable; searchBooks calls will fail")

        inference = WorkersAIClient.from_config(config)
        if not inference.configured:
            logger.warning("Inference credentials not set; searchBooks calls will fail")

        mcp = create_server(config, inference=inference)

        if config.transport == "stdio":
            run_stdio_server(mcp, config)
        elif config.transport == "streamable_http":
            run_http_server(mcp, config)
        else:
            logger.error("Unsupported transport: %s", config.transport)
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
