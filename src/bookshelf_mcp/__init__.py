"""
Bookshelf MCP Server Package.

An MCP (Model Context Protocol) server exposing arithmetic tools and an
LLM-backed search over a SQLite book catalog.

Key Components:
- models: Pydantic models and query intent classification
- database: catalog schema, SQL construction and reads
- prompts: prompt templates for the search answers
- inference: hosted text-generation client
- tools: MCP tools (add, calculate, searchBooks)
- transport: HTTP routing for the SSE and streamable HTTP transports
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
