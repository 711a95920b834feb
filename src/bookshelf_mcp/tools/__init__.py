"""
MCP Tools for the Bookshelf Server.

- add / calculate: stateless arithmetic
- searchBooks: catalog search answered by a hosted language model

Tools are plain dicts (name, description, inputSchema, inputModel, handler) so the
server can register them in one loop.
"""

from typing import Any

from ..database.book_store import BookStore
from ..inference.client import InferenceClient
from .calculator import add_tool, calculate_tool
from .registry import HandlerTool, register_tools
from .search import SearchBooksTool, search_books_tool


def build_tools(store: BookStore, inference: InferenceClient) -> list[dict[str, Any]]:
    """All tools exposed by the server, with the search tool bound to its collaborators."""
    return [
        add_tool,
        calculate_tool,
        search_books_tool(store, inference),
    ]


__all__ = [
    "HandlerTool",
    "SearchBooksTool",
    "add_tool",
    "build_tools",
    "calculate_tool",
    "register_tools",
    "search_books_tool",
]
