"""
Bookshelf MCP Server Models.

Pydantic models and enums shared by the tools:
- SearchBooksInput / SortKey: searchBooks tool input
- BookRow: a row of the btable catalog
- SearchIntent / QueryIntent: classification of the free-text query
"""

from .intent import QueryIntent, SearchIntent, classify_query
from .search import BookRow, SearchBooksInput, SortKey

__all__ = [
    "BookRow",
    "QueryIntent",
    "SearchBooksInput",
    "SearchIntent",
    "SortKey",
    "classify_query",
]
