"""
Database package for the Bookshelf MCP Server.

This package provides:
- The ``btable`` schema definition (schema.py)
- Engine management (session.py)
- SQL construction for book searches (query_builder.py)
- Catalog reads (book_store.py)
"""

from .book_store import BookStore
from .query_builder import BASE_QUERY, BookQuery, build_search_query
from .schema import books_table, metadata
from .session import DatabaseManager, get_db_manager

__all__ = [
    "BASE_QUERY",
    "BookQuery",
    "BookStore",
    "DatabaseManager",
    "books_table",
    "build_search_query",
    "get_db_manager",
    "metadata",
]
