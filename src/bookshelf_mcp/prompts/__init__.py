"""Prompt construction for LLM calls made by the Bookshelf MCP Server."""

from .search_prompts import (
    SYSTEM_PROMPT,
    build_messages,
    build_search_prompt,
    format_book,
    format_book_context,
    format_rating,
)

__all__ = [
    "SYSTEM_PROMPT",
    "build_messages",
    "build_search_prompt",
    "format_book",
    "format_book_context",
    "format_rating",
]
