"""
Book search tool for the Bookshelf MCP Server.

searchBooks answers a free-text question about the catalog in one linear pass:

1. Validate the arguments against ``SearchBooksInput``
2. Classify the query (filter intent and prompt intent)
3. Build a parameterised SELECT against ``btable``
4. Fetch the rows from the book store
5. Render the rows into the prompt template for the prompt intent
6. Ask the inference client for a summary and return its text

The store and the inference client are handed to ``SearchBooksTool`` when
the server is built. Failures in either are not caught here; fastmcp turns
them into an error result for the calling client.
"""

import logging
from typing import Any

from ..database.book_store import BookStore
from ..database.query_builder import build_search_query
from ..inference.client import InferenceClient, generate_text
from ..models.intent import classify_query
from ..models.search import SearchBooksInput
from ..prompts.search_prompts import build_messages, build_search_prompt, format_book_context

logger = logging.getLogger(__name__)


class SearchBooksTool:
    """Handler for the searchBooks tool bound to its collaborators."""

    def __init__(self, store: BookStore, inference: InferenceClient):
        self.store = store
        self.inference = inference

    async def search(self, arguments: dict[str, Any]) -> str:
        """
        Handle a searchBooks call.

        Args:
            arguments: Raw arguments from the MCP tools/call request

        Returns:
            The model's answer, as text

        Raises:
            pydantic.ValidationError: If the arguments do not match the schema
        """
        params = SearchBooksInput.model_validate(arguments)
        intent = classify_query(params.query)

        query = build_search_query(params, intent)
        logger.debug("SQL Query: %s", query.sql)
        logger.debug("Params: %s", query.params)

        books = self.store.fetch_books(query)

        context = format_book_context(books)
        prompt = build_search_prompt(intent.prompt, params.query, params.limit, context)

        logger.info(
            "searchBooks matched %d book(s) (filter=%s, prompt=%s)",
            len(books),
            intent.filter,
            intent.prompt,
        )

        return await generate_text(self.inference, build_messages(prompt))


def search_books_tool(store: BookStore, inference: InferenceClient) -> dict[str, Any]:
    """Tool metadata for server registration."""
    return {
        "name": "searchBooks",
        "description": (
            "Search the book catalog and get an AI-written answer. Understands "
            "'top rated', recommendation ('recommend', 'similar to', 'like') and "
            "author ('by', 'author') questions. Supports rating bounds, a shelf "
            "filter, sorting and a result limit."
        ),
        "inputSchema": SearchBooksInput.model_json_schema(by_alias=True),
        "inputModel": SearchBooksInput,
        "handler": SearchBooksTool(store, inference).search,
    }
