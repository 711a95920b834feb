"""Book Search Prompts - LLM messages built from catalog rows

The searchBooks tool hands the rows it found to a hosted model together
with instructions that depend on the prompt intent of the query:

- top rated: list the books ordered by rating
- recommendation: explain why each book fits the query
- author: list the author's books with rating and shelf
- generic: summarise the matches, highlighting the best rated
"""

from collections.abc import Iterable

from ..inference.client import ChatMessage
from ..models.intent import SearchIntent
from ..models.search import BookRow
from ..numbers import format_number

SYSTEM_PROMPT = (
    "You are a helpful assistant that provides detailed information about books. "
    "Focus on providing comprehensive summaries that include title, author, "
    "average rating, and relevant context."
)


def format_rating(rating: int | float | str | None) -> str:
    if isinstance(rating, int | float):
        return format_number(rating)
    return str(rating)


def format_book(book: BookRow) -> str:
    return (
        f"Title: {book.title}\n"
        f"Author: {book.author}\n"
        f"Rating: {format_rating(book.avg_rating)}\n"
        f"Bookshelf: {book.bookshelves}"
    )


def format_book_context(books: Iterable[BookRow]) -> str:
    """Render rows as four-line blocks separated by a blank line.

    An empty result set renders as an empty string.
    """
    return "\n\n".join(format_book(book) for book in books)


def build_search_prompt(intent: SearchIntent, query: str, limit: int, context: str) -> str:
    """Select and fill the prompt template for ``intent``."""
    if intent is SearchIntent.TOP_RATED:
        return f"""Here are the top {limit} highest rated books:
{context}

Please list these books in order of their average ratings, showing the title, author, and rating for each."""

    if intent is SearchIntent.RECOMMENDATION:
        return f"""Based on the search query "{query}", here are some recommended books:
{context}

Please provide a brief summary of each book, focusing on why it might be similar to or recommended based on the query. Include the title, author, and average rating for each."""

    if intent is SearchIntent.AUTHOR:
        return f"""Here are books by the author matching "{query}":
{context}

Please list these books, showing the title, average rating, and bookshelf for each."""

    return f"""Here are some relevant books I found for "{query}":
{context}

Please provide a brief summary of each book, focusing on the title, author, and average rating. If there are multiple books, highlight the ones with the highest ratings."""


def build_messages(prompt: str) -> list[ChatMessage]:
    """System persona followed by the search prompt."""
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=prompt),
    ]
