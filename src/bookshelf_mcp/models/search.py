"""
Search models for the Bookshelf MCP Server.

``SearchBooksInput`` is the input schema of the ``searchBooks`` tool. Field
names are snake_case in Python and camelCase on the wire (``sortBy``,
``minRating``, ``maxRating``); both spellings are accepted when validating.

``BookRow`` is the read-only projection of a ``btable`` row. The catalog is
owned by an external store, so every column may come back NULL.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class SortKey(StrEnum):
    """Columns the search results can be ordered by."""

    AVG_RATING = "avg_rating"
    TITLE = "title"
    AUTHOR = "author"

    @property
    def descending(self) -> bool:
        """Ratings sort highest first, text columns alphabetically."""
        return self is SortKey.AVG_RATING


class SearchBooksInput(BaseModel):
    """Input schema for the searchBooks tool."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    query: str = Field(
        ...,
        description="Free-text question or search term",
        examples=["top rated books", "books by Tolkien", "recommend something like Dune"],
    )

    sort_by: SortKey = Field(
        default=SortKey.AVG_RATING,
        alias="sortBy",
        description="Column to order results by",
    )

    min_rating: float | None = Field(
        default=None,
        alias="minRating",
        description="Lowest average rating to include",
        strict=True,
        ge=0,
        le=5,
    )

    max_rating: float | None = Field(
        default=None,
        alias="maxRating",
        description="Highest average rating to include",
        strict=True,
        ge=0,
        le=5,
    )

    limit: int = Field(
        default=5,
        description="Maximum number of books to return",
        strict=True,
        ge=1,
        le=20,
    )

    bookshelf: str | None = Field(
        default=None,
        description="Only include books tagged with this shelf",
        examples=["fantasy", "classics", "to-read"],
    )


class BookRow(BaseModel):
    """A single book as returned from the ``btable`` catalog."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    title: str | None = None
    author: str | None = None
    # Kept as stored: the external catalog may hold integers or text here
    avg_rating: int | float | str | None = None
    bookshelves: str | None = None
