"""
SQL construction for the searchBooks tool.

Turns a validated ``SearchBooksInput`` into a qmark-parameterised SELECT
against ``btable``. Every value coming from the caller ends up in
``BookQuery.params``; the SQL text only ever contains fixed fragments, the
whitelisted sort column and the validated integer limit.
"""

from dataclasses import dataclass
from typing import Any

from ..models.intent import QueryIntent, SearchIntent, classify_query
from ..models.search import SearchBooksInput
from .schema import SELECT_COLUMNS

BASE_QUERY = f"SELECT {', '.join(SELECT_COLUMNS)} FROM btable"


@dataclass(frozen=True)
class BookQuery:
    """A SQL statement and its positional bound parameters."""

    sql: str
    params: tuple[Any, ...]


def _contains(value: str) -> str:
    return f"%{value}%"


def build_search_query(params: SearchBooksInput, intent: QueryIntent | None = None) -> BookQuery:
    """
    Build the catalog query for a search request.

    Args:
        params: Validated tool input
        intent: Pre-computed intent; classified from ``params.query`` when omitted

    Returns:
        The SQL text with ``?`` placeholders and the values to bind, in order
    """
    if intent is None:
        intent = classify_query(params.query)

    conditions: list[str] = []
    values: list[Any] = []

    # Top-rated queries rank the whole catalog, so the query text is not matched
    if intent.filter is SearchIntent.AUTHOR:
        conditions.append("author LIKE ?")
        values.append(_contains(params.query))
    elif intent.filter is not SearchIntent.TOP_RATED:
        conditions.append("(title LIKE ? OR author LIKE ? OR bookshelves LIKE ?)")
        values.extend([_contains(params.query)] * 3)

    if params.min_rating is not None:
        conditions.append("avg_rating >= ?")
        values.append(params.min_rating)

    if params.max_rating is not None:
        conditions.append("avg_rating <= ?")
        values.append(params.max_rating)

    if params.bookshelf:
        conditions.append("bookshelves LIKE ?")
        values.append(_contains(params.bookshelf))

    sql = BASE_QUERY
    if conditions:
        sql += " WHERE " + " AND ".join(conditions)

    direction = "DESC" if params.sort_by.descending else "ASC"
    sql += f" ORDER BY {params.sort_by.value} {direction}"
    sql += f" LIMIT {int(params.limit)}"

    return BookQuery(sql=sql, params=tuple(values))
