"""
Query intent classification.

The search tool derives two intents from the free-text query:

- ``filter``: decides the shape of the SQL text filter. Only top-rated and
  author queries change it; recommendation queries search like generic ones.
- ``prompt``: decides which prompt template the LLM receives. Here
  recommendation queries get their own template and win over author ones.

Both are computed from ordered rule lists, first match wins. A query such as
"recommend books by Le Guin" therefore filters on the author column but is
answered with the recommendation template.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


class SearchIntent(StrEnum):
    """What the user is asking the book search for."""

    TOP_RATED = "top_rated"
    RECOMMENDATION = "recommendation"
    AUTHOR = "author"
    GENERIC = "generic"


def is_top_rated_query(text: str) -> bool:
    return "top" in text and ("rated" in text or "rating" in text)


def is_recommendation_query(text: str) -> bool:
    return "recommend" in text or "similar to" in text or "like" in text


def is_author_query(text: str) -> bool:
    return "by" in text or "author" in text


IntentRule = tuple[Callable[[str], bool], SearchIntent]

FILTER_RULES: tuple[IntentRule, ...] = (
    (is_top_rated_query, SearchIntent.TOP_RATED),
    (is_author_query, SearchIntent.AUTHOR),
)

PROMPT_RULES: tuple[IntentRule, ...] = (
    (is_top_rated_query, SearchIntent.TOP_RATED),
    (is_recommendation_query, SearchIntent.RECOMMENDATION),
    (is_author_query, SearchIntent.AUTHOR),
)


def match_intent(query: str, rules: tuple[IntentRule, ...]) -> SearchIntent:
    """Return the intent of the first rule matching ``query`` (case-insensitive)."""
    text = query.lower()
    for predicate, intent in rules:
        if predicate(text):
            return intent
    return SearchIntent.GENERIC


@dataclass(frozen=True)
class QueryIntent:
    """Intents derived from a single search query."""

    filter: SearchIntent
    prompt: SearchIntent


def classify_query(query: str) -> QueryIntent:
    return QueryIntent(
        filter=match_intent(query, FILTER_RULES),
        prompt=match_intent(query, PROMPT_RULES),
    )
