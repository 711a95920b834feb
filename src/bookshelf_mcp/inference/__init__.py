"""Hosted text-generation clients used by the searchBooks tool."""

from .client import (
    ChatMessage,
    InferenceClient,
    WorkersAIClient,
    generate_text,
    normalize_response,
)

__all__ = [
    "ChatMessage",
    "InferenceClient",
    "WorkersAIClient",
    "generate_text",
    "normalize_response",
]
