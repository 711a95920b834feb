"""Test configuration and fixtures for the Bookshelf MCP Server.

1. Isolated test databases - each test gets its own seeded SQLite catalog
2. Configuration overrides - ``ServerConfig`` instances with reset singletons
3. Fake inference - records the conversation instead of calling a model
4. In-memory MCP server - tools wired to the fixtures above
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from bookshelf_mcp.config import ServerConfig, reset_config
from bookshelf_mcp.database.book_store import BookStore
from bookshelf_mcp.database.schema import books_table, metadata
from bookshelf_mcp.inference.client import ChatMessage
from bookshelf_mcp.server import create_server

SAMPLE_BOOKS = [
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "avg_rating": 4.27,
        "bookshelves": "fantasy,classics,adventure",
    },
    {
        "title": "The Fellowship of the Ring",
        "author": "J.R.R. Tolkien",
        "avg_rating": 4.36,
        "bookshelves": "fantasy,epic,classics",
    },
    {
        "title": "A Wizard of Earthsea",
        "author": "Ursula K. Le Guin",
        "avg_rating": 3.99,
        "bookshelves": "fantasy,young-adult",
    },
    {
        "title": "Dune",
        "author": "Frank Herbert",
        "avg_rating": 4.25,
        "bookshelves": "science-fiction,classics",
    },
    {
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "avg_rating": 4.28,
        "bookshelves": "classics,romance",
    },
    {
        "title": "Twilight",
        "author": "Stephenie Meyer",
        "avg_rating": 3.59,
        "bookshelves": "young-adult,romance,fantasy",
    },
]


class FakeInferenceClient:
    """Stands in for the hosted model and remembers what it was asked."""

    def __init__(self, response: Any = "Here are your books."):
        self.response = response
        self.calls: list[list[ChatMessage]] = []

    async def run(self, messages: list[ChatMessage]) -> Any:
        self.calls.append(messages)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def last_prompt(self) -> str:
        return self.calls[-1][-1].content


# === Test Database Fixtures ===


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for each test."""
    return tmp_path / "test_books.db"


@pytest.fixture
def test_database_url(test_db_path: Path) -> str:
    return f"sqlite:///{test_db_path}"


@pytest.fixture
def catalog_engine(test_database_url: str) -> Generator[Engine, None, None]:
    """SQLite engine with the btable schema and the sample books."""
    engine = create_engine(
        test_database_url,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    metadata.create_all(bind=engine)
    with engine.begin() as conn:
        conn.execute(insert(books_table), SAMPLE_BOOKS)

    yield engine

    engine.dispose()


@pytest.fixture
def book_store(catalog_engine: Engine) -> BookStore:
    return BookStore(catalog_engine)


@pytest.fixture
def untyped_book_store(tmp_path: Path) -> Generator[BookStore, None, None]:
    """Catalog whose avg_rating column has no declared type, so values keep their storage class."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'untyped_books.db'}",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        conn.exec_driver_sql(
            "CREATE TABLE btable (title TEXT, author TEXT, avg_rating, bookshelves TEXT)"
        )
        conn.exec_driver_sql(
            "INSERT INTO btable VALUES (?, ?, ?, ?), (?, ?, ?, ?)",
            ("Emma", "Jane Austen", 4, "classics", "Unrated", "Anonymous", "n/a", "classics"),
        )

    yield BookStore(engine)

    engine.dispose()


@pytest.fixture
def fake_inference() -> FakeInferenceClient:
    return FakeInferenceClient()


# === Configuration Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide a clean environment without BOOKSHELF_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("BOOKSHELF_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_config(test_db_path: Path, clean_env) -> Generator[ServerConfig, None, None]:
    """Provide a test-specific server configuration."""
    reset_config()

    config = ServerConfig(
        server_name="test-bookshelf",
        server_version="0.0.1-test",
        database_path=test_db_path,
        debug=True,
        log_level="DEBUG",
    )

    yield config

    reset_config()


# === MCP Server Fixtures ===


@pytest.fixture
def mcp_server(test_config, book_store, fake_inference):
    """FastMCP server wired to the test catalog and the fake model."""
    return create_server(test_config, store=book_store, inference=fake_inference)
