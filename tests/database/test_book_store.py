"""Tests for catalog reads against a seeded SQLite database."""

import pytest
from sqlalchemy.exc import OperationalError

from bookshelf_mcp.database.book_store import BookStore
from bookshelf_mcp.database.query_builder import BookQuery, build_search_query
from bookshelf_mcp.database.session import DatabaseManager
from bookshelf_mcp.models.search import BookRow, SearchBooksInput


def search(store: BookStore, **kwargs) -> list[BookRow]:
    return store.fetch_books(build_search_query(SearchBooksInput(**kwargs)))


class TestFetchBooks:
    def test_author_search(self, book_store):
        books = search(book_store, query="Tolkien author")

        # "Tolkien author" is matched as a whole against the author column
        assert books == []

    def test_generic_search_matches_author(self, book_store):
        books = search(book_store, query="Tolkien", sortBy="title")

        assert [book.title for book in books] == ["The Fellowship of the Ring", "The Hobbit"]
        assert all(book.author == "J.R.R. Tolkien" for book in books)

    def test_top_rated_orders_by_rating(self, book_store):
        books = search(book_store, query="top rated", limit=3)

        assert [book.avg_rating for book in books] == [4.36, 4.28, 4.27]

    def test_shelf_and_rating_filters(self, book_store):
        books = search(book_store, query="top rated", minRating=4, bookshelf="fantasy")

        assert {book.title for book in books} == {"The Hobbit", "The Fellowship of the Ring"}

    def test_generic_search_matches_shelves(self, book_store):
        books = search(book_store, query="romance", sortBy="author")

        assert [book.author for book in books] == ["Jane Austen", "Stephenie Meyer"]

    def test_rows_are_book_models(self, book_store):
        books = search(book_store, query="Dune")

        assert books == [
            BookRow(
                title="Dune",
                author="Frank Herbert",
                avg_rating=4.25,
                bookshelves="science-fiction,classics",
            )
        ]

    def test_ratings_keep_stored_type(self, untyped_book_store):
        books = search(untyped_book_store, query="classics", sortBy="title")

        assert [book.avg_rating for book in books] == [4, "n/a"]
        assert type(books[0].avg_rating) is int

    def test_missing_table_propagates(self, tmp_path):
        store = BookStore.from_url(f"sqlite:///{tmp_path / 'empty.db'}")

        with pytest.raises(OperationalError):
            store.fetch_books(BookQuery(sql="SELECT title FROM btable", params=()))


class TestDatabaseManager:
    def test_init_and_verify(self, tmp_path):
        manager = DatabaseManager(f"sqlite:///{tmp_path / 'catalog.db'}")
        manager.init_database()

        assert manager.verify_connection() is True
        store = BookStore(manager.engine)
        assert store.fetch_books(build_search_query(SearchBooksInput(query="top rated"))) == []

        manager.close()
