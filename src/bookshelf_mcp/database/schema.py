"""
SQLAlchemy schema for the book catalog.

The catalog is a single ``btable`` table owned by an external relational
store; this server only reads it. The table definition lives here so tests
and local development can create an identical SQLite database.
"""

from sqlalchemy import Column, Float, MetaData, Table, Text

metadata = MetaData()

books_table = Table(
    "btable",
    metadata,
    Column("title", Text),
    Column("author", Text),
    # Average reader rating between 0 and 5
    Column("avg_rating", Float),
    # Comma separated shelf tags, e.g. "fantasy,classics,to-read"
    Column("bookshelves", Text),
)

SELECT_COLUMNS = ("title", "author", "avg_rating", "bookshelves")
