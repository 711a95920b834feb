"""
Read access to the ``btable`` book catalog.

``BookStore`` executes queries produced by the query builder with their
bound parameters and maps rows onto ``BookRow`` models. Database errors are
not caught here; they travel up to the tool call and fastmcp reports them
to the client.
"""

import logging

from sqlalchemy.engine import Engine

from ..models.search import BookRow
from .query_builder import BookQuery
from .session import get_db_manager

logger = logging.getLogger(__name__)


class BookStore:
    """Executes catalog queries against a SQLAlchemy engine."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, database_url: str) -> "BookStore":
        return cls(get_db_manager(database_url).engine)

    def fetch_books(self, query: BookQuery) -> list[BookRow]:
        """
        Run ``query`` and return the matching books.

        The SQL uses qmark placeholders, so it is handed to the DBAPI driver
        as-is with the parameters bound positionally.
        """
        with self.engine.connect() as conn:
            result = conn.exec_driver_sql(query.sql, query.params)
            rows = [BookRow.model_validate(dict(row)) for row in result.mappings()]

        logger.debug("Catalog query returned %d row(s)", len(rows))
        return rows
