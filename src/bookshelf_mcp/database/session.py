"""
Database connection management for the Bookshelf MCP Server.

The book catalog is read-only from the server's point of view, so there is
no session or transaction handling here, only an engine per database URL:

1. SQLite engines share a single connection (StaticPool) across the event loop
2. Other databases get a small pre-pinged connection pool
3. ``init_database`` creates the ``btable`` schema for tests and local use
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from .schema import metadata

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Owns the SQLAlchemy engine for one database URL.

    The engine is created lazily on first use and disposed by ``close``.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self._engine: Engine | None = None

    @property
    def engine(self) -> Engine:
        """Get or create the database engine."""
        if self._engine is None:
            if self.database_url.startswith("sqlite"):
                self._engine = create_engine(
                    self.database_url,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                    echo=False,
                )
            else:
                self._engine = create_engine(
                    self.database_url,
                    pool_size=5,
                    max_overflow=10,
                    pool_pre_ping=True,
                    echo=False,
                )

            logger.info("Database engine created: %s", self._engine.url)

        return self._engine

    def init_database(self, drop_existing: bool = False) -> None:
        """
        Create the ``btable`` schema.

        Args:
            drop_existing: If True, drop the table before creating it
        """
        if drop_existing:
            logger.warning("Dropping existing book table...")
            metadata.drop_all(bind=self.engine)

        metadata.create_all(bind=self.engine)
        logger.info("Database initialization complete")

    def verify_connection(self) -> bool:
        """
        Verify the database connection is working.

        Returns:
            True if connection is successful, False otherwise
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Database connection verified")
            return True
        except Exception:
            logger.exception("Database connection failed")
            return False

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine:
            self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None


_db_managers: dict[str, DatabaseManager] = {}


def get_db_manager(database_url: str) -> DatabaseManager:
    """Get the shared database manager for ``database_url``."""
    manager = _db_managers.get(database_url)
    if manager is None:
        manager = DatabaseManager(database_url)
        _db_managers[database_url] = manager
    return manager
