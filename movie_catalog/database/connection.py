"""Connection provider for the catalog store with SQLAlchemy 2.0.

Every repository operation opens its own session through
``DatabaseConnection.session()``. The engine uses ``NullPool`` so the
underlying DBAPI connection is opened for the scope and closed with it.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, event, make_url, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from movie_catalog.database.errors import DatabaseConnectionError
from movie_catalog.settings import settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    """Turn on foreign-key enforcement for a new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseConnection:
    """Supplies scoped sessions against the configured catalog store.

    Attributes:
        _engine: SQLAlchemy engine (no pooling).
        _session_factory: Session factory bound to the engine.

    Example:
        ```python
        db = DatabaseConnection()
        with db.session() as session:
            session.execute(text("SELECT 1"))
        ```
    """

    def __init__(self, url: str | None = None, echo: bool | None = None) -> None:
        """Create the engine and session factory.

        Args:
            url: SQLAlchemy URL. Defaults to ``settings.database.sync_url``.
            echo: Log emitted SQL. Defaults to ``settings.database.echo``.
        """
        self._engine = self._create_engine(
            url or settings.database.sync_url,
            settings.database.echo if echo is None else echo,
        )
        self._session_factory = sessionmaker(
            bind=self._engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @staticmethod
    def _create_engine(url: str, echo: bool) -> Engine:
        """Create a non-pooling engine, with foreign keys enforced on SQLite.

        Args:
            url: SQLAlchemy connection URL.
            echo: Whether to log emitted SQL.

        Returns:
            Configured Engine.

        Raises:
            DatabaseConnectionError: For an in-memory SQLite URL, which would
                give every operation its own empty database.
        """
        parsed = make_url(url)
        is_sqlite = parsed.get_backend_name() == "sqlite"
        if is_sqlite and (
            parsed.database in (None, "", ":memory:")
            or parsed.query.get("mode") == "memory"
        ):
            raise DatabaseConnectionError(
                "In-memory SQLite databases are not supported; use a database file"
            )
        engine = create_engine(
            url,
            poolclass=NullPool,
            echo=echo,
            connect_args={"timeout": settings.database.timeout} if is_sqlite else {},
        )
        if is_sqlite:
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    @property
    def engine(self) -> Engine:
        """Get the underlying engine."""
        return self._engine

    @property
    def safe_url(self) -> str:
        """Connection URL with any password hidden."""
        return self._engine.url.render_as_string(hide_password=True)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a transactional session scope.

        The connection is acquired before yielding so an unreachable store
        fails here. Commits on success, rolls back on exception, and always
        closes the session (releasing the connection).

        Yields:
            SQLAlchemy Session instance.

        Raises:
            DatabaseConnectionError: If no connection can be established.
        """
        session = self._session_factory()
        try:
            session.connection()
        except SQLAlchemyError as e:
            session.close()
            logger.error("Cannot connect to %s: %s", self.safe_url, e)
            raise DatabaseConnectionError(
                f"Cannot connect to database at {self.safe_url}"
            ) from e

        logger.debug("Session opened on %s", self.safe_url)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            logger.debug("Session closed on %s", self.safe_url)

    def check_connection(self) -> bool:
        """Test database connectivity with a simple query.

        Returns:
            True if connection successful, False otherwise.
        """
        try:
            with self.session() as session:
                session.execute(text("SELECT 1"))
            return True
        except (DatabaseConnectionError, SQLAlchemyError):
            return False

    def dispose(self) -> None:
        """Release engine resources."""
        self._engine.dispose()


# =============================================================================
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# =============================================================================

_db: DatabaseConnection | None = None


def get_database() -> DatabaseConnection:
    """Get the shared DatabaseConnection built from settings.

    Creates the instance on first call (lazy initialization).
    """
    global _db  # noqa: PLW0603
    if _db is None:
        _db = DatabaseConnection()
    return _db


def close_database() -> None:
    """Dispose the shared DatabaseConnection, if any."""
    global _db  # noqa: PLW0603
    if _db is not None:
        _db.dispose()
        _db = None
