"""
Base repository with scoped data-access helpers.

Repositories hold a connection provider rather than a session: every
operation opens its own scope, runs one statement and releases the
connection before returning.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Generic, TypeVar

from sqlalchemy import Insert, Select
from sqlalchemy.orm import Session

from movie_catalog.database.connection import DatabaseConnection
from movie_catalog.database.errors import DataAccessError, translate_errors
from movie_catalog.database.models.base import Base

# Generic type variable bound to Base model
ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """Generic repository providing scoped read and insert helpers.

    Attributes:
        model: SQLAlchemy model class.
        database: Connection provider.
    """

    model: type[ModelT]

    def __init__(self, database: DatabaseConnection) -> None:
        """Initialize repository with a connection provider.

        Args:
            database: DatabaseConnection supplying one session per operation.
        """
        self._database = database

    @property
    def database(self) -> DatabaseConnection:
        """Get the connection provider."""
        return self._database

    @contextmanager
    def _scope(self, error_message: str) -> Generator[Session, None, None]:
        """Open a session whose store errors become DataAccessError.

        Args:
            error_message: Message for the DataAccessError on failure.

        Yields:
            Session valid for the duration of the block.

        Raises:
            DataAccessError: On a store error, or when a stored value cannot
                be mapped onto the entity.
        """
        with translate_errors(error_message), self._database.session() as session:
            try:
                yield session
            except (ValueError, TypeError) as e:
                logger.error("%s: cannot map row: %s", error_message, e)
                raise DataAccessError(f"{error_message}: cannot map row") from e

    def _fetch_all(self, stmt: Select, error_message: str) -> list[ModelT]:
        """Execute a select and return every mapped entity.

        Args:
            stmt: Select statement over ``self.model``.
            error_message: Message for the DataAccessError on failure.

        Returns:
            List of entity instances (possibly empty).
        """
        with self._scope(error_message) as session:
            entities = list(session.scalars(stmt).all())
        logger.debug("Fetched %d %s rows", len(entities), self.model.__tablename__)
        return entities

    def _fetch_first(self, stmt: Select, error_message: str) -> ModelT | None:
        """Execute a select and return the first mapped entity.

        Args:
            stmt: Select statement over ``self.model``.
            error_message: Message for the DataAccessError on failure.

        Returns:
            Entity instance or None if no row matched.
        """
        with self._scope(error_message) as session:
            return session.scalars(stmt).first()

    def _insert(self, stmt: Insert, error_message: str) -> int:
        """Execute a single-row insert and return the generated key.

        Args:
            stmt: Insert statement against ``self.model.__table__``.
            error_message: Message for the DataAccessError on failure.

        Returns:
            Store-generated primary key.

        Raises:
            DataAccessError: If the insert fails or affects no row.
        """
        with self._scope(error_message) as session:
            result = session.execute(stmt)
            if result.rowcount == 0:
                raise DataAccessError(f"{error_message}: no rows affected")
            new_id = result.inserted_primary_key[0]
        logger.debug("Inserted %s row %s", self.model.__tablename__, new_id)
        return new_id
