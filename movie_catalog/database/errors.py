"""Data-access exception hierarchy.

Store-specific exceptions (SQLAlchemy / DBAPI) never reach callers of the
repositories: they are translated here and chained as ``__cause__``.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base exception for catalog persistence errors."""

    pass


class DatabaseConnectionError(CatalogError, ConnectionError):
    """Raised when the store is unreachable or misconfigured."""

    pass


class DataAccessError(CatalogError):
    """Raised when a statement fails (syntax, constraint, no rows affected)."""

    pass


@contextmanager
def translate_errors(message: str) -> Generator[None, None, None]:
    """Translate SQLAlchemy errors raised in the block into DataAccessError.

    Args:
        message: Context message carried by the raised DataAccessError.

    Raises:
        DataAccessError: If the block raises any SQLAlchemyError.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("%s: %s", message, e)
        raise DataAccessError(message) from e
