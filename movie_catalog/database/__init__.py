"""Database package for the movie catalog.

Provides the connection provider, ORM models, repositories and the
data-access exception hierarchy.

Usage:
    from movie_catalog.database import get_database, GenreRepository

    genres = GenreRepository(get_database()).list_genres()
"""

from movie_catalog.database.connection import (
    DatabaseConnection,
    close_database,
    get_database,
)
from movie_catalog.database.errors import (
    CatalogError,
    DataAccessError,
    DatabaseConnectionError,
)
from movie_catalog.database.models import Base, Genre, Movie
from movie_catalog.database.repositories import (
    BaseRepository,
    GenreRepository,
    MovieRepository,
)

__all__ = [
    # Connection
    "DatabaseConnection",
    "get_database",
    "close_database",
    # Errors
    "CatalogError",
    "DatabaseConnectionError",
    "DataAccessError",
    # Models
    "Base",
    "Genre",
    "Movie",
    # Repositories
    "BaseRepository",
    "GenreRepository",
    "MovieRepository",
]
