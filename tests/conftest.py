"""Shared pytest fixtures: temporary SQLite catalog databases."""

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import text

from movie_catalog.database.connection import DatabaseConnection
from movie_catalog.database.models import Base
from movie_catalog.database.repositories import GenreRepository, MovieRepository

FIXTURE_STATEMENTS = [
    "INSERT INTO genre(idgenre, name) VALUES (1, 'Drama')",
    "INSERT INTO genre(idgenre, name) VALUES (2, 'Comedy')",
    "INSERT INTO movie(idmovie, title, release_date, genre_id, duration, director, summary) "
    "VALUES (1, 'Title 1', '2015-11-26 12:00:00.000', 1, 120, 'director 1', "
    "'summary of the first movie')",
    "INSERT INTO movie(idmovie, title, release_date, genre_id, duration, director, summary) "
    "VALUES (2, 'My Title 2', '2015-11-14 12:00:00.000', 2, 114, 'director 2', "
    "'summary of the second movie')",
    "INSERT INTO movie(idmovie, title, release_date, genre_id, duration, director, summary) "
    "VALUES (3, 'Third title', '2015-12-12 12:00:00.000', 2, 176, 'director 3', "
    "'summary of the third movie')",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the tests."""
    for var in (
        "DATABASE_URL",
        "CATALOG_DB_PATH",
        "DB_ECHO",
        "DB_TIMEOUT",
        "LOG_LEVEL",
        "LOG_DIR",
        "ENVIRONMENT",
        "DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path of the temporary SQLite file."""
    return tmp_path / "catalog.db"


@pytest.fixture
def empty_database(db_path: Path) -> Generator[DatabaseConnection, None, None]:
    """Connection provider on a database with the schema and no rows."""
    db = DatabaseConnection(url=f"sqlite:///{db_path}")
    Base.metadata.create_all(db.engine)
    yield db
    db.dispose()


@pytest.fixture
def database(empty_database: DatabaseConnection) -> DatabaseConnection:
    """Connection provider on a database holding the reference catalog.

    Genres {1: Drama, 2: Comedy}; three movies, two of them comedies.
    """
    with empty_database.engine.begin() as conn:
        for statement in FIXTURE_STATEMENTS:
            conn.execute(text(statement))
    return empty_database


@pytest.fixture
def genre_repository(database: DatabaseConnection) -> GenreRepository:
    return GenreRepository(database)


@pytest.fixture
def movie_repository(database: DatabaseConnection) -> MovieRepository:
    return MovieRepository(database)
