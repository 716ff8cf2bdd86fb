"""Tests for the DatabaseConnection provider."""

from pathlib import Path

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from movie_catalog.database import connection as connection_module
from movie_catalog.database.connection import (
    DatabaseConnection,
    close_database,
    get_database,
)
from movie_catalog.database.errors import DatabaseConnectionError
from movie_catalog.settings import settings


def _genre_count(db: DatabaseConnection) -> int:
    with db.session() as session:
        return session.execute(text("SELECT COUNT(*) FROM genre")).scalar_one()


class TestSession:
    @staticmethod
    def test_yields_session(empty_database: DatabaseConnection) -> None:
        with empty_database.session() as session:
            assert isinstance(session, Session)
            assert session.execute(text("SELECT 1")).scalar() == 1

    @staticmethod
    def test_foreign_keys_enforced(empty_database: DatabaseConnection) -> None:
        with empty_database.session() as session:
            assert session.execute(text("PRAGMA foreign_keys")).scalar() == 1

    @staticmethod
    def test_commits_on_success(empty_database: DatabaseConnection) -> None:
        with empty_database.session() as session:
            session.execute(text("INSERT INTO genre(name) VALUES ('Drama')"))
        assert _genre_count(empty_database) == 1

    @staticmethod
    def test_rolls_back_on_error(empty_database: DatabaseConnection) -> None:
        with pytest.raises(RuntimeError):
            with empty_database.session() as session:
                session.execute(text("INSERT INTO genre(name) VALUES ('Drama')"))
                raise RuntimeError("boom")
        assert _genre_count(empty_database) == 0

    @staticmethod
    def test_unreachable_store(tmp_path: Path) -> None:
        db = DatabaseConnection(url=f"sqlite:///{tmp_path / 'missing' / 'catalog.db'}")
        with pytest.raises(DatabaseConnectionError) as exc_info:
            with db.session():
                pass
        assert isinstance(exc_info.value, ConnectionError)
        assert isinstance(exc_info.value.__cause__, OperationalError)


class TestEngine:
    @staticmethod
    @pytest.mark.parametrize(
        "url",
        ["sqlite://", "sqlite:///:memory:", "sqlite:///file:catalog?mode=memory&uri=true"],
    )
    def test_in_memory_sqlite_rejected(url: str) -> None:
        with pytest.raises(DatabaseConnectionError, match="In-memory"):
            DatabaseConnection(url=url)

    @staticmethod
    def test_no_pooling(empty_database: DatabaseConnection) -> None:
        assert isinstance(empty_database.engine.pool, NullPool)

    @staticmethod
    def test_safe_url(db_path: Path) -> None:
        db = DatabaseConnection(url=f"sqlite:///{db_path}")
        assert db.safe_url == f"sqlite:///{db_path}"

    @staticmethod
    def test_defaults_to_settings_url(
        monkeypatch: pytest.MonkeyPatch,
        db_path: Path,
    ) -> None:
        monkeypatch.setattr(settings.database, "url", f"sqlite:///{db_path}")
        db = DatabaseConnection()
        assert db.safe_url == f"sqlite:///{db_path}"


class TestCheckConnection:
    @staticmethod
    def test_reachable(empty_database: DatabaseConnection) -> None:
        assert empty_database.check_connection() is True

    @staticmethod
    def test_unreachable(tmp_path: Path) -> None:
        db = DatabaseConnection(url=f"sqlite:///{tmp_path / 'missing' / 'catalog.db'}")
        assert db.check_connection() is False


class TestModuleHelpers:
    @staticmethod
    def test_get_database_is_cached(
        monkeypatch: pytest.MonkeyPatch,
        db_path: Path,
    ) -> None:
        monkeypatch.setattr(connection_module, "_db", None)
        monkeypatch.setattr(settings.database, "url", f"sqlite:///{db_path}")

        first = get_database()
        assert get_database() is first

        close_database()
        assert connection_module._db is None
        assert get_database() is not first
        close_database()
