"""Tests for ORM models and the CalendarDate column type."""

from datetime import date, datetime

import pytest
from sqlalchemy import DateTime
from sqlalchemy.dialects import sqlite

from movie_catalog.database.models import Base, CalendarDate, Genre, Movie


class TestCalendarDate:
    @staticmethod
    def test_bind_date_at_midnight() -> None:
        value = CalendarDate().process_bind_param(date(2024, 3, 15), sqlite.dialect())
        assert value == datetime(2024, 3, 15, 0, 0)

    @staticmethod
    def test_bind_datetime_unchanged() -> None:
        moment = datetime(2024, 3, 15, 18, 30)
        assert CalendarDate().process_bind_param(moment, sqlite.dialect()) == moment

    @staticmethod
    def test_bind_none() -> None:
        assert CalendarDate().process_bind_param(None, sqlite.dialect()) is None

    @staticmethod
    def test_result_truncates_time_of_day() -> None:
        value = CalendarDate().process_result_value(
            datetime(2015, 11, 26, 12, 0), sqlite.dialect()
        )
        assert value == date(2015, 11, 26)
        assert type(value) is date

    @staticmethod
    def test_result_none() -> None:
        assert CalendarDate().process_result_value(None, sqlite.dialect()) is None

    @staticmethod
    def test_result_from_epoch_millis() -> None:
        value = CalendarDate().process_result_value(1448539200000, sqlite.dialect())
        assert value == date(2015, 11, 26)

    @staticmethod
    def test_result_from_iso_string() -> None:
        value = CalendarDate().process_result_value(
            "2015-11-26 12:00:00.000000", sqlite.dialect()
        )
        assert value == date(2015, 11, 26)

    @staticmethod
    def test_result_malformed_string_raises() -> None:
        with pytest.raises(ValueError):
            CalendarDate().process_result_value("not a date", sqlite.dialect())

    @staticmethod
    def test_result_unsupported_type_raises() -> None:
        with pytest.raises(ValueError, match="Unsupported stored date value"):
            CalendarDate().process_result_value(b"\x00", sqlite.dialect())

    @staticmethod
    def test_sqlite_impl_returns_raw_values() -> None:
        dialect = sqlite.dialect()
        impl = CalendarDate().load_dialect_impl(dialect)
        assert isinstance(impl, DateTime)
        assert impl.result_processor(dialect, None) is None

    @staticmethod
    def test_impl_is_datetime() -> None:
        assert isinstance(CalendarDate().impl, DateTime)


class TestSchema:
    @staticmethod
    def test_tables_registered() -> None:
        assert set(Base.metadata.tables) == {"genre", "movie"}

    @staticmethod
    def test_genre_columns() -> None:
        table = Base.metadata.tables["genre"]
        assert [c.name for c in table.columns] == ["idgenre", "name"]
        assert table.c.name.nullable is False

    @staticmethod
    def test_movie_columns() -> None:
        table = Base.metadata.tables["movie"]
        assert [c.name for c in table.columns] == [
            "idmovie",
            "title",
            "release_date",
            "genre_id",
            "duration",
            "director",
            "summary",
        ]
        nullable = {c.name: c.nullable for c in table.columns}
        assert nullable["title"] is False
        assert nullable["director"] is False
        assert nullable["genre_id"] is False
        assert nullable["release_date"] is True
        assert nullable["duration"] is True
        assert nullable["summary"] is True

    @staticmethod
    def test_movie_references_genre() -> None:
        table = Base.metadata.tables["movie"]
        (fk,) = table.c.genre_id.foreign_keys
        assert fk.target_fullname == "genre.idgenre"


class TestEntities:
    @staticmethod
    def test_new_entities_have_no_id() -> None:
        assert Genre(name="Drama").id is None
        assert Movie(title="t", director="d").id is None

    @staticmethod
    def test_repr() -> None:
        assert repr(Genre(id=1, name="Drama")) == "<Genre(id=1, name='Drama')>"
        assert repr(Movie(id=4, title="Title")) == "<Movie(id=4, title='Title')>"
