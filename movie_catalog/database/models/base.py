"""SQLAlchemy declarative base and shared column types."""

from datetime import UTC, date, datetime, time
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.dialects import sqlite
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator, TypeEngine


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    All models should inherit from this class to be part
    of the same metadata and support table creation.
    """

    pass


class _RawSQLiteDateTime(sqlite.DATETIME):
    """SQLite DATETIME that returns the stored value unparsed."""

    def result_processor(self, dialect: Dialect, coltype: object) -> None:
        return None


class CalendarDate(TypeDecorator[date]):
    """Calendar date persisted in a DATETIME column.

    Dates are written at midnight. On read the time-of-day component is
    discarded. SQLite rows may hold ISO text or an integer of epoch
    milliseconds (as written by JDBC drivers); both are accepted.

    Raises:
        ValueError: On read, if the stored value is not a recognizable date.
    """

    impl = DateTime
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == "sqlite":
            return _RawSQLiteDateTime()
        return dialect.type_descriptor(DateTime())

    def process_bind_param(self, value: Any, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        if isinstance(value, datetime):
            return value
        return datetime.combine(value, time.min)

    def process_result_value(self, value: Any, dialect: Dialect) -> date | None:
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, int | float):
            try:
                return datetime.fromtimestamp(value / 1000, tz=UTC).date()
            except (OverflowError, OSError) as e:
                raise ValueError(f"Stored timestamp out of range: {value!r}") from e
        if isinstance(value, str):
            return datetime.fromisoformat(value).date()
        raise ValueError(f"Unsupported stored date value: {value!r}")
