"""Movie model.

Catalog entry referencing exactly one Genre.
"""

from datetime import date

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_catalog.database.models.base import Base, CalendarDate
from movie_catalog.database.models.genre import Genre


class Movie(Base):
    """Movie table.

    The ``genre`` relationship is only populated by the repository's join
    query; it never lazy-loads.

    Attributes:
        id: Store-generated primary key (column ``idmovie``).
        title: Movie title.
        release_date: Release date, time-of-day discarded on read.
        genre_id: Foreign key to ``genre.idgenre``.
        duration: Runtime in minutes.
        director: Director name.
        summary: Free-text synopsis.
        genre: Hydrated Genre.
    """

    __tablename__ = "movie"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("idmovie", Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    release_date: Mapped[date | None] = mapped_column(CalendarDate, nullable=True)
    genre_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("genre.idgenre"),
        nullable=False,
    )
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)
    director: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)

    genre: Mapped[Genre] = relationship(Genre, lazy="raise")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Movie(id={self.id}, title='{self.title}')>"
