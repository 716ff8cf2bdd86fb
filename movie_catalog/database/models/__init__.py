"""SQLAlchemy ORM models for the movie catalog.

Usage:
    from movie_catalog.database.models import Base, Genre, Movie

Tables:
    - genre: Genre reference data
    - movie: Catalog entries, many-to-one to genre
"""

from movie_catalog.database.models.base import Base, CalendarDate
from movie_catalog.database.models.genre import Genre
from movie_catalog.database.models.movie import Movie

__all__ = [
    "Base",
    "CalendarDate",
    "Genre",
    "Movie",
]
