"""Database repositories for the movie catalog.

Usage:
    from movie_catalog.database import get_database
    from movie_catalog.database.repositories import MovieRepository

    movies = MovieRepository(get_database()).list_movies_by_genre("Comedy")
"""

from movie_catalog.database.repositories.base import BaseRepository
from movie_catalog.database.repositories.genre import GenreRepository
from movie_catalog.database.repositories.movie import MovieRepository

__all__ = [
    "BaseRepository",
    "GenreRepository",
    "MovieRepository",
]
