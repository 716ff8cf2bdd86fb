"""Movie repository.

Every read goes through one join query so each Movie comes back with its
Genre hydrated. Movies whose genre row is missing are dropped by the
inner join.
"""

from sqlalchemy import Select, insert, select
from sqlalchemy.orm import contains_eager

from movie_catalog.database.models.genre import Genre
from movie_catalog.database.models.movie import Movie
from movie_catalog.database.repositories.base import BaseRepository


def _hydrated_movies() -> Select[tuple[Movie]]:
    """Select movies inner-joined with their genre, ordered by identifier."""
    return (
        select(Movie)
        .join(Movie.genre)
        .options(contains_eager(Movie.genre))
        .order_by(Movie.id)
    )


class MovieRepository(BaseRepository[Movie]):
    """Repository for Movie entity operations."""

    model = Movie

    def list_movies(self) -> list[Movie]:
        """Get all movies with their genre.

        Returns:
            List of movies, empty if none.
        """
        return self._fetch_all(_hydrated_movies(), "Error listing movies")

    def list_movies_by_genre(self, genre_name: str) -> list[Movie]:
        """Get movies whose genre name matches exactly.

        Args:
            genre_name: Genre name to filter on.

        Returns:
            Matching movies; empty for an unknown genre.
        """
        stmt = _hydrated_movies().where(Genre.name == genre_name)
        return self._fetch_all(stmt, f"Error listing movies of genre '{genre_name}'")

    def get_movie(self, movie_id: int) -> Movie | None:
        """Retrieve a movie by identifier.

        Args:
            movie_id: Movie primary key.

        Returns:
            Movie with genre hydrated, or None.
        """
        stmt = _hydrated_movies().where(Movie.id == movie_id)
        return self._fetch_first(stmt, f"Error fetching movie {movie_id}")

    def add_movie(self, movie: Movie) -> Movie:
        """Insert a movie and write the generated identifier back into it.

        The genre reference is read from ``movie.genre`` when set, otherwise
        from ``movie.genre_id``.

        Args:
            movie: Unsaved movie.

        Returns:
            The same movie instance with ``id`` populated.

        Raises:
            DataAccessError: If the insert fails or affects no row.
        """
        genre_id = movie.genre.id if movie.genre is not None else movie.genre_id
        stmt = insert(Movie.__table__).values(
            title=movie.title,
            release_date=movie.release_date,
            genre_id=genre_id,
            duration=movie.duration,
            director=movie.director,
            summary=movie.summary,
        )
        movie.id = self._insert(stmt, f"Error adding movie '{movie.title}'")
        movie.genre_id = genre_id
        return movie
