"""Genre repository for reference data operations.

Provides listing, lookup by name and insertion of genres.
"""

from sqlalchemy import insert, select

from movie_catalog.database.models.genre import Genre
from movie_catalog.database.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    """Repository for Genre entity operations."""

    model = Genre

    def list_genres(self) -> list[Genre]:
        """Get all genres ordered by identifier.

        Returns:
            List of all genres, empty if the table is empty.
        """
        stmt = select(Genre).order_by(Genre.id)
        return self._fetch_all(stmt, "Error listing genres")

    def get_genre(self, name: str) -> Genre | None:
        """Retrieve genre by exact name.

        If several rows share the name, the lowest identifier wins.

        Args:
            name: Genre name (e.g., 'Drama').

        Returns:
            Genre instance or None.
        """
        stmt = select(Genre).where(Genre.name == name).order_by(Genre.id).limit(1)
        return self._fetch_first(stmt, f"Error fetching genre '{name}'")

    def add_genre(self, name: str) -> int:
        """Insert a new genre.

        Args:
            name: Genre display name.

        Returns:
            Store-generated genre identifier.
        """
        stmt = insert(Genre.__table__).values(name=name)
        return self._insert(stmt, f"Error adding genre '{name}'")
