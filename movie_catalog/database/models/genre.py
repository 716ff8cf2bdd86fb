"""Genre model.

Named category referenced by movies (e.g., Drama, Comedy).
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from movie_catalog.database.models.base import Base


class Genre(Base):
    """Genre reference table.

    Attributes:
        id: Store-generated primary key (column ``idgenre``).
        name: Genre display name. Not unique at schema level.
    """

    __tablename__ = "genre"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("idgenre", Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Genre(id={self.id}, name='{self.name}')>"
