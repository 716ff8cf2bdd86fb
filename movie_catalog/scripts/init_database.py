"""Initialize the movie catalog database schema.

Creates the genre and movie tables and optionally seeds a small
reference catalog.

Usage:
    python -m movie_catalog.scripts.init_database
    python -m movie_catalog.scripts.init_database --drop  # Drop and recreate
    python -m movie_catalog.scripts.init_database --seed  # Include seed data
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import date

from sqlalchemy import inspect

from movie_catalog.database.connection import DatabaseConnection, get_database
from movie_catalog.database.errors import CatalogError, translate_errors
from movie_catalog.database.models import Base, Movie
from movie_catalog.database.repositories import GenreRepository, MovieRepository

logger = logging.getLogger(__name__)

SEED_GENRES = ("Drama", "Comedy")

SEED_MOVIES = (
    ("Title 1", date(2015, 11, 26), "Drama", 120, "director 1", "summary of the first movie"),
    ("My Title 2", date(2015, 11, 14), "Comedy", 114, "director 2", "summary of the second movie"),
    ("Third title", date(2015, 12, 12), "Comedy", 176, "director 3", "summary of the third movie"),
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list, defaults to sys.argv[1:].

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Initialize the movie catalog database schema",
    )
    add_arguments(parser)
    return parser.parse_args(argv)


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Register init-db options on a parser."""
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables before creating",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Seed reference catalog after creation",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check connection, don't modify schema",
    )


def drop_tables(db: DatabaseConnection) -> None:
    """Drop all catalog tables."""
    print("🗑️  Dropping existing tables...")
    with translate_errors("Error dropping tables"):
        Base.metadata.drop_all(bind=db.engine)
    print("✅ Tables dropped")


def create_tables(db: DatabaseConnection) -> None:
    """Create all tables from SQLAlchemy models."""
    print("📋 Creating tables...")
    with translate_errors("Error creating tables"):
        Base.metadata.create_all(bind=db.engine)
    print("✅ Tables created")


def seed_catalog(db: DatabaseConnection) -> None:
    """Seed reference genres and, on an empty movie table, sample movies.

    Args:
        db: DatabaseConnection instance.
    """
    genre_repo = GenreRepository(db)
    movie_repo = MovieRepository(db)

    genre_ids: dict[str, int] = {}
    for name in SEED_GENRES:
        existing = genre_repo.get_genre(name)
        genre_ids[name] = existing.id if existing else genre_repo.add_genre(name)
    print(f"✅ Seeded {len(SEED_GENRES)} genres")

    if movie_repo.list_movies():
        print("ℹ️  Movies already present, skipping movie seed")
        return

    for title, release_date, genre_name, duration, director, summary in SEED_MOVIES:
        movie_repo.add_movie(
            Movie(
                title=title,
                release_date=release_date,
                genre_id=genre_ids[genre_name],
                duration=duration,
                director=director,
                summary=summary,
            )
        )
    print(f"✅ Seeded {len(SEED_MOVIES)} movies")


def list_tables(db: DatabaseConnection) -> list[str]:
    """Get the names of the tables present in the store."""
    return sorted(inspect(db.engine).get_table_names())


def print_table_summary(db: DatabaseConnection) -> None:
    """Print summary of existing tables."""
    tables = list_tables(db)

    print("\n📊 Database Tables:")
    print("-" * 40)
    for table in tables:
        print(f"   • {table}")
    print("-" * 40)
    print(f"   Total: {len(tables)} tables")


def _print_banner(db: DatabaseConnection) -> None:
    """Print the banner with database connection info."""
    print("=" * 50)
    print("🎬 Movie Catalog Database Initialization")
    print("=" * 50)
    print(f"   Database: {db.safe_url}")
    print("=" * 50)


def run(db: DatabaseConnection, args: argparse.Namespace) -> int:
    """Perform the database operations selected by the arguments.

    Args:
        db: DatabaseConnection instance.
        args: Parsed command line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    _print_banner(db)

    if not db.check_connection():
        print("❌ Cannot connect to database")
        return 1
    print("✅ Database connection successful")

    if args.check:
        print_table_summary(db)
        return 0

    try:
        if args.drop:
            drop_tables(db)
        create_tables(db)
        if args.seed:
            print("\n🌱 Seeding reference data...")
            seed_catalog(db)
    except CatalogError as e:
        logger.error("Database initialization failed: %s", e)
        print(f"❌ {e}")
        return 1

    print_table_summary(db)
    print("\n✅ Database initialization complete!")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = parse_args(argv)
    return run(get_database(), args)


if __name__ == "__main__":
    sys.exit(main())
