"""Entry point of the movie_catalog module. Enables python -m movie_catalog."""

import argparse
import sys

from movie_catalog.database import (
    CatalogError,
    DatabaseConnection,
    GenreRepository,
    MovieRepository,
    get_database,
)
from movie_catalog.scripts import init_database
from movie_catalog.settings import settings
from movie_catalog.utils import setup_logger


def run_init_db(db: DatabaseConnection, args: argparse.Namespace) -> int:
    """Create (and optionally seed) the schema."""
    return init_database.run(db, args)


def run_list_genres(db: DatabaseConnection, _args: argparse.Namespace) -> int:
    """Print every genre."""
    for genre in GenreRepository(db).list_genres():
        print(f"{genre.id:>4}  {genre.name}")
    return 0


def run_list_movies(db: DatabaseConnection, args: argparse.Namespace) -> int:
    """Print every movie, optionally restricted to one genre."""
    repo = MovieRepository(db)
    if args.genre is not None:
        movies = repo.list_movies_by_genre(args.genre)
    else:
        movies = repo.list_movies()
    for movie in movies:
        released = movie.release_date.isoformat() if movie.release_date else "-"
        minutes = f"{movie.duration} min" if movie.duration is not None else "-"
        print(
            f"{movie.id:>4}  {movie.title} ({released}) | {movie.genre.name} | "
            f"{minutes} | {movie.director}"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="movie_catalog",
        description="Movie catalog database tools",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create the database schema")
    init_database.add_arguments(init_parser)
    init_parser.set_defaults(handler=run_init_db)

    genres_parser = subparsers.add_parser("genres", help="List genres")
    genres_parser.set_defaults(handler=run_list_genres)

    movies_parser = subparsers.add_parser("movies", help="List movies")
    movies_parser.add_argument("--genre", help="Only movies of this genre")
    movies_parser.set_defaults(handler=run_list_movies)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch to the selected command."""
    args = build_parser().parse_args(argv)
    logger = setup_logger(
        "movie_catalog",
        level=settings.logging.level,
        log_dir=settings.logging.log_path,
    )

    try:
        return args.handler(get_database(), args)
    except CatalogError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
