"""
repositories/movie_repo.py
--------------------------
Data access layer for movies.
Every read joins `movie` with `genre` so each Movie comes back with its
Genre fully loaded.
"""

from datetime import date, datetime
from typing import Optional

from db.connection import get_cursor
from db.errors import GeneratedKeyError
from models.genre import Genre
from models.movie import Movie, NewMovie
from utils.logger import get_logger

logger = get_logger(__name__)

# Inner join: a movie whose genre row is missing is left out of every listing.
_SELECT_MOVIES = """
    SELECT movie.idmovie, movie.title, movie.release_date, movie.duration,
           movie.director, movie.summary, genre.idgenre, genre.name
    FROM movie
    JOIN genre ON movie.genre_id = genre.idgenre
"""


class MovieRepository:
    """Repository for list/insert operations on the movie table."""

    # ── READ ──────────────────────────────────────────────

    def list_movies(self) -> list[Movie]:
        """
        Fetch every movie together with its genre.

        Returns:
            List of Movie objects (empty when there are none).
        """
        with get_cursor("fetching movies from database") as cur:
            cur.execute(_SELECT_MOVIES + ";")
            return [self._row_to_movie(r) for r in cur.fetchall()]

    def list_movies_by_genre(self, genre_name: str) -> list[Movie]:
        """
        Fetch the movies of one genre.

        Args:
            genre_name: Exact genre name to filter on.

        Returns:
            List of Movie objects; empty for an unknown or unused genre.
        """
        sql = _SELECT_MOVIES + " WHERE genre.name = %s;"
        with get_cursor(f"fetching movies by genre: {genre_name}") as cur:
            cur.execute(sql, (genre_name,))
            return [self._row_to_movie(r) for r in cur.fetchall()]

    # ── CREATE ────────────────────────────────────────────

    def add_movie(self, movie: NewMovie) -> Movie:
        """
        Insert a new movie.

        Args:
            movie: The movie to persist; its genre must already be stored.

        Returns:
            A new Movie with the same fields plus the generated id.

        Raises:
            GeneratedKeyError: If the insert returned no generated id.
        """
        sql = """
            INSERT INTO movie (title, release_date, genre_id, duration, director, summary)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING idmovie;
        """
        with get_cursor(f"adding movie: {movie.title}") as cur:
            cur.execute(sql, (
                movie.title, _date_to_db(movie.release_date), movie.genre.id,
                movie.duration, movie.director, movie.summary,
            ))
            row = cur.fetchone()
            if row is None:
                logger.error(f"No generated id returned for movie {movie.title!r}")
                raise GeneratedKeyError(
                    f"Failed to retrieve generated id for movie: {movie.title}"
                )
            created = movie.with_id(row["idmovie"])
        logger.info(f"Added movie #{created.id} {created.title!r}")
        return created

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_movie(row) -> Movie:
        """Convert a joined movie/genre row to a Movie with its Genre."""
        genre = Genre(id=row["idgenre"], name=row["name"])
        return Movie(
            id=row["idmovie"],
            title=row["title"],
            release_date=_date_from_db(row["release_date"]),
            genre=genre,
            duration=row["duration"],
            director=row["director"],
            summary=row["summary"],
        )


def _date_to_db(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _date_from_db(value) -> Optional[date]:
    """Normalise a date column: psycopg2 gives date/datetime, SQLite gives text."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])
