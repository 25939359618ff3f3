"""
repositories/genre_repo.py
--------------------------
Data access layer for genres.
All SQL queries related to the `genre` table live here.
"""

from typing import Optional

from db.connection import get_cursor
from db.errors import PersistenceError
from models.genre import Genre
from utils.logger import get_logger

logger = get_logger(__name__)


class GenreRepository:
    """Repository for list/lookup/insert operations on the genre table."""

    def list_genres(self) -> list[Genre]:
        """
        Fetch every genre, in whatever order the store returns them.

        Returns:
            List of Genre objects (empty when the table is empty).
        """
        sql = "SELECT idgenre, name FROM genre;"
        with get_cursor("fetching genres from database") as cur:
            cur.execute(sql)
            return [self._row_to_genre(r) for r in cur.fetchall()]

    def get_genre(self, name: str) -> Optional[Genre]:
        """
        Fetch a genre by its exact name.

        Args:
            name: Genre name to look up.

        Returns:
            The first matching Genre, or None if no row has that name.
        """
        sql = "SELECT idgenre, name FROM genre WHERE name = %s;"
        with get_cursor(f"fetching genre by name: {name}") as cur:
            cur.execute(sql, (name,))
            row = cur.fetchone()
        if row is None:
            logger.debug(f"No genre named {name!r}")
            return None
        return self._row_to_genre(row)

    def add_genre(self, name: str) -> None:
        """
        Insert a new genre. The generated id is not returned.

        Args:
            name: Name of the new genre.
        """
        sql = "INSERT INTO genre (name) VALUES (%s);"
        with get_cursor(f"adding genre: {name}") as cur:
            cur.execute(sql, (name,))
            if cur.rowcount != 1:
                raise PersistenceError(
                    f"Expected one inserted row for genre {name!r}, got {cur.rowcount}"
                )
        logger.info(f"Added genre {name!r}")

    @staticmethod
    def _row_to_genre(row) -> Genre:
        """Convert a name-addressable row to a Genre domain object."""
        return Genre(id=row["idgenre"], name=row["name"])
