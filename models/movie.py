"""
models/movie.py
---------------
Domain models for movies, before and after they are persisted.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from models.genre import Genre


@dataclass(frozen=True)
class NewMovie:
    """
    A movie that has not been stored yet, so it carries no id.

    Attributes:
        title: Movie title.
        release_date: Release date (the time of day is never used).
        genre: The genre this movie belongs to; its id must exist in the store.
        duration: Running time in minutes.
        director: Director's name.
        summary: Free-text synopsis.
    """
    title: str
    release_date: Optional[date]
    genre: Genre
    duration: Optional[int]
    director: str
    summary: Optional[str]

    def with_id(self, movie_id: int) -> "Movie":
        """Return the persisted counterpart of this movie."""
        return Movie(
            title=self.title,
            release_date=self.release_date,
            genre=self.genre,
            duration=self.duration,
            director=self.director,
            summary=self.summary,
            id=movie_id,
        )


@dataclass(frozen=True)
class Movie(NewMovie):
    """A stored movie: the same fields plus the id the store assigned."""
    id: int

    def __str__(self) -> str:
        year = self.release_date.year if self.release_date else "?"
        return f"#{self.id} {self.title} ({year}) | {self.genre} | {self.director}"
