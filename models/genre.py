"""
models/genre.py
---------------
Domain model for movie genres.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Genre:
    """
    A genre row.

    Attributes:
        id: Database primary key, assigned by the store.
        name: Display name (e.g., 'Drama'); unique by convention only.
    """
    id: int
    name: str

    def __str__(self) -> str:
        return self.name
