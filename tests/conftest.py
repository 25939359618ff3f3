"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()

from db import connection
from db.connection import get_cursor
from db.init_db import create_tables


SEED_GENRES = [
    (1, "Drama"),
    (2, "Comedy"),
    (3, "Thriller"),
]

SEED_MOVIES = [
    (1, "Title 1", "2015-11-26 12:00:00.000", 1, 120, "director 1", "summary of the first movie"),
    (2, "My Title 2", "2015-11-14 12:00:00.000", 2, 114, "director 2", "summary of the second movie"),
    (3, "Third title", "2015-12-12 12:00:00.000", 2, 176, "director 3", "summary of the third movie"),
]


@pytest.fixture
def database(tmp_path):
    """Point the connection source at a fresh SQLite file with the schema."""
    connection.close_pool()
    connection.init_pool(f"sqlite:///{tmp_path / 'catalog.db'}")
    create_tables()
    yield tmp_path / "catalog.db"
    connection.close_pool()


@pytest.fixture
def seeded(database):
    """The test database with three genres and three movies."""
    with get_cursor("seeding test data") as cur:
        for row in SEED_GENRES:
            cur.execute("INSERT INTO genre (idgenre, name) VALUES (%s, %s)", row)
        for row in SEED_MOVIES:
            cur.execute(
                "INSERT INTO movie (idmovie, title, release_date, genre_id, duration, director, summary) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s)",
                row,
            )
    return database
