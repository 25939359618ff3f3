"""
db/init_db.py
-------------
Creates the catalog schema (tables) if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db import connection
from db.connection import get_cursor
from utils.logger import get_logger

logger = get_logger(__name__)

# One statement per entry: sqlite3 refuses several statements in one execute().
SQLITE_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS genre (
        idgenre         INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
        name            VARCHAR(50) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS movie (
        idmovie         INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
        title           VARCHAR(100) NOT NULL,
        release_date    DATETIME NULL,
        genre_id        INT NOT NULL,
        duration        INT NULL,
        director        VARCHAR(100) NOT NULL,
        summary         MEDIUMTEXT NULL,
        CONSTRAINT genre_fk FOREIGN KEY (genre_id) REFERENCES genre (idgenre)
    )
    """,
)

POSTGRES_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS genre (
        idgenre         SERIAL PRIMARY KEY,
        name            VARCHAR(50) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS movie (
        idmovie         SERIAL PRIMARY KEY,
        title           VARCHAR(100) NOT NULL,
        release_date    TIMESTAMP NULL,
        genre_id        INT NOT NULL REFERENCES genre (idgenre),
        duration        INT NULL,
        director        VARCHAR(100) NOT NULL,
        summary         TEXT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_movie_genre ON movie(genre_id)",
)


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    schema = SQLITE_SCHEMA if connection.uses_sqlite() else POSTGRES_SCHEMA
    with get_cursor("initializing schema") as cur:
        for statement in schema:
            cur.execute(statement)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
