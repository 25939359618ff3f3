"""
db/connection.py
----------------
The connection source for the catalog.

A single DATABASE_URL decides the backend: ``sqlite:///...`` opens a fresh
sqlite3 connection per acquisition, ``postgresql://...`` draws connections
from psycopg2's ThreadedConnectionPool, which threads may share.
Repositories only ever talk to `get_cursor()`, which scopes one connection
and one cursor to a `with` block.
"""

import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional
from urllib.parse import urlparse

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX
from db.errors import PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)

_SQLITE_SCHEMES = {"sqlite"}
_POSTGRES_SCHEMES = {"postgresql", "postgres"}

_driver = None  # DB-API module behind the configured URL
_pool: pool.ThreadedConnectionPool | None = None
_sqlite_path: str | None = None


class Cursor:
    """
    Thin wrapper over a DB-API cursor.

    SQL is always written with ``%s`` markers; they are rewritten to ``?``
    when the driver's paramstyle is ``qmark``. Rows are addressable by
    column name on every backend.
    """

    def __init__(self, raw, paramstyle: str):
        self._raw = raw
        self._qmark = paramstyle == "qmark"

    def execute(self, sql: str, params: Optional[tuple] = None) -> "Cursor":
        if self._qmark:
            sql = sql.replace("%s", "?")
        if params is None:
            self._raw.execute(sql)
        else:
            self._raw.execute(sql, params)
        return self

    def fetchone(self):
        return self._raw.fetchone()

    def fetchall(self) -> list:
        return self._raw.fetchall()

    @property
    def rowcount(self) -> int:
        return self._raw.rowcount

    def close(self) -> None:
        self._raw.close()


def init_pool(
    database_url: Optional[str] = None,
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
) -> None:
    """
    Configure the connection source from a database URL.

    Args:
        database_url: Connection string; defaults to config.DATABASE_URL.
        min_conn: Minimum number of pooled connections (PostgreSQL only).
        max_conn: Maximum number of pooled connections (PostgreSQL only).

    Raises:
        ValueError: If the URL scheme names no supported driver.
        PersistenceError: If the PostgreSQL server is unreachable.
    """
    global _driver, _pool, _sqlite_path
    if _driver is not None:
        return

    url = database_url or DATABASE_URL
    scheme = urlparse(url).scheme

    if scheme in _SQLITE_SCHEMES:
        path = url.split(":///", 1)[1] if ":///" in url else ""
        if not path:
            raise ValueError(f"SQLite URL has no database path: {url!r}")
        _sqlite_path = path
        _driver = sqlite3
        logger.info(f"Using SQLite database at {path}.")
    elif scheme in _POSTGRES_SCHEMES:
        try:
            _pool = pool.ThreadedConnectionPool(min_conn, max_conn, url)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise PersistenceError("Error while connecting to the database") from e
        _driver = psycopg2
        logger.info("Database connection pool initialized successfully.")
    else:
        raise ValueError(f"Unsupported database URL scheme: {scheme!r}")


def get_connection():
    """
    Get a live connection to the configured database.

    Returns:
        A sqlite3 or psycopg2 connection object.

    Raises:
        RuntimeError: If the connection source has not been initialized.
    """
    if _driver is None:
        raise RuntimeError("Database not initialized. Call init_pool() first.")
    if _pool is not None:
        return _pool.getconn()

    conn = sqlite3.connect(_sqlite_path)
    try:
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error:
        conn.close()
        raise
    return conn


def release_connection(conn) -> None:
    """
    Give a connection back: to the pool for PostgreSQL, closed for SQLite.

    Args:
        conn: The connection obtained from get_connection().
    """
    if _pool is not None:
        _pool.putconn(conn)
    else:
        conn.close()


def close_pool() -> None:
    """Close all pooled connections and forget the configured URL."""
    global _driver, _pool, _sqlite_path
    if _pool is not None:
        _pool.closeall()
        logger.info("Database connection pool closed.")
    _driver = None
    _pool = None
    _sqlite_path = None


def uses_sqlite() -> bool:
    """True when the configured URL points at a SQLite file."""
    return _driver is sqlite3


def _open_cursor(conn) -> Cursor:
    if _pool is not None:
        raw = conn.cursor(cursor_factory=extras.RealDictCursor)
    else:
        raw = conn.cursor()
    return Cursor(raw, _driver.paramstyle)


@contextmanager
def get_cursor(operation: str) -> Iterator[Cursor]:
    """
    Run one unit of work on its own connection.

    Commits when the block exits normally and rolls back otherwise. The
    cursor is closed and the connection released on every exit path.

    Args:
        operation: Human-readable description used in logs and error
            messages, e.g. ``"adding genre: Drama"``.

    Raises:
        PersistenceError: If the driver fails to connect or to execute.
    """
    driver = _driver
    if driver is None:
        raise RuntimeError("Database not initialized. Call init_pool() first.")

    try:
        conn = get_connection()
    except driver.Error as e:
        logger.error(f"Failed to connect while {operation}: {e}")
        raise PersistenceError(f"Error while {operation}") from e

    try:
        cur = _open_cursor(conn)
        try:
            yield cur
        finally:
            cur.close()
        conn.commit()
    except driver.Error as e:
        _rollback(conn, driver, operation)
        logger.error(f"Failed while {operation}: {e}")
        raise PersistenceError(f"Error while {operation}") from e
    except Exception:
        _rollback(conn, driver, operation)
        raise
    finally:
        release_connection(conn)


def _rollback(conn, driver, operation: str) -> None:
    # A dead connection fails here too; the error that got us here wins.
    try:
        conn.rollback()
    except driver.Error as e:
        logger.error(f"Rollback failed while {operation}: {e}")
