"""
Database module for the Artisan Geo service.

Provides SQLite database initialization, connection management, and schema setup.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

# Module-level connection for the application
_db_path: Path | None = None
_connection: sqlite3.Connection | None = None


SCHEMA = """
-- Artisans: service providers with a fixed service location
CREATE TABLE IF NOT EXISTS artisans (
    id TEXT PRIMARY KEY,                    -- "art_" + random token
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    rating REAL NOT NULL DEFAULT 0,         -- 0..5
    verified INTEGER NOT NULL DEFAULT 0,    -- boolean: 1=true, 0=false

    -- Location (degrees, WGS84)
    lat REAL NOT NULL,
    lon REAL NOT NULL,

    -- Metadata
    created_at TEXT NOT NULL,               -- ISO 8601
    updated_at TEXT NOT NULL                -- ISO 8601
);

CREATE INDEX IF NOT EXISTS idx_artisans_location ON artisans(lat, lon);
CREATE INDEX IF NOT EXISTS idx_artisans_category ON artisans(category);
"""


def init_database(db_path: str | Path) -> None:
    """Initialize the database with the Artisan Geo schema."""
    global _db_path, _connection

    _db_path = Path(db_path)
    _connection = sqlite3.connect(str(_db_path), check_same_thread=False)
    _connection.row_factory = sqlite3.Row

    _connection.executescript(SCHEMA)
    _connection.commit()


def get_connection() -> sqlite3.Connection:
    """Get the current database connection."""
    if _connection is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return _connection


@contextmanager
def get_cursor() -> Generator[sqlite3.Cursor, None, None]:
    """Get a database cursor with automatic commit/rollback."""
    conn = get_connection()
    cursor = conn.cursor()
    try:
        yield cursor
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()


def close_database() -> None:
    """Close the database connection."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None


def insert_artisan(
    cursor: sqlite3.Cursor,
    artisan_id: str,
    name: str,
    category: str,
    rating: float,
    verified: bool,
    lat: float,
    lon: float,
    timestamp: str,
) -> None:
    """Insert an artisan row; created_at and updated_at both get timestamp."""
    cursor.execute(
        """
        INSERT INTO artisans (
            id, name, category, rating, verified,
            lat, lon, created_at, updated_at
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (artisan_id, name, category, rating, int(verified), lat, lon, timestamp, timestamp),
    )
