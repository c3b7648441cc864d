"""Database connection pool management."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from ratings_spine.core.settings import Settings, get_settings

_pool: ConnectionPool | None = None


def init_pool(settings: Settings | None = None) -> ConnectionPool:
    """Initialize the connection pool."""
    global _pool
    if _pool is not None:
        return _pool

    settings = settings or get_settings()
    _pool = ConnectionPool(
        conninfo=settings.dsn,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        open=True,
    )
    return _pool


def get_pool() -> ConnectionPool:
    """Get the connection pool, initializing if needed."""
    if _pool is None:
        return init_pool()
    return _pool


def close_pool() -> None:
    """Close the connection pool."""
    global _pool
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Iterator[psycopg.Connection]:
    """Get a connection from the pool."""
    pool = get_pool()
    with pool.connection() as conn:
        yield conn


def apply_migrations(conn: psycopg.Connection, migrations_dir: Path) -> list[str]:
    """Apply pending ``*.sql`` files in name order.

    Applied file names are recorded in ``_migrations`` so reruns are no-ops.
    Returns the names applied by this call.
    """
    applied_now: list[str] = []
    with conn.cursor() as cur:
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS _migrations (
                name TEXT PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT NOW()
            )
            """
        )
        conn.commit()

        cur.execute("SELECT name FROM _migrations")
        applied = {row[0] for row in cur.fetchall()}

        for migration_file in sorted(migrations_dir.glob("*.sql")):
            if migration_file.name in applied:
                continue
            try:
                cur.execute(migration_file.read_text())
                cur.execute(
                    "INSERT INTO _migrations (name) VALUES (%s)",
                    (migration_file.name,),
                )
                conn.commit()
            except psycopg.Error:
                conn.rollback()
                raise
            applied_now.append(migration_file.name)
    return applied_now

