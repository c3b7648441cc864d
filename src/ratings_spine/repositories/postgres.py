"""PostgreSQL rating repository on psycopg 3."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from ratings_spine.core.database import get_pool
from ratings_spine.core.errors import StoreError
from ratings_spine.core.models import Rating

_COLUMNS = (
    "id, ticker, target_from, target_to, company, action, brokerage, "
    "rating_from, rating_to, time"
)

_INSERT = """
    INSERT INTO stock (ticker, target_from, target_to, company, action,
                       brokerage, rating_from, rating_to, time)
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
    RETURNING id
"""


class PostgresRatingRepository:
    """Ratings stored in the ``stock`` table."""

    def __init__(self, pool: ConnectionPool | None = None):
        """Initialize with an optional pool; the shared pool is used otherwise."""
        self._pool = pool

    @contextmanager
    def _connection(self, operation: str) -> Iterator[psycopg.Connection]:
        pool = self._pool or get_pool()
        try:
            with pool.connection() as conn:
                yield conn
        except psycopg.Error as e:
            raise StoreError(operation, e) from e

    def list_all(self) -> list[Rating]:
        with self._connection("list_all") as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(f"SELECT {_COLUMNS} FROM stock ORDER BY id")
                return [Rating.from_row(row) for row in cur.fetchall()]

    def list_page(self, limit: int, offset: int) -> list[Rating]:
        with self._connection("list_page") as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM stock ORDER BY id LIMIT %s OFFSET %s",
                    (limit, offset),
                )
                return [Rating.from_row(row) for row in cur.fetchall()]

    def count(self) -> int:
        with self._connection("count") as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM stock")
                row = cur.fetchone()
                return int(row[0]) if row else 0

    def get(self, rating_id: int) -> Rating | None:
        with self._connection("get") as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(f"SELECT {_COLUMNS} FROM stock WHERE id = %s", (rating_id,))
                row = cur.fetchone()
                return Rating.from_row(row) if row else None

    def create(self, rating: Rating) -> Rating:
        with self._connection("create") as conn:
            with conn.cursor() as cur:
                cur.execute(_INSERT, rating.to_row())
                (rating_id,) = cur.fetchone()
                return rating.with_id(rating_id)

    def create_many(self, ratings: Sequence[Rating]) -> list[Rating]:
        if not ratings:
            return []

        stored: list[Rating] = []
        with self._connection("create_many") as conn:
            with conn.transaction():
                with conn.cursor() as cur:
                    for rating in ratings:
                        cur.execute(_INSERT, rating.to_row())
                        (rating_id,) = cur.fetchone()
                        stored.append(rating.with_id(rating_id))
        return stored

    def update(self, rating_id: int, rating: Rating) -> Rating | None:
        with self._connection("update") as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE stock
                    SET ticker = %s, target_from = %s, target_to = %s, company = %s,
                        action = %s, brokerage = %s, rating_from = %s, rating_to = %s,
                        time = %s
                    WHERE id = %s
                    """,
                    (*rating.to_row(), rating_id),
                )
                if cur.rowcount == 0:
                    return None
                return rating.with_id(rating_id)

    def delete(self, rating_id: int) -> bool:
        with self._connection("delete") as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM stock WHERE id = %s", (rating_id,))
                return cur.rowcount > 0

    def ping(self) -> None:
        with self._connection("ping") as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
