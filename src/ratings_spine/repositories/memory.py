"""In-process rating store for development and testing."""

import threading
from collections.abc import Sequence

from ratings_spine.core.models import Rating


class InMemoryRatingStore:
    """Dict-backed store with the same contract as the PostgreSQL repository.

    Ids are assigned sequentially from 1 and never reused.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._ratings: dict[int, Rating] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> list[Rating]:
        with self._lock:
            return [self._ratings[k] for k in sorted(self._ratings)]

    def list_page(self, limit: int, offset: int) -> list[Rating]:
        return self.list_all()[offset : offset + limit]

    def count(self) -> int:
        with self._lock:
            return len(self._ratings)

    def get(self, rating_id: int) -> Rating | None:
        with self._lock:
            return self._ratings.get(rating_id)

    def create(self, rating: Rating) -> Rating:
        return self.create_many([rating])[0]

    def create_many(self, ratings: Sequence[Rating]) -> list[Rating]:
        with self._lock:
            stored = []
            for rating in ratings:
                stored.append(rating.with_id(self._next_id))
                self._next_id += 1
            for rating in stored:
                self._ratings[rating.id] = rating
            return stored

    def update(self, rating_id: int, rating: Rating) -> Rating | None:
        with self._lock:
            if rating_id not in self._ratings:
                return None
            stored = rating.with_id(rating_id)
            self._ratings[rating_id] = stored
            return stored

    def delete(self, rating_id: int) -> bool:
        with self._lock:
            return self._ratings.pop(rating_id, None) is not None

    def ping(self) -> None:
        return None

    def clear(self) -> None:
        """Drop every stored rating."""
        with self._lock:
            self._ratings.clear()
