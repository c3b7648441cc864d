"""Rating stores - the persistence port and its implementations."""

from ratings_spine.repositories.base import RatingStore
from ratings_spine.repositories.memory import InMemoryRatingStore
from ratings_spine.repositories.postgres import PostgresRatingRepository

__all__ = [
    "RatingStore",
    "InMemoryRatingStore",
    "PostgresRatingRepository",
]
