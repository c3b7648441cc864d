"""Domain models."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

# Required input fields, in the order they are validated.
REQUIRED_FIELDS: tuple[str, ...] = (
    "ticker",
    "target_from",
    "target_to",
    "company",
    "action",
    "brokerage",
    "rating_from",
    "rating_to",
    "time",
)


@dataclass(frozen=True)
class Rating:
    """One analyst price-target / rating action.

    ``id`` is None until the store has persisted the record.
    """

    ticker: str
    target_from: float
    target_to: float
    company: str
    action: str
    brokerage: str
    rating_from: str
    rating_to: str
    time: datetime
    id: int | None = None

    def with_id(self, rating_id: int) -> "Rating":
        """Copy of this rating carrying a store-assigned id."""
        return replace(self, id=rating_id)

    def to_row(self) -> tuple[Any, ...]:
        """Column values in ``REQUIRED_FIELDS`` order."""
        return tuple(getattr(self, name) for name in REQUIRED_FIELDS)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Rating":
        """Build a rating from a ``dict_row`` database row."""
        return cls(
            id=row["id"],
            ticker=row["ticker"],
            target_from=float(row["target_from"]),
            target_to=float(row["target_to"]),
            company=row["company"],
            action=row["action"],
            brokerage=row["brokerage"],
            rating_from=row["rating_from"],
            rating_to=row["rating_to"],
            time=row["time"],
        )


@dataclass(frozen=True)
class RatingPage:
    """A page of ratings plus the totals needed to page through the rest."""

    ratings: list[Rating]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return (self.total_count + self.page_size - 1) // self.page_size
