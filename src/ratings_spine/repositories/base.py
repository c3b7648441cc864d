"""Persistence port for ratings."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ratings_spine.core.models import Rating


@runtime_checkable
class RatingStore(Protocol):
    """Contract the service layer needs from a ratings store.

    Implementations assign ids on create and return the stored records.
    ``create_many`` is atomic: either every rating is stored or none is.
    Failures surface as :class:`~ratings_spine.core.errors.StoreError`.
    """

    def list_all(self) -> list[Rating]: ...

    def list_page(self, limit: int, offset: int) -> list[Rating]: ...

    def count(self) -> int: ...

    def get(self, rating_id: int) -> Rating | None: ...

    def create(self, rating: Rating) -> Rating: ...

    def create_many(self, ratings: Sequence[Rating]) -> list[Rating]: ...

    def update(self, rating_id: int, rating: Rating) -> Rating | None: ...

    def delete(self, rating_id: int) -> bool: ...

    def ping(self) -> None: ...
