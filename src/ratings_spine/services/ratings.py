"""Rating service - runs input through normalization, then the store."""

from collections.abc import Mapping, Sequence
from typing import Any

from ratings_spine.core.errors import InputError, NotFoundError, StoreError
from ratings_spine.core.models import Rating, RatingPage
from ratings_spine.ingest import build_rating, build_ratings
from ratings_spine.observability.logging import get_logger
from ratings_spine.observability.metrics import (
    ratings_ingested_counter,
    ratings_rejected_counter,
    store_failures_counter,
)
from ratings_spine.repositories.base import RatingStore

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 10


class RatingService:
    """Use cases over a :class:`RatingStore`.

    Ingestion methods raise :class:`InputError` before touching the store,
    so a rejected request never writes anything.
    """

    def __init__(self, store: RatingStore, default_page_size: int = DEFAULT_PAGE_SIZE):
        self.store = store
        self.default_page_size = default_page_size

    def list_all(self) -> list[Rating]:
        return self._call("list_all", self.store.list_all)

    def page(self, page: int, page_size: int) -> RatingPage:
        """Fetch one page; out-of-range arguments fall back to page 1 and
        the default page size."""
        if page < 1:
            page = 1
        if page_size < 1:
            page_size = self.default_page_size

        offset = (page - 1) * page_size
        ratings = self._call("list_page", self.store.list_page, page_size, offset)
        total = self._call("count", self.store.count)
        return RatingPage(ratings=ratings, total_count=total, page=page, page_size=page_size)

    def get(self, rating_id: int) -> Rating:
        rating = self._call("get", self.store.get, rating_id)
        if rating is None:
            raise NotFoundError(rating_id)
        return rating

    def create_one(self, fields: Mapping[str, str]) -> Rating:
        rating = self._ingest("single", build_rating, fields)
        stored = self._call("create", self.store.create, rating)
        ratings_ingested_counter.labels(path="single").inc()
        logger.info("rating_created", rating_id=stored.id, ticker=stored.ticker)
        return stored

    def create_batch(self, items: Sequence[Mapping[str, Any]]) -> list[Rating]:
        ratings = self._ingest("bulk", build_ratings, items)
        stored = self._call("create_many", self.store.create_many, ratings)
        ratings_ingested_counter.labels(path="bulk").inc(len(stored))
        logger.info("ratings_created", count=len(stored))
        return stored

    def replace(self, rating_id: int, fields: Mapping[str, str]) -> Rating:
        rating = self._ingest("update", build_rating, fields)
        stored = self._call("update", self.store.update, rating_id, rating)
        if stored is None:
            raise NotFoundError(rating_id)
        logger.info("rating_updated", rating_id=rating_id)
        return stored

    def delete(self, rating_id: int) -> None:
        if not self._call("delete", self.store.delete, rating_id):
            raise NotFoundError(rating_id)
        logger.info("rating_deleted", rating_id=rating_id)

    def _ingest(self, path: str, build, payload):
        try:
            return build(payload)
        except InputError as e:
            ratings_rejected_counter.labels(path=path, error_type=type(e).__name__).inc()
            logger.warning("rating_input_rejected", path=path, **e.to_dict())
            raise

    def _call(self, operation: str, func, *args):
        try:
            return func(*args)
        except StoreError as e:
            store_failures_counter.labels(operation=operation).inc()
            logger.error("store_operation_failed", **e.to_dict())
            raise
