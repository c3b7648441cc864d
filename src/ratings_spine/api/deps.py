"""FastAPI dependencies.

The rating store lives on ``app.state`` and is handed to each request
through :func:`get_rating_store`, so tests swap it with
``app.dependency_overrides`` or by passing ``store=`` to ``create_app``.
"""

from typing import Annotated

from fastapi import Depends, Request

from ratings_spine.core.settings import Settings, get_settings
from ratings_spine.repositories.base import RatingStore
from ratings_spine.services.ratings import RatingService


def get_rating_store(request: Request) -> RatingStore:
    """The store the application was created with."""
    return request.app.state.store


def get_rating_service(
    store: Annotated[RatingStore, Depends(get_rating_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RatingService:
    """Per-request service bound to the application store."""
    return RatingService(store, default_page_size=settings.default_page_size)


Store = Annotated[RatingStore, Depends(get_rating_store)]
Service = Annotated[RatingService, Depends(get_rating_service)]
