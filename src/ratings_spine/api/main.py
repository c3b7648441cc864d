"""FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from ratings_spine import __version__
from ratings_spine.api.errors import register_exception_handlers
from ratings_spine.api.middleware import RequestContextMiddleware
from ratings_spine.api.routes import health, ratings
from ratings_spine.core.database import close_pool, init_pool
from ratings_spine.core.settings import Settings, get_settings
from ratings_spine.observability.logging import configure_logging, get_logger
from ratings_spine.repositories import (
    InMemoryRatingStore,
    PostgresRatingRepository,
    RatingStore,
)

logger = get_logger(__name__)


def build_store(settings: Settings) -> RatingStore:
    """Store selected by ``settings.store_backend``."""
    if settings.store_backend == "memory":
        return InMemoryRatingStore()
    return PostgresRatingRepository()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    configure_logging(settings)
    if app.state.owns_pool:
        init_pool(settings)
    logger.info("application_started", store=type(app.state.store).__name__)

    yield

    if app.state.owns_pool:
        close_pool()
    logger.info("application_stopped")


def create_app(
    settings: Settings | None = None,
    store: RatingStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Override settings; the cached environment settings otherwise.
        store: Override the rating store; built from settings otherwise.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Ratings Spine",
        description="Stock analyst rating records",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)
    app.state.owns_pool = isinstance(app.state.store, PostgresRatingRepository) and store is None
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["Content-Length"],
        max_age=12 * 60 * 60,
    )
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(ratings.router, tags=["Stocks"])

    if settings.metrics_enabled:
        app.mount("/metrics", make_asgi_app())

    return app
