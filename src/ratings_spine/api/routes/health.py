"""Health check endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from ratings_spine import __version__
from ratings_spine.api.deps import Store
from ratings_spine.core.errors import StoreError
from ratings_spine.observability.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str = __version__


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    status: str
    database: str
    timestamp: str


@router.get("/health", response_model=HealthResponse)
@router.get("/health/live", response_model=HealthResponse)
def liveness():
    """Liveness probe - is the service running?"""
    return HealthResponse(status="ok", timestamp=datetime.now(UTC).isoformat())


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness(store: Store):
    """Readiness probe - can the store answer queries?"""
    db_status = "ok"
    try:
        store.ping()
    except StoreError as e:
        logger.error("readiness_store_check_failed", error=str(e.cause or e))
        db_status = "unavailable"

    return ReadinessResponse(
        status="ok" if db_status == "ok" else "degraded",
        database=db_status,
        timestamp=datetime.now(UTC).isoformat(),
    )
