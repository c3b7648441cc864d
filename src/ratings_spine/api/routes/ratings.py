"""Rating (stock) API endpoints."""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Body, Query
from pydantic import BaseModel, ConfigDict, Field

from ratings_spine.api.deps import Service
from ratings_spine.core.models import Rating, RatingPage

router = APIRouter()


class RatingResponse(BaseModel):
    """A stored rating."""

    id: int
    ticker: str
    target_from: float
    target_to: float
    company: str
    action: str
    brokerage: str
    rating_from: str
    rating_to: str
    time: datetime


class RatingPageResponse(BaseModel):
    """One page of ratings with paging totals."""

    model_config = ConfigDict(populate_by_name=True)

    stocks: list[RatingResponse]
    total_count: int = Field(alias="totalCount")
    page: int
    page_size: int = Field(alias="pageSize")
    total_pages: int = Field(alias="totalPages")


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(BaseModel):
    message: str
    stock: RatingResponse


class BulkCreatedResponse(BaseModel):
    message: str
    count: int


@router.get("/stocks", response_model=list[RatingResponse])
def list_stocks(service: Service):
    """List every rating, ordered by id."""
    return [_to_response(r) for r in service.list_all()]


@router.get("/stocksByPage", response_model=RatingPageResponse)
def list_stocks_by_page(
    service: Service,
    page: int = Query(1, description="Page number (1-indexed)"),
    page_size: int | None = Query(None, description="Items per page"),
):
    """Page through ratings. Out-of-range values fall back to defaults."""
    return _page_to_response(service.page(page, page_size or 0))


@router.post("/stocks", response_model=BulkCreatedResponse, status_code=201)
def create_stocks(service: Service, items: list[dict[str, Any]] = Body(...)):
    """Create ratings in bulk.

    Values may be strings, numbers or null. Any invalid item rejects the
    whole request and nothing is stored.
    """
    stored = service.create_batch(items)
    return BulkCreatedResponse(message="Stocks created successfully", count=len(stored))


@router.post("/stock", response_model=CreatedResponse, status_code=201)
def create_stock(service: Service, fields: dict[str, str] = Body(...)):
    """Create a single rating from a map of string fields."""
    stored = service.create_one(fields)
    return CreatedResponse(message="Stock created successfully", stock=_to_response(stored))


@router.get("/stock/{rating_id}", response_model=RatingResponse)
def get_stock(rating_id: int, service: Service):
    return _to_response(service.get(rating_id))


@router.put("/stock/{rating_id}", response_model=RatingResponse)
def update_stock(rating_id: int, service: Service, fields: dict[str, str] = Body(...)):
    """Replace a rating. The body is validated like a new single rating."""
    return _to_response(service.replace(rating_id, fields))


@router.delete("/stock/{rating_id}", response_model=MessageResponse)
def delete_stock(rating_id: int, service: Service):
    service.delete(rating_id)
    return MessageResponse(message="Stock deleted successfully")


def _to_response(rating: Rating) -> RatingResponse:
    """Convert Rating model to response."""
    return RatingResponse(
        id=rating.id,
        ticker=rating.ticker,
        target_from=rating.target_from,
        target_to=rating.target_to,
        company=rating.company,
        action=rating.action,
        brokerage=rating.brokerage,
        rating_from=rating.rating_from,
        rating_to=rating.rating_to,
        time=rating.time,
    )


def _page_to_response(page: RatingPage) -> RatingPageResponse:
    return RatingPageResponse(
        stocks=[_to_response(r) for r in page.ratings],
        total_count=page.total_count,
        page=page.page,
        page_size=page.page_size,
        total_pages=page.total_pages,
    )
