"""Exception handlers - map ratings errors to JSON error responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ratings_spine.core.errors import BatchItemError, NotFoundError, RatingsError, StoreError

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "INVALID_INPUT": 400,
    "NOT_FOUND": 404,
    "STORE_FAILED": 500,
    "INTERNAL": 500,
}

STORE_FAILURE_MESSAGES: dict[str, str] = {
    "create": "Failed to create stock",
    "create_many": "Failed to create stocks",
    "update": "Failed to update stock",
    "delete": "Failed to delete stock",
}


def status_for_error_code(code: str) -> int:
    """Resolve an error code to HTTP status, defaulting to 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


async def ratings_error_handler(request: Request, exc: RatingsError) -> JSONResponse:
    """Render a ratings error as ``{"error": ...}``.

    Store failures hide the driver message; batch rejections echo the
    offending raw item back to the client.
    """
    status = status_for_error_code(exc.code)
    if isinstance(exc, StoreError):
        body = {"error": STORE_FAILURE_MESSAGES.get(exc.operation, "Failed to load stocks")}
    elif isinstance(exc, NotFoundError):
        body = {"error": "Stock not found"}
    else:
        body = {"error": exc.message}

    if isinstance(exc, BatchItemError):
        body["item"] = exc.item
    return JSONResponse(status_code=status, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RatingsError, ratings_error_handler)
