"""
Structured error types for the ratings service.

Every failure raised by this package is a :class:`RatingsError`. Errors carry
a machine-readable ``code`` the API layer maps to an HTTP status, the
underlying exception as ``cause`` (also chained through ``__cause__``), and
``to_dict()`` for structured logging.

Hierarchy::

    RatingsError
    ├── InputError                  (INVALID_INPUT, client must fix the payload)
    │   ├── MissingFieldError
    │   ├── EmptyValueError
    │   ├── InvalidNumberError
    │   ├── InvalidTimestampError
    │   ├── UnsupportedFieldTypeError
    │   └── BatchItemError
    ├── NotFoundError               (NOT_FOUND)
    └── StoreError                  (STORE_FAILED, persistence collaborator)

Usage::

    from ratings_spine.core.errors import InputError

    try:
        rating = build_rating(fields)
    except InputError as e:
        logger.warning("rating_rejected", **e.to_dict())
        raise
"""

from __future__ import annotations

from typing import Any


class RatingsError(Exception):
    """Base exception for all ratings service errors."""

    default_code: str = "INTERNAL"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, code={self.code})"


# =============================================================================
# INPUT ERRORS (never retryable - the payload must be fixed)
# =============================================================================


class InputError(RatingsError):
    """Raw input could not be turned into a valid rating."""

    default_code = "INVALID_INPUT"


class MissingFieldError(InputError):
    """A required field was absent or empty."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"missing required field: {field}")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        return result


class EmptyValueError(InputError):
    """A numeric field was empty once formatting characters were removed."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"invalid {field} value: empty value after cleaning")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        return result


class InvalidNumberError(InputError):
    """A numeric field did not parse as a finite number after cleaning."""

    def __init__(self, field: str, raw: str, cause: Exception | None = None):
        self.field = field
        self.raw = raw
        super().__init__(f"invalid {field} value '{raw}': {cause}", cause=cause)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        result["value"] = self.raw
        return result


class InvalidTimestampError(InputError):
    """No supported date/time format matched the value."""

    def __init__(self, raw: str, cause: Exception | None = None):
        self.raw = raw
        super().__init__(
            f"invalid time format '{raw}': could not parse time string with any known format",
            cause=cause,
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["value"] = self.raw
        return result


class UnsupportedFieldTypeError(InputError):
    """A bulk item carried a value with no textual rendering."""

    def __init__(self, field: str, index: int, type_name: str):
        self.field = field
        self.index = index
        self.type_name = type_name
        super().__init__(
            f"Field '{field}' in item {index} has unsupported type: {type_name}"
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result.update(field=self.field, index=self.index, type=self.type_name)
        return result


class BatchItemError(InputError):
    """One item of a bulk submission was rejected, failing the whole batch."""

    def __init__(self, index: int, item: Any, cause: InputError):
        self.index = index
        self.item = item
        super().__init__(f"Error in item {index}: {cause.message}", cause=cause)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["index"] = self.index
        return result


# =============================================================================
# LOOKUP / PERSISTENCE ERRORS
# =============================================================================


class NotFoundError(RatingsError):
    """The requested rating does not exist."""

    default_code = "NOT_FOUND"

    def __init__(self, rating_id: int):
        self.rating_id = rating_id
        super().__init__(f"Stock {rating_id} not found")


class StoreError(RatingsError):
    """The persistence collaborator failed to complete an operation."""

    default_code = "STORE_FAILED"

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        super().__init__(f"store operation '{operation}' failed", cause=cause)


__all__ = [
    "RatingsError",
    "InputError",
    "MissingFieldError",
    "EmptyValueError",
    "InvalidNumberError",
    "InvalidTimestampError",
    "UnsupportedFieldTypeError",
    "BatchItemError",
    "NotFoundError",
    "StoreError",
]
