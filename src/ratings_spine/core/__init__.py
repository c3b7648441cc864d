"""Core module - settings, models, errors, database."""

from ratings_spine.core.errors import (
    BatchItemError,
    EmptyValueError,
    InputError,
    InvalidNumberError,
    InvalidTimestampError,
    MissingFieldError,
    NotFoundError,
    RatingsError,
    StoreError,
    UnsupportedFieldTypeError,
)
from ratings_spine.core.models import REQUIRED_FIELDS, Rating, RatingPage
from ratings_spine.core.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "REQUIRED_FIELDS",
    "Rating",
    "RatingPage",
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
