"""Input normalization - raw JSON values to validated ratings."""

from ratings_spine.ingest.builder import build_rating, validate_required_fields
from ratings_spine.ingest.bulk import build_ratings, coerce_fields, render_value
from ratings_spine.ingest.decimals import clean_decimal
from ratings_spine.ingest.timestamps import TIMESTAMP_FORMATS, parse_timestamp

__all__ = [
    "TIMESTAMP_FORMATS",
    "build_rating",
    "build_ratings",
    "clean_decimal",
    "coerce_fields",
    "parse_timestamp",
    "render_value",
    "validate_required_fields",
]
