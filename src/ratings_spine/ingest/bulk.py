"""Bulk ingestion: coerce heterogeneous JSON items to text, then build ratings.

JSON feeds mix quoted and bare numbers (``"target_from": 150`` next to
``"target_to": "$160.00"``) and send ``null`` for blanks. Every value is
rendered to text once here so the single-record builder handles both paths.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ratings_spine.core.errors import (
    BatchItemError,
    InputError,
    UnsupportedFieldTypeError,
)
from ratings_spine.core.models import Rating
from ratings_spine.ingest.builder import build_rating


def render_value(value: Any) -> str | None:
    """Text form of a JSON scalar, or None when the type has no rendering."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool is an int subclass but has no sensible price/label rendering
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return None


def coerce_fields(raw: Mapping[str, Any], index: int) -> dict[str, str]:
    """Render every value of one bulk item as text.

    Raises:
        UnsupportedFieldTypeError: A value is not text, a number, or null.
    """
    if not isinstance(raw, Mapping):
        raise InputError(f"item {index} is not an object: {type(raw).__name__}")

    fields: dict[str, str] = {}
    for key, value in raw.items():
        text = render_value(value)
        if text is None:
            raise UnsupportedFieldTypeError(key, index, type(value).__name__)
        fields[key] = text
    return fields


def build_ratings(items: Sequence[Mapping[str, Any]]) -> list[Rating]:
    """Build one rating per item, all or nothing.

    Items are processed in order and the first failure aborts the batch, so
    a returned list always holds exactly one rating per input item.

    Raises:
        UnsupportedFieldTypeError: An item carried an unrenderable value.
        BatchItemError: The builder rejected an item; carries its index and
            the raw item.
    """
    ratings: list[Rating] = []
    for index, item in enumerate(items):
        fields = coerce_fields(item, index)
        try:
            ratings.append(build_rating(fields))
        except InputError as e:
            raise BatchItemError(index, item, e) from e
    return ratings
