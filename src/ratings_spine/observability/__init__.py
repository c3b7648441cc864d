"""Observability - logging, metrics."""

from ratings_spine.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from ratings_spine.observability.metrics import (
    ratings_ingested_counter,
    ratings_rejected_counter,
    store_failures_counter,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
    "ratings_ingested_counter",
    "ratings_rejected_counter",
    "store_failures_counter",
]
