"""Prometheus metrics for observability."""

from prometheus_client import Counter, Info

from ratings_spine import __version__

app_info = Info("ratings_app", "Ratings Spine application info")
app_info.info({"version": __version__})

ratings_ingested_counter = Counter(
    "ratings_ingested_total",
    "Ratings accepted and persisted",
    ["path"],
)

ratings_rejected_counter = Counter(
    "ratings_rejected_total",
    "Ingestion requests rejected during validation",
    ["path", "error_type"],
)

store_failures_counter = Counter(
    "ratings_store_failures_total",
    "Persistence operations that failed",
    ["operation"],
)
