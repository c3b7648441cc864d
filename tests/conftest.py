"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment - only set if not already set
if "RATINGS_LOG_LEVEL" not in os.environ:
    os.environ["RATINGS_LOG_LEVEL"] = "WARNING"
if "RATINGS_STORE_BACKEND" not in os.environ:
    os.environ["RATINGS_STORE_BACKEND"] = "memory"


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so env changes made by a test take effect."""
    from ratings_spine.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def raw_rating() -> dict[str, str]:
    """A complete, valid single-rating payload."""
    return {
        "ticker": "AAPL",
        "target_from": "$150.00",
        "target_to": "$1,160.50",
        "company": "Apple Inc.",
        "action": "target raised by",
        "brokerage": "Goldman Sachs",
        "rating_from": "Neutral",
        "rating_to": "Buy",
        "time": "2024-01-15T10:00:00Z",
    }


@pytest.fixture
def store():
    """Empty in-memory rating store."""
    from ratings_spine.repositories.memory import InMemoryRatingStore

    return InMemoryRatingStore()


@pytest.fixture
def settings():
    """Settings for API tests: memory store, no metrics mount."""
    from ratings_spine.core.settings import Settings

    return Settings(store_backend="memory", metrics_enabled=False, log_level="WARNING")


@pytest.fixture
def api_client(settings, store):
    """Test API client backed by the ``store`` fixture."""
    from fastapi.testclient import TestClient

    from ratings_spine.api.main import create_app

    app = create_app(settings=settings, store=store)
    with TestClient(app) as client:
        yield client
