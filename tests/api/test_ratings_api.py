"""Tests for the stock rating endpoints."""

import pytest

from ratings_spine.core.errors import StoreError
from ratings_spine.repositories.memory import InMemoryRatingStore


class _BrokenStore(InMemoryRatingStore):
    def create(self, rating):
        raise StoreError("create", RuntimeError("db down"))

    def create_many(self, ratings):
        raise StoreError("create_many", RuntimeError("db down"))


class TestCreateSingle:
    def test_created(self, api_client, raw_rating):
        response = api_client.post("/stock", json=raw_rating)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Stock created successfully"
        assert data["stock"]["id"] == 1
        assert data["stock"]["target_from"] == 150.0
        assert data["stock"]["target_to"] == 1160.5
        assert data["stock"]["time"].startswith("2024-01-15T10:00:00")

    def test_missing_field(self, api_client, raw_rating):
        del raw_rating["time"]
        response = api_client.post("/stock", json=raw_rating)

        assert response.status_code == 400
        assert response.json() == {"error": "missing required field: time"}

    def test_bad_price(self, api_client, raw_rating):
        raw_rating["target_from"] = "n/a"
        response = api_client.post("/stock", json=raw_rating)

        assert response.status_code == 400
        assert response.json()["error"].startswith("invalid target_from value 'n/a'")

    def test_non_text_value_rejected(self, api_client, raw_rating):
        raw_rating["target_from"] = 150
        response = api_client.post("/stock", json=raw_rating)
        assert response.status_code == 422


class TestCreateBulk:
    def test_mixed_value_types(self, api_client, raw_rating):
        items = [raw_rating, dict(raw_rating, ticker="NVDA", target_from=480, target_to=512.5)]
        response = api_client.post("/stocks", json=items)

        assert response.status_code == 201
        assert response.json() == {"message": "Stocks created successfully", "count": 2}

        stocks = api_client.get("/stocks").json()
        assert [s["ticker"] for s in stocks] == ["AAPL", "NVDA"]
        assert stocks[1]["target_to"] == 512.5

    def test_bad_item_rejects_batch(self, api_client, raw_rating):
        bad = dict(raw_rating, time="99/99/9999")
        items = [raw_rating, raw_rating, bad, raw_rating]

        response = api_client.post("/stocks", json=items)

        assert response.status_code == 400
        data = response.json()
        assert data["error"].startswith("Error in item 2:")
        assert data["item"] == bad
        assert api_client.get("/stocks").json() == []

    def test_unsupported_type(self, api_client, raw_rating):
        response = api_client.post("/stocks", json=[dict(raw_rating, target_from=True)])

        assert response.status_code == 400
        assert response.json() == {
            "error": "Field 'target_from' in item 0 has unsupported type: bool"
        }

    def test_body_must_be_array(self, api_client, raw_rating):
        response = api_client.post("/stocks", json=raw_rating)
        assert response.status_code == 422

    def test_store_failure(self, settings, raw_rating):
        from fastapi.testclient import TestClient

        from ratings_spine.api.main import create_app

        app = create_app(settings=settings, store=_BrokenStore())
        with TestClient(app) as client:
            bulk = client.post("/stocks", json=[raw_rating])
            single = client.post("/stock", json=raw_rating)

        assert bulk.status_code == 500
        assert bulk.json() == {"error": "Failed to create stocks"}
        assert single.status_code == 500
        assert single.json() == {"error": "Failed to create stock"}


class TestReadUpdateDelete:
    @pytest.fixture
    def created(self, api_client, raw_rating):
        api_client.post("/stocks", json=[dict(raw_rating, ticker=f"T{i}") for i in range(5)])
        return api_client

    def test_get_by_id(self, created):
        response = created.get("/stock/3")

        assert response.status_code == 200
        assert response.json()["ticker"] == "T2"

    def test_get_missing(self, api_client):
        response = api_client.get("/stock/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Stock not found"}

    def test_get_invalid_id(self, api_client):
        assert api_client.get("/stock/abc").status_code == 422

    def test_page(self, created):
        response = created.get("/stocksByPage", params={"page": 2, "page_size": 2})

        assert response.status_code == 200
        data = response.json()
        assert [s["ticker"] for s in data["stocks"]] == ["T2", "T3"]
        assert data["totalCount"] == 5
        assert data["page"] == 2
        assert data["pageSize"] == 2
        assert data["totalPages"] == 3

    def test_page_defaults(self, created):
        data = created.get("/stocksByPage", params={"page": 0}).json()

        assert data["page"] == 1
        assert data["pageSize"] == 10
        assert len(data["stocks"]) == 5

    def test_update(self, created, raw_rating):
        response = created.put("/stock/1", json=dict(raw_rating, rating_to="Sell", target_to="99,5"))

        assert response.status_code == 200
        assert response.json()["rating_to"] == "Sell"
        assert created.get("/stock/1").json()["target_to"] == 99.5

    def test_update_missing(self, api_client, raw_rating):
        response = api_client.put("/stock/77", json=raw_rating)
        assert response.status_code == 404

    def test_update_invalid(self, created, raw_rating):
        response = created.put("/stock/1", json=dict(raw_rating, time="later"))

        assert response.status_code == 400
        assert created.get("/stock/1").json()["ticker"] == "T0"

    def test_delete(self, created):
        response = created.delete("/stock/1")

        assert response.status_code == 200
        assert response.json() == {"message": "Stock deleted successfully"}
        assert created.get("/stock/1").status_code == 404
        assert created.delete("/stock/1").status_code == 404


def test_request_id_echoed(api_client):
    response = api_client.get("/stocks", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"
