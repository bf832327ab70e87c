"""HTTP tests for the products API."""

import json
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from pricing.infrastructure.api.app import create_app
from pricing.infrastructure.config import Settings
from pricing.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from pricing.infrastructure.persistence.seed import seed_products
from tests.fakes import T0


@pytest.fixture
def client():
    app = create_app(
        settings=Settings(_env_file=None),
        repository=InMemoryProductRepository(seed_products(T0)),
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client():
    app = create_app(
        settings=Settings(_env_file=None), repository=InMemoryProductRepository()
    )
    with TestClient(app) as test_client:
        yield test_client


class TestGetProducts:

    def test_lists_products_in_camel_case(self, client):
        response = client.get("/api/products")

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == [1, 2]
        assert body[0]["name"] == "Product A"
        assert body[0]["price"] == 100.0
        assert set(body[0]) == {"id", "name", "price", "lastUpdated"}

    def test_empty_store_is_404(self, empty_client):
        response = empty_client.get("/api/products")

        assert response.status_code == 404
        assert response.text == "No products found"
        assert response.headers["content-type"].startswith("text/plain")


class TestGetProductPriceHistory:

    def test_returns_history(self, client):
        response = client.get("/api/products/2")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 2
        assert body["name"] == "Product B"
        assert [h["price"] for h in body["priceHistory"]] == [220.0, 210.0]
        assert body["priceHistory"][0]["date"].startswith("2024-09-01T00:00:00")

    def test_unknown_product_is_404(self, client):
        response = client.get("/api/products/999")

        assert response.status_code == 404
        assert response.text == "Product with id 999 not found"


class TestUpdatePrice:

    def test_updates_price(self, client):
        response = client.put("/api/products/1/update-price", json={"newPrice": 150})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert body["price"] == 150
        assert "lastUpdated" in body

        history = client.get("/api/products/1").json()["priceHistory"]
        assert len(history) == 4
        assert history[-1]["price"] == 100.0

    def test_accepts_snake_case_body(self, client):
        response = client.put("/api/products/1/update-price", json={"new_price": "99.95"})

        assert response.status_code == 200
        assert response.json()["price"] == 99.95

    @pytest.mark.parametrize("price", [0, -10])
    def test_non_positive_price_is_400(self, client, price):
        response = client.put("/api/products/1/update-price", json={"newPrice": price})

        assert response.status_code == 400
        assert response.text == "New price must be positive."
        assert client.get("/api/products").json()[0]["price"] == 100.0

    def test_unknown_product_is_404(self, client):
        response = client.put("/api/products/999/update-price", json={"newPrice": 10})

        assert response.status_code == 404

    def test_missing_body_field_is_422(self, client):
        response = client.put("/api/products/1/update-price", json={})

        assert response.status_code == 422


class TestApplyDiscount:

    def test_applies_discount(self, client):
        response = client.post(
            "/api/products/1/apply-discount", json={"discountPercentage": 10}
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "name": "Product A",
            "originalPrice": 100.0,
            "discountedPrice": 90.0,
        }
        assert client.get("/api/products").json()[0]["price"] == 90.0

    def test_discounted_price_is_exact(self, client):
        response = client.post(
            "/api/products/1/apply-discount",
            json={"discountPercentage": "33.3333333333333333"},
        )

        assert response.status_code == 200
        body = json.loads(response.text, parse_float=Decimal)
        assert body["originalPrice"] == Decimal("100")
        assert body["discountedPrice"] == Decimal("66.6666666666666667")

        listed = json.loads(client.get("/api/products").text, parse_float=Decimal)
        assert listed[0]["price"] == body["discountedPrice"]

    @pytest.mark.parametrize("percentage", [-1, 110])
    def test_out_of_range_is_400(self, client, percentage):
        response = client.post(
            "/api/products/1/apply-discount", json={"discountPercentage": percentage}
        )

        assert response.status_code == 400
        assert "between 0 and 100" in response.text

    def test_out_of_range_for_unknown_product_is_400(self, client):
        response = client.post(
            "/api/products/999/apply-discount", json={"discountPercentage": 110}
        )

        assert response.status_code == 400

    def test_unknown_product_is_404(self, client):
        response = client.post(
            "/api/products/999/apply-discount", json={"discountPercentage": 10}
        )

        assert response.status_code == 404


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
