"""Tests for the products API client, against a mocked transport."""

import json
from datetime import datetime, timezone
from decimal import Decimal

import httpx
import pytest

from pricing.domain.exceptions import (
    InvalidDiscountError,
    InvalidPriceError,
    ProductNotFoundError,
)
from pricing.infrastructure.client import PricingApiClient

BASE_URL = "http://pricing.test"


def _client(handler) -> PricingApiClient:
    return PricingApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def test_list_products():
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/api/products"
        return httpx.Response(
            200,
            json=[
                {
                    "id": 1,
                    "name": "Product A",
                    "price": 100.0,
                    "lastUpdated": "2024-09-01T12:00:00Z",
                }
            ],
        )

    with _client(handler) as client:
        products = client.list_products()

    assert len(products) == 1
    assert products[0].price == Decimal("100.0")
    assert products[0].last_updated == datetime(2024, 9, 1, 12, tzinfo=timezone.utc)


def test_get_product_history():
    def handler(request):
        return httpx.Response(
            200,
            json={
                "id": 2,
                "name": "Product B",
                "priceHistory": [{"price": 220.0, "date": "2024-09-01T00:00:00Z"}],
            },
        )

    with _client(handler) as client:
        history = client.get_product_history(2)

    assert history.name == "Product B"
    assert history.price_history[0].price == Decimal("220.0")


def test_update_price_sends_new_price():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "id": 1,
                "name": "Product A",
                "price": 29.99,
                "lastUpdated": "2025-01-01T00:00:00+00:00",
            },
        )

    with _client(handler) as client:
        product = client.update_price(1, Decimal("29.99"))

    assert seen == {
        "method": "PUT",
        "path": "/api/products/1/update-price",
        "body": {"newPrice": "29.99"},
    }
    assert product.price == Decimal("29.99")


def test_apply_discount_sends_percentage():
    def handler(request):
        assert request.method == "POST"
        assert json.loads(request.content) == {"discountPercentage": 10}
        return httpx.Response(
            200,
            json={"id": 1, "name": "Product A", "originalPrice": 100.0, "discountedPrice": 90.0},
        )

    with _client(handler) as client:
        result = client.apply_discount(1, 10)

    assert result.original_price == Decimal("100.0")
    assert result.discounted_price == Decimal("90.0")


def test_404_becomes_product_not_found():
    def handler(request):
        return httpx.Response(404, text="Product with id 9 not found")

    with _client(handler) as client:
        with pytest.raises(ProductNotFoundError, match="Product with id 9 not found"):
            client.get_product_history(9)


def test_400_becomes_endpoint_validation_error():
    def handler(request):
        return httpx.Response(400, text="rejected")

    with _client(handler) as client:
        with pytest.raises(InvalidPriceError, match="rejected"):
            client.update_price(1, -1)
        with pytest.raises(InvalidDiscountError, match="rejected"):
            client.apply_discount(1, 200)


def test_422_becomes_endpoint_validation_error():
    def handler(request):
        return httpx.Response(
            422,
            json={
                "detail": [
                    {
                        "type": "decimal_parsing",
                        "loc": ["body", "newPrice"],
                        "msg": "Input should be a valid decimal",
                        "input": "abc",
                    }
                ]
            },
        )

    with _client(handler) as client:
        with pytest.raises(
            InvalidPriceError, match="newPrice: Input should be a valid decimal"
        ):
            client.update_price(1, "abc")


def test_prices_are_read_without_float_rounding():
    def handler(request):
        return httpx.Response(
            200,
            content=(
                b'{"id":1,"name":"Product A","originalPrice":100.0,'
                b'"discountedPrice":66.6666666666666667}'
            ),
            headers={"content-type": "application/json"},
        )

    with _client(handler) as client:
        result = client.apply_discount(1, "33.3333333333333333")

    assert result.discounted_price == Decimal("66.6666666666666667")


def test_server_error_raises_http_status_error():
    def handler(request):
        return httpx.Response(500, text="boom")

    with _client(handler) as client:
        with pytest.raises(httpx.HTTPStatusError):
            client.list_products()
