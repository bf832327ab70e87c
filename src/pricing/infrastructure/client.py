"""HTTP client for the products API.

Offers the same methods as ``PricingService`` and returns the same DTOs,
so callers can switch between a local store and a remote API. Error
responses are turned back into domain exceptions: 404 becomes
``ProductNotFoundError``, and 400 or a rejected request body (422)
become the validation error of the endpoint. Prices are read back as
Decimals straight from the JSON text.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any

import httpx

from pricing.application.dto import (
    AppliedDiscountDTO,
    PriceHistoryDTO,
    ProductDTO,
    ProductHistoryDTO,
)
from pricing.domain.exceptions import (
    InvalidDiscountError,
    InvalidPriceError,
    ProductNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class PricingApiClient:

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> PricingApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # --- Operations -----------------------------------------------------------

    def list_products(self) -> list[ProductDTO]:
        data = self._request("GET", "/api/products", context="getting all products")
        return [self._product(item) for item in data]

    def get_product_history(self, product_id: int) -> ProductHistoryDTO:
        data = self._request(
            "GET",
            f"/api/products/{product_id}",
            context=f"getting price history for product {product_id}",
        )
        return ProductHistoryDTO(
            id=data["id"],
            name=data["name"],
            price_history=[
                PriceHistoryDTO(
                    price=self._decimal(h["price"]),
                    date=datetime.fromisoformat(h["date"]),
                )
                for h in data.get("priceHistory", [])
            ],
        )

    def update_price(self, product_id: int, new_price: str | float | int | Decimal) -> ProductDTO:
        data = self._request(
            "PUT",
            f"/api/products/{product_id}/update-price",
            json={"newPrice": self._number(new_price)},
            context=f"updating price for product {product_id}",
            invalid=InvalidPriceError,
        )
        return self._product(data)

    def apply_discount(
        self, product_id: int, discount_percentage: str | float | int | Decimal
    ) -> AppliedDiscountDTO:
        data = self._request(
            "POST",
            f"/api/products/{product_id}/apply-discount",
            json={"discountPercentage": self._number(discount_percentage)},
            context=f"applying discount for product {product_id}",
            invalid=InvalidDiscountError,
        )
        return AppliedDiscountDTO(
            id=data["id"],
            name=data["name"],
            original_price=self._decimal(data["originalPrice"]),
            discounted_price=self._decimal(data["discountedPrice"]),
        )

    # --- Internal helpers -----------------------------------------------------

    def _request(
        self,
        method: str,
        url: str,
        *,
        context: str,
        json: dict[str, Any] | None = None,
        invalid: type[ValidationError] = ValidationError,
    ) -> Any:
        try:
            response = self._client.request(method, url, json=json)
            if response.status_code == 404:
                raise ProductNotFoundError(self._detail(response))
            if response.status_code in (400, 422):
                raise invalid(self._detail(response))
            response.raise_for_status()
        except (httpx.HTTPError, ProductNotFoundError, ValidationError):
            logger.error("An error occurred while %s", context, exc_info=True)
            raise
        return response.json(parse_float=Decimal)

    @staticmethod
    def _detail(response: httpx.Response) -> str:
        """Plain-text message, or the field errors of a 422 body."""
        if response.status_code != 422:
            return response.text
        try:
            errors = response.json()["detail"]
            return "; ".join(
                f"{e['loc'][-1]}: {e['msg']}" for e in errors
            )
        except (ValueError, KeyError, TypeError, IndexError):
            return response.text

    @staticmethod
    def _product(data: dict[str, Any]) -> ProductDTO:
        return ProductDTO(
            id=data["id"],
            name=data["name"],
            price=PricingApiClient._decimal(data["price"]),
            last_updated=datetime.fromisoformat(data["lastUpdated"]),
        )

    @staticmethod
    def _decimal(value: Any) -> Decimal:
        return Decimal(str(value))

    @staticmethod
    def _number(value: str | float | int | Decimal) -> float | int | str:
        # JSON has no Decimal; send the exact text and let the server parse it.
        if isinstance(value, Decimal):
            return str(value)
        return value
