"""Pricing service: one entry point over the pricing use cases.

Callers that need every operation (the HTTP API, the CLI) depend on this
class instead of wiring four handlers themselves. The method names match
those of ``PricingApiClient`` so either can back the CLI.
"""

from __future__ import annotations

from decimal import Decimal

from pricing.application.apply_discount import ApplyDiscountHandler
from pricing.application.clock import Clock, utc_now
from pricing.application.dto import (
    AppliedDiscountDTO,
    ProductDTO,
    ProductHistoryDTO,
)
from pricing.application.list_products import ListProductsHandler
from pricing.application.show_product_history import ShowProductHistoryHandler
from pricing.application.update_price import UpdatePriceHandler
from pricing.domain.repository.product_repository import ProductRepository


class PricingService:

    def __init__(self, product_repo: ProductRepository, clock: Clock = utc_now) -> None:
        self._list_products = ListProductsHandler(product_repo)
        self._show_history = ShowProductHistoryHandler(product_repo)
        self._update_price = UpdatePriceHandler(product_repo, clock)
        self._apply_discount = ApplyDiscountHandler(product_repo, clock)

    def list_products(self) -> list[ProductDTO]:
        return self._list_products.handle()

    def get_product_history(self, product_id: int) -> ProductHistoryDTO:
        return self._show_history.handle(product_id)

    def update_price(
        self, product_id: int, new_price: str | float | int | Decimal
    ) -> ProductDTO:
        return self._update_price.handle(product_id, new_price)

    def apply_discount(
        self, product_id: int, discount_percentage: str | float | int | Decimal
    ) -> AppliedDiscountDTO:
        return self._apply_discount.handle(product_id, discount_percentage)
