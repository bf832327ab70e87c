"""Application service: Apply Discount use case.

A discount is a one-off price cut: the discounted price becomes the
product's new current price and the price it replaces goes into history.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pricing.application.clock import Clock, utc_now
from pricing.application.dto import AppliedDiscountDTO
from pricing.domain.exceptions import InvalidDiscountError, ProductNotFoundError
from pricing.domain.model.product import Product
from pricing.domain.model.value_objects import Discount, Money
from pricing.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ApplyDiscountHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock = utc_now) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(
        self, product_id: int, discount_percentage: str | float | int | Decimal
    ) -> AppliedDiscountDTO:
        logger.info("Applying discount for product with id %s", product_id)
        try:
            discount = Discount.of(discount_percentage)
        except InvalidDiscountError:
            logger.error(
                "Invalid discount percentage %s for product with id %s",
                discount_percentage,
                product_id,
            )
            raise

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.warning(
                "Product with id %s not found when applying discount", product_id
            )
            raise ProductNotFoundError(f"Product with id {product_id} not found")

        original_price = product.price
        discounted_price = product.apply_discount(discount, now=self._clock())
        self._product_repo.update(product)

        logger.info("Discount %s applied to product with id %s", discount, product_id)
        return self._to_dto(product, original_price, discounted_price)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(product: Product, original: Money, discounted: Money) -> AppliedDiscountDTO:
        return AppliedDiscountDTO(
            id=product.id,
            name=product.name,
            original_price=original.amount,
            discounted_price=discounted.amount,
        )
