"""Application service: Update Price use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from pricing.application.clock import Clock, utc_now
from pricing.application.dto import ProductDTO, to_product_dto
from pricing.domain.exceptions import (
    InvalidPriceError,
    ProductNotFoundError,
    ValidationError,
)
from pricing.domain.model.value_objects import Money
from pricing.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdatePriceHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock = utc_now) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: int, new_price: str | float | int | Decimal) -> ProductDTO:
        """Set a new price for a product.

        The price is validated before the product is looked up, so a bad
        price for an unknown product is reported as a bad price.
        """
        logger.info("Updating price for product with id %s", product_id)
        price = self._parse_price(product_id, new_price)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.warning(
                "Product with id %s not found when updating price", product_id
            )
            raise ProductNotFoundError(f"Product with id {product_id} not found")

        product.update_price(price, now=self._clock())
        self._product_repo.update(product)

        logger.info("Price updated successfully for product with id %s", product_id)
        return to_product_dto(product)

    @staticmethod
    def _parse_price(product_id: int, new_price: str | float | int | Decimal) -> Money:
        try:
            price = Money.of(new_price)
        except ValidationError:
            price = None
        if price is None or not price.is_positive():
            logger.error(
                "Invalid new price %s for product with id %s", new_price, product_id
            )
            raise InvalidPriceError("New price must be positive.")
        return price
