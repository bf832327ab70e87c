"""In-memory implementation of ProductRepository.

Products are held in a plain list for the lifetime of the process.
Reads hand out copies, so a caller's changes only reach the store
through ``update``. There is no locking: two concurrent updates of the
same product can overwrite each other.
"""

from __future__ import annotations

import copy
import logging

from pricing.domain.model.product import Product
from pricing.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = [copy.deepcopy(p) for p in products or []]

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        logger.info("Getting all products from in-memory store")
        return [copy.deepcopy(p) for p in self._products]

    def get_by_id(self, product_id: int) -> Product | None:
        logger.info("Getting product by id %s from in-memory store", product_id)
        product = self._find(product_id)
        if product is None:
            logger.warning("Product with id %s not found in in-memory store", product_id)
            return None
        return copy.deepcopy(product)

    def update(self, product: Product) -> None:
        logger.info("Updating product with id %s in in-memory store", product.id)
        existing = self._find(product.id)
        if existing is None:
            logger.warning("Product with id %s not found for update", product.id)
            return

        existing.price = product.price
        existing.last_updated = product.last_updated
        existing.price_history = list(product.price_history)
        logger.info("Product with id %s updated successfully", product.id)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None
