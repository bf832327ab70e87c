"""Application service: List Products use case (query)."""

from __future__ import annotations

import logging

from pricing.application.dto import ProductDTO, to_product_dto
from pricing.domain.exceptions import ProductNotFoundError
from pricing.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        """Return a summary of every product in the catalog.

        An empty catalog is reported as an error rather than an empty
        list: there is always something to price.
        """
        logger.info("Getting all products from repository")
        products = self._product_repo.list_all()

        if not products:
            logger.warning("No products found in repository")
            raise ProductNotFoundError("No products found")

        return [to_product_dto(p) for p in products]
