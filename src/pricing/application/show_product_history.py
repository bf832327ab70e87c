"""Application service: Show Product History use case (query)."""

from __future__ import annotations

import logging

from pricing.application.dto import ProductHistoryDTO, to_product_history_dto
from pricing.domain.exceptions import ProductNotFoundError
from pricing.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ShowProductHistoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductHistoryDTO:
        logger.info("Getting product by id %s from repository", product_id)
        product = self._product_repo.get_by_id(product_id)

        if product is None:
            logger.warning("Product with id %s not found in repository", product_id)
            raise ProductNotFoundError(f"Product with id {product_id} not found")

        return to_product_history_dto(product)
