"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from pricing.domain.model.product import PriceHistoryEntry, Product
from pricing.domain.model.value_objects import Money
from pricing.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):
    """Keeps the catalog in a single JSON file, rewritten on every update.

    A missing file is created holding ``initial_products``.
    """

    def __init__(self, file_path: Path, initial_products: list[Product] | None = None) -> None:
        self._file_path = file_path
        self._ensure_file(initial_products or [])

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return self._load()

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self._load():
            if product.id == product_id:
                return product
        logger.warning("Product with id %s not found in %s", product_id, self._file_path)
        return None

    def update(self, product: Product) -> None:
        products = self._load()
        for existing in products:
            if existing.id == product.id:
                existing.price = product.price
                existing.last_updated = product.last_updated
                existing.price_history = list(product.price_history)
                self._persist(products)
                logger.info("Product with id %s updated in %s", product.id, self._file_path)
                return
        logger.warning("Product with id %s not found for update", product.id)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [self._from_raw(item) for item in raw]

    def _persist(self, products: list[Product]) -> None:
        raw = [self._to_raw(p) for p in products]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, initial_products: list[Product]) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist(initial_products)

    @staticmethod
    def _from_raw(item: dict) -> Product:
        currency = item.get("currency", "USD")
        return Product(
            id=item["id"],
            name=item["name"],
            price=Money(Decimal(item["price"]), currency),
            last_updated=datetime.fromisoformat(item["last_updated"]),
            price_history=[
                PriceHistoryEntry(
                    price=Money(Decimal(h["price"]), currency),
                    date=datetime.fromisoformat(h["date"]),
                )
                for h in item.get("price_history", [])
            ],
        )

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "last_updated": product.last_updated.isoformat(),
            "price_history": [
                {"price": str(h.price.amount), "date": h.date.isoformat()}
                for h in product.price_history
            ],
        }
