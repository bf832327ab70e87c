"""In-memory fakes for testing.

The fake repository implements the same abstract interface as the real
stores but keeps products in a dict. No copies, no file I/O.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pricing.domain.model.product import PriceHistoryEntry, Product
from pricing.domain.model.value_objects import Money
from pricing.domain.repository.product_repository import ProductRepository

T0 = datetime(2024, 9, 1, 12, 0, tzinfo=timezone.utc)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.updates = 0

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def update(self, product: Product) -> None:
        self.updates += 1
        existing = self._store.get(product.id)
        if existing is None:
            return
        existing.price = product.price
        existing.last_updated = product.last_updated
        existing.price_history = list(product.price_history)


class FixedClock:
    """Returns a fixed time that advances by one minute on each call."""

    def __init__(self, start: datetime = T0) -> None:
        self._now = start

    def __call__(self) -> datetime:
        self._now += timedelta(minutes=1)
        return self._now


def make_product(
    product_id: int = 1,
    name: str = "Product A",
    price: str = "100",
    last_updated: datetime = T0,
    history: list[tuple[str, datetime]] | None = None,
) -> Product:
    return Product(
        id=product_id,
        name=name,
        price=Money.of(price),
        last_updated=last_updated,
        price_history=[
            PriceHistoryEntry(price=Money.of(p), date=d) for p, d in history or []
        ],
    )
