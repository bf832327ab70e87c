"""Initial catalog loaded into a fresh product store."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pricing.application.clock import utc_now
from pricing.domain.model.product import PriceHistoryEntry, Product
from pricing.domain.model.value_objects import Money


def _entry(price: str, year: int, month: int, day: int) -> PriceHistoryEntry:
    return PriceHistoryEntry(
        price=Money.of(price), date=datetime(year, month, day, tzinfo=timezone.utc)
    )


def seed_products(now: datetime | None = None) -> list[Product]:
    now = now or utc_now()
    return [
        Product(
            id=1,
            name="Product A",
            price=Money.of("100.0"),
            last_updated=now,
            price_history=[
                _entry("120.0", 2024, 9, 1),
                _entry("110.0", 2024, 8, 15),
                _entry("100.0", 2024, 8, 10),
            ],
        ),
        Product(
            id=2,
            name="Product B",
            price=Money.of("200.0"),
            last_updated=now - timedelta(days=1),
            price_history=[
                _entry("220.0", 2024, 9, 1),
                _entry("210.0", 2024, 8, 15),
            ],
        ),
    ]
