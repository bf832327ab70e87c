"""Product aggregate.

A product owns its price history. Every price change, whether a direct
update or a discount, first records the price being replaced together
with the time it became current, then overwrites the current price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from pricing.domain.exceptions import InvalidPriceError
from pricing.domain.model.value_objects import Discount, Money


@dataclass(frozen=True)
class PriceHistoryEntry:
    """A price the product used to have, and when it became current."""

    price: Money
    date: datetime


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root; kept as a mutable dataclass because price
    changes are a legitimate mutation on the aggregate. History is kept
    in insertion order, which is the order the changes happened in, not
    necessarily sorted by ``date``.
    """

    id: int
    name: str
    price: Money
    last_updated: datetime
    price_history: list[PriceHistoryEntry] = field(default_factory=list)

    def update_price(self, new_price: Money, now: datetime) -> None:
        """Replace the current price, recording the old one in history."""
        if not new_price.is_positive():
            raise InvalidPriceError("New price must be positive.")
        self._record_current_price()
        self.price = new_price
        self.last_updated = now

    def apply_discount(self, discount: Discount, now: datetime) -> Money:
        """Reduce the current price by ``discount`` and return the new price.

        A 100% discount brings the price down to zero.
        """
        discounted = discount.apply(self.price)
        self._record_current_price()
        self.price = discounted
        self.last_updated = now
        return discounted

    def _record_current_price(self) -> None:
        self.price_history.append(
            PriceHistoryEntry(price=self.price, date=self.last_updated)
        )
