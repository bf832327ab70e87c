"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the application layer and its callers (the HTTP
API, the CLI, the API client) without exposing the domain aggregate.
Prices are plain Decimals; the currency stays inside the domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from pricing.domain.model.product import PriceHistoryEntry, Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product summary as shown in a product list."""

    id: int
    name: str
    price: Decimal
    last_updated: datetime


@dataclass(frozen=True)
class PriceHistoryDTO:
    """Output: one past price of a product."""

    price: Decimal
    date: datetime


@dataclass(frozen=True)
class ProductHistoryDTO:
    """Output: a product together with its past prices."""

    id: int
    name: str
    price_history: list[PriceHistoryDTO]


@dataclass(frozen=True)
class AppliedDiscountDTO:
    """Output: the outcome of applying a discount."""

    id: int
    name: str
    original_price: Decimal
    discounted_price: Decimal


# --- Mapping ------------------------------------------------------------------


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.price.amount,
        last_updated=product.last_updated,
    )


def to_price_history_dto(entry: PriceHistoryEntry) -> PriceHistoryDTO:
    return PriceHistoryDTO(price=entry.price.amount, date=entry.date)


def to_product_history_dto(product: Product) -> ProductHistoryDTO:
    return ProductHistoryDTO(
        id=product.id,
        name=product.name,
        price_history=[to_price_history_dto(e) for e in product.price_history],
    )
