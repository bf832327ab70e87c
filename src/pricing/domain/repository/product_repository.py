"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON) live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pricing.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, or an empty list."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Overwrite price, last-updated time and history of a stored product.

        Name and ID are left untouched. Updating a product that is not in
        the store does nothing.
        """
