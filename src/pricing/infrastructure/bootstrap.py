"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from pricing.application.pricing_service import PricingService
from pricing.domain.repository.product_repository import ProductRepository
from pricing.infrastructure.config import Settings, get_settings
from pricing.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from pricing.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pricing.infrastructure.persistence.seed import seed_products


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or get_settings()
    if settings.STORE == "json":
        return JsonProductRepository(
            Path(settings.DATA_DIR) / "products.json",
            initial_products=seed_products(),
        )
    return InMemoryProductRepository(seed_products())


def pricing_service(settings: Settings | None = None) -> PricingService:
    return PricingService(product_repository(settings))
