from typing import Optional

from fastapi import FastAPI

from pricing.application.pricing_service import PricingService
from pricing.domain.repository.product_repository import ProductRepository
from pricing.infrastructure.api.health import router as health_router
from pricing.infrastructure.api.products import router as products_router
from pricing.infrastructure.bootstrap import product_repository
from pricing.infrastructure.config import Settings, get_settings


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """Build the API around ``repository``, or the configured store if omitted."""
    settings = settings or get_settings()
    if repository is None:
        repository = product_repository(settings)

    app = FastAPI(title=settings.APP_NAME)
    app.state.pricing_service = PricingService(repository)

    app.include_router(health_router)
    app.include_router(products_router)
    return app


__all__ = ["create_app"]
