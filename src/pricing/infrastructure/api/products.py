"""Products API router.

Translates HTTP calls into pricing service calls. Missing products map
to 404 and rejected prices or discounts to 400; the body of an error
response is the domain message as plain text.
"""

import logging
from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from pricing.application.pricing_service import PricingService
from pricing.domain.exceptions import EntityNotFoundError, ValidationError
from pricing.infrastructure.api.deps import get_pricing_service
from pricing.infrastructure.api.responses import DecimalJSONResponse, decimal_json
from pricing.infrastructure.api.schemas import (
    AppliedDiscountRead,
    DiscountRequest,
    ProductHistoryRead,
    ProductRead,
    UpdatePriceRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/products",
    tags=["Products"],
    default_response_class=DecimalJSONResponse,
    responses={
        400: {"description": "Invalid price or discount", "content": {"text/plain": {}}},
        404: {"description": "Product not found", "content": {"text/plain": {}}},
    },
)


def _error(status_code: int, exc: Exception) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status_code)


@router.get("", response_model=List[ProductRead])
def get_products(service: PricingService = Depends(get_pricing_service)):
    """List every product with its current price."""
    logger.info("Getting all products")
    try:
        products = service.list_products()
    except EntityNotFoundError as exc:
        logger.warning("No products found: %s", exc)
        return _error(404, exc)
    return decimal_json([ProductRead.model_validate(asdict(p)) for p in products])


@router.get("/{product_id}", response_model=ProductHistoryRead)
def get_product_price_history(
    product_id: int, service: PricingService = Depends(get_pricing_service)
):
    """Return a product and its past prices."""
    logger.info("Getting price history for product with id %s", product_id)
    try:
        history = service.get_product_history(product_id)
    except EntityNotFoundError as exc:
        logger.warning("Product with id %s not found", product_id)
        return _error(404, exc)
    return decimal_json(ProductHistoryRead.model_validate(asdict(history)))


@router.put("/{product_id}/update-price", response_model=ProductRead)
def update_price(
    product_id: int,
    payload: UpdatePriceRequest,
    service: PricingService = Depends(get_pricing_service),
):
    logger.info("Updating price for product with id %s", product_id)
    try:
        product = service.update_price(product_id, payload.new_price)
    except EntityNotFoundError as exc:
        logger.warning("Product with id %s not found when updating price", product_id)
        return _error(404, exc)
    except ValidationError as exc:
        logger.error("Error updating price for product with id %s: %s", product_id, exc)
        return _error(400, exc)
    return decimal_json(ProductRead.model_validate(asdict(product)))


@router.post("/{product_id}/apply-discount", response_model=AppliedDiscountRead)
def apply_discount(
    product_id: int,
    payload: DiscountRequest,
    service: PricingService = Depends(get_pricing_service),
):
    logger.info("Applying discount for product with id %s", product_id)
    try:
        result = service.apply_discount(product_id, payload.discount_percentage)
    except EntityNotFoundError as exc:
        logger.warning(
            "Product with id %s not found when applying discount", product_id
        )
        return _error(404, exc)
    except ValidationError as exc:
        logger.error("Error applying discount for product with id %s: %s", product_id, exc)
        return _error(400, exc)
    return decimal_json(AppliedDiscountRead.model_validate(asdict(result)))


__all__ = ["router"]
