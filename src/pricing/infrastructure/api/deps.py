"""FastAPI dependency implementations."""

from fastapi import Request

from pricing.application.pricing_service import PricingService


def get_pricing_service(request: Request) -> PricingService:
    """Get the pricing service built at application startup."""
    return request.app.state.pricing_service
