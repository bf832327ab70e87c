"""Request and response bodies of the products API.

Field names are camelCase on the wire and snake_case in Python. Prices
stay Decimals here and are written as exact JSON numbers by
``DecimalJSONResponse``.
"""

from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ==============================
# Requests
# ==============================


class UpdatePriceRequest(CamelModel):
    new_price: Decimal


class DiscountRequest(CamelModel):
    discount_percentage: Decimal


# ==============================
# Responses
# ==============================


class ProductRead(CamelModel):
    id: int
    name: str
    price: Decimal
    last_updated: datetime


class PriceHistoryRead(CamelModel):
    price: Decimal
    date: datetime


class ProductHistoryRead(CamelModel):
    id: int
    name: str
    price_history: List[PriceHistoryRead] = Field(default_factory=list)


class AppliedDiscountRead(CamelModel):
    id: int
    name: str
    original_price: Decimal
    discounted_price: Decimal
