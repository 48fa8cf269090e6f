"""Catalog models."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import parse_money


class Product(BaseModel):
    """Purchasable product. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    unit_price: Decimal

    @field_validator("unit_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return parse_money(v)
