"""Checkout models: receipt snapshot and transient form state."""
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.cart.models import CartLine
from storefront.services.money import to_decimal


class CheckoutState(str, Enum):
    """
    Checkout lifecycle.

    Flow:
        idle -> completed (successful checkout)
        completed -> idle (receipt dismissed)
    """
    IDLE = "idle"
    COMPLETED = "completed"


class ReceiptLine(BaseModel):
    """Copy of a cart line at checkout time."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    product_name: str
    unit_price: Decimal
    quantity: int
    line_subtotal: Decimal

    @field_validator("unit_price", "line_subtotal", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return to_decimal(v)

    @classmethod
    def from_cart_line(cls, line: CartLine) -> "ReceiptLine":
        return cls(
            product_id=line.product_id,
            product_name=line.product_name,
            unit_price=line.unit_price,
            quantity=line.quantity,
            line_subtotal=line.subtotal,
        )


class CheckoutReceipt(BaseModel):
    """Immutable record of a completed checkout."""

    model_config = ConfigDict(frozen=True)

    id: str
    total: Decimal
    timestamp: datetime
    items: tuple[ReceiptLine, ...]

    @field_validator("total", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v):
        return to_decimal(v)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


class CheckoutForm(BaseModel):
    """Customer details entered before checkout. Reset after every order."""

    name: str = ""
    email: str = ""

    @property
    def is_filled(self) -> bool:
        return bool(self.name.strip() and self.email.strip())
