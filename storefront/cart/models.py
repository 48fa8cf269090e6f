"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from storefront.services.money import to_decimal, round_money, multiply


@dataclass
class CartLine:
    """Single product entry in the cart.

    Name and unit price are copied from the catalog on first add, so the
    line keeps the price it was added at.
    """
    product_id: str
    product_name: str
    unit_price: Decimal
    quantity: int = 1
    added_at: str = ""

    def __post_init__(self):
        if not self.added_at:
            self.added_at = datetime.now(timezone.utc).isoformat()
        self.unit_price = to_decimal(self.unit_price)

    @property
    def subtotal(self) -> Decimal:
        """Price for all units, rounded to cents."""
        return round_money(multiply(self.unit_price, self.quantity))


@dataclass(frozen=True)
class LinePricing:
    """Subtotal of one cart line."""
    product_id: str
    line_subtotal: Decimal


@dataclass(frozen=True)
class PricingSnapshot:
    """Derived totals for a cart. Always recomputed, never patched."""
    lines: tuple[LinePricing, ...] = ()
    grand_total: Decimal = Decimal("0.00")
    item_count: int = 0

    def subtotal_for(self, product_id: str) -> Decimal | None:
        """Subtotal of the line for product_id, or None if absent."""
        for line in self.lines:
            if line.product_id == product_id:
                return line.line_subtotal
        return None


__all__ = [
    "CartLine",
    "LinePricing",
    "PricingSnapshot",
]
