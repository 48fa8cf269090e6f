"""Pricing calculator: pure function from cart lines to totals."""
from collections.abc import Iterable
from decimal import Decimal

from storefront.services.money import ZERO, add

from .models import CartLine, LinePricing, PricingSnapshot


def compute_pricing(lines: Iterable[CartLine]) -> PricingSnapshot:
    """
    Compute line subtotals and the grand total.

    Each subtotal is unit_price * quantity rounded half-up to cents; the
    grand total is the sum of the rounded subtotals. An empty cart yields
    a zero total.
    """
    line_pricing: list[LinePricing] = []
    grand_total: Decimal = ZERO
    item_count = 0

    for line in lines:
        subtotal = line.subtotal
        line_pricing.append(LinePricing(product_id=line.product_id, line_subtotal=subtotal))
        grand_total = add(grand_total, subtotal)
        item_count += line.quantity

    return PricingSnapshot(
        lines=tuple(line_pricing),
        grand_total=grand_total,
        item_count=item_count,
    )


__all__ = ["compute_pricing"]
