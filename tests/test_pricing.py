"""
Tests for the pricing calculator
"""
from decimal import Decimal

from storefront.cart import CartLine, PricingSnapshot, compute_pricing


def _line(product_id: str, price: str, quantity: int) -> CartLine:
    return CartLine(product_id=product_id, product_name=product_id, unit_price=price, quantity=quantity)


def test_empty_cart_totals_zero():
    snapshot = compute_pricing([])

    assert snapshot == PricingSnapshot()
    assert snapshot.grand_total == Decimal("0")
    assert snapshot.item_count == 0


def test_line_subtotals_and_grand_total():
    snapshot = compute_pricing([_line("prod1", "79.99", 2), _line("prod5", "29.99", 3)])

    assert [(p.product_id, p.line_subtotal) for p in snapshot.lines] == [
        ("prod1", Decimal("159.98")),
        ("prod5", Decimal("89.97")),
    ]
    assert snapshot.grand_total == Decimal("249.95")
    assert snapshot.item_count == 5


def test_grand_total_sums_rounded_subtotals():
    snapshot = compute_pricing([_line("a", "0.335", 1), _line("b", "0.335", 1)])

    # each line rounds to 0.34 before summing
    assert snapshot.grand_total == Decimal("0.68")


def test_pure_and_deterministic():
    lines = [_line("prod1", "79.99", 1)]

    first = compute_pricing(lines)
    second = compute_pricing(lines)

    assert first == second
    assert lines[0].quantity == 1


def test_subtotal_for():
    snapshot = compute_pricing([_line("prod1", "79.99", 1)])

    assert snapshot.subtotal_for("prod1") == Decimal("79.99")
    assert snapshot.subtotal_for("prod2") is None

