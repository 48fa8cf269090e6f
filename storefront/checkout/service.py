"""
Checkout Transaction

Turns the current cart into an immutable receipt, then empties the cart
and resets the checkout form. Two states only: IDLE and COMPLETED. The
gateway busy flag covers the time in between.
"""
import time
from datetime import datetime, timezone
from typing import Optional

from storefront.cart import CartStore, PricingSnapshot, compute_pricing
from storefront.config import RECEIPT_ID_PREFIX
from storefront.errors import EmptyCartError
from storefront.logging import get_logger
from storefront.services.money import format_money

from .models import CheckoutForm, CheckoutReceipt, CheckoutState, ReceiptLine

logger = get_logger(__name__)


class ReceiptIdAllocator:
    """
    Issues `receipt-<epoch millis>` ids, unique within the process.

    Two checkouts in the same millisecond get consecutive values.
    """

    def __init__(self, prefix: str = RECEIPT_ID_PREFIX):
        self.prefix = prefix
        self._last = 0

    def next_id(self) -> str:
        stamp = max(int(time.time() * 1000), self._last + 1)
        self._last = stamp
        return f"{self.prefix}{stamp}"


# Process-wide; every transaction draws ids from it
_receipt_ids = ReceiptIdAllocator()


class CheckoutTransaction:
    """One-shot checkout over a CartStore."""

    def __init__(self, cart: CartStore, ids: Optional[ReceiptIdAllocator] = None):
        self._cart = cart
        self._ids = ids if ids is not None else _receipt_ids
        self.state = CheckoutState.IDLE
        self.form = CheckoutForm()
        self.last_receipt: Optional[CheckoutReceipt] = None
        self._receipts: list[CheckoutReceipt] = []

    @property
    def current_receipt(self) -> Optional[CheckoutReceipt]:
        """Receipt being displayed, or None once dismissed."""
        if self.state is CheckoutState.COMPLETED:
            return self.last_receipt
        return None

    @property
    def receipts(self) -> tuple[CheckoutReceipt, ...]:
        """Every receipt created by this transaction, oldest first."""
        return tuple(self._receipts)

    def ensure_ready(self) -> None:
        """Raise EmptyCartError unless the cart has at least one line."""
        if self._cart.is_empty:
            raise EmptyCartError()

    def update_form(self, name: Optional[str] = None, email: Optional[str] = None) -> CheckoutForm:
        """Update the transient form fields that were given."""
        changes = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email
        self.form = self.form.model_copy(update=changes)
        return self.form

    def execute(self, pricing: Optional[PricingSnapshot] = None) -> CheckoutReceipt:
        """
        Snapshot the cart into a receipt and clear it.

        Args:
            pricing: Snapshot for the current cart. Recomputed when omitted.

        Raises:
            EmptyCartError: the cart has no lines
        """
        self.ensure_ready()

        lines = self._cart.lines()
        if pricing is None:
            pricing = compute_pricing(lines)

        receipt = CheckoutReceipt(
            id=self._ids.next_id(),
            total=pricing.grand_total,
            timestamp=datetime.now(timezone.utc),
            items=tuple(ReceiptLine.from_cart_line(line) for line in lines),
        )

        self._cart.clear()
        self.form = CheckoutForm()
        self.last_receipt = receipt
        self._receipts.append(receipt)
        self.state = CheckoutState.COMPLETED

        logger.info(
            f"Checkout completed: {receipt.id}, {receipt.item_count} items, "
            f"total {format_money(receipt.total)}"
        )
        return receipt

    def dismiss(self) -> None:
        """Stop displaying the current receipt. Its data is kept."""
        self.state = CheckoutState.IDLE
