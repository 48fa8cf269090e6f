"""Checkout package: receipt models and the checkout transaction."""
from .models import CheckoutForm, CheckoutReceipt, CheckoutState, ReceiptLine
from .service import CheckoutTransaction, ReceiptIdAllocator

__all__ = [
    "CheckoutForm",
    "CheckoutReceipt",
    "CheckoutState",
    "ReceiptLine",
    "CheckoutTransaction",
    "ReceiptIdAllocator",
]
