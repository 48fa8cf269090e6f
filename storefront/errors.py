"""
Storefront Errors

Centralized error messages and the exception hierarchy surfaced through
the gateway error channel. Every error here is recoverable: the caller may
clear it and retry.
"""

# Cart errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CART_EMPTY = "Your cart is empty. Add items before checking out."

# Generic errors
ERROR_INTERNAL = "Internal error"


class OperationError(Exception):
    """Failure reported through the simulated gateway."""

    default_message = ERROR_INTERNAL

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ProductNotFound(OperationError):
    """Add-to-cart referenced an id missing from the catalog."""

    default_message = ERROR_PRODUCT_NOT_FOUND

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(ERROR_PRODUCT_NOT_FOUND)


class EmptyCartError(OperationError):
    """Checkout attempted with no cart lines."""

    default_message = ERROR_CART_EMPTY


__all__ = [
    "ERROR_PRODUCT_NOT_FOUND",
    "ERROR_CART_EMPTY",
    "ERROR_INTERNAL",
    "OperationError",
    "ProductNotFound",
    "EmptyCartError",
]
