"""
Shop - Storefront State Owner

Single owned object holding the catalog, cart, pricing snapshot, checkout
transaction and gateway. The presentation layer sends intents and reads
projections; it never touches the cart directly.

Usage:
    shop = get_shop()
    await shop.add_to_cart("prod1")
    shop.current_pricing.grand_total
"""
from typing import Optional

from storefront.cart import CartLine, CartStore, PricingSnapshot, compute_pricing
from storefront.catalog import Catalog, Product
from storefront.checkout import CheckoutForm, CheckoutReceipt, CheckoutTransaction
from storefront.errors import EmptyCartError
from storefront.gateway import AsyncGateway, OperationState
from storefront.logging import get_logger

logger = get_logger(__name__)


class Shop:
    """
    Intents (all pass through the gateway):
    - fetch_products / fetch_cart
    - add_to_cart / remove_from_cart / set_quantity
    - checkout

    Projections:
    - current_cart, current_pricing, operation_state, current_receipt
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        latency: Optional[float] = None,
    ):
        self.catalog = catalog if catalog is not None else Catalog()
        self.gateway = AsyncGateway(latency=latency)
        self._cart = CartStore(self.catalog)
        self._checkout = CheckoutTransaction(self._cart)
        self._pricing = compute_pricing([])
        self._products: list[Product] = []

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    @property
    def products(self) -> list[Product]:
        """Products loaded by the last fetch_products call."""
        return list(self._products)

    @property
    def current_cart(self) -> list[CartLine]:
        return self._cart.lines()

    @property
    def current_pricing(self) -> PricingSnapshot:
        return self._pricing

    @property
    def operation_state(self) -> OperationState:
        return self.gateway.state

    @property
    def current_receipt(self) -> Optional[CheckoutReceipt]:
        return self._checkout.current_receipt

    @property
    def last_receipt(self) -> Optional[CheckoutReceipt]:
        """Most recent receipt, kept after it is dismissed."""
        return self._checkout.last_receipt

    @property
    def receipts(self) -> tuple[CheckoutReceipt, ...]:
        return self._checkout.receipts

    @property
    def checkout_form(self) -> CheckoutForm:
        return self._checkout.form

    @property
    def can_checkout(self) -> bool:
        """Checkout is allowed: idle, non-empty cart, name and email present."""
        return not self.gateway.busy and not self._cart.is_empty and self._checkout.form.is_filled

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    async def fetch_products(self) -> list[Product]:
        """Load the catalog through a simulated round trip."""
        products = await self.gateway.run(self.catalog.list, name="fetch_products")
        self._products = products
        return list(products)

    async def fetch_cart(self) -> tuple[list[CartLine], PricingSnapshot]:
        """Read the cart and its totals as of the moment the call resolves."""

        def _read():
            lines = self._cart.lines()
            return lines, compute_pricing(lines)

        return await self.gateway.run(_read, name="fetch_cart")

    async def add_to_cart(self, product_id: str) -> CartLine:
        def _add():
            line = self._cart.add(product_id)
            self._reprice()
            return line

        return await self.gateway.run(_add, name="add_to_cart")

    async def remove_from_cart(self, product_id: str) -> bool:
        def _remove():
            removed = self._cart.remove(product_id)
            self._reprice()
            return removed

        return await self.gateway.run(_remove, name="remove_from_cart")

    async def set_quantity(self, product_id: str, quantity: int) -> Optional[CartLine]:
        def _set():
            line = self._cart.set_quantity(product_id, quantity)
            self._reprice()
            return line

        return await self.gateway.run(_set, name="set_quantity")

    async def checkout(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> CheckoutReceipt:
        """
        Complete the order for the current cart.

        The empty-cart check runs before dispatch when nothing is in flight;
        a checkout queued behind other intents re-checks once it gets its turn.

        Raises:
            EmptyCartError: the cart is empty
        """
        self._checkout.update_form(name=name, email=email)

        if not self.gateway.busy and self._cart.is_empty:
            self.gateway.reject(EmptyCartError())

        def _execute():
            receipt = self._checkout.execute(self._pricing)
            self._reprice()
            return receipt

        return await self.gateway.run(_execute, name="checkout")

    # ------------------------------------------------------------------
    # Local UI state
    # ------------------------------------------------------------------

    def update_checkout_form(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> CheckoutForm:
        return self._checkout.update_form(name=name, email=email)

    def dismiss_receipt(self) -> None:
        self._checkout.dismiss()

    def clear_error(self) -> None:
        self.gateway.clear_error()

    def _reprice(self) -> None:
        self._pricing = compute_pricing(self._cart.lines())


# Singleton instance
_shop: Optional[Shop] = None


def get_shop() -> Shop:
    """Get the process-wide Shop."""
    global _shop
    if _shop is None:
        _shop = Shop()
        logger.info(f"Shop initialized with {len(_shop.catalog)} products")
    return _shop


__all__ = [
    "Shop",
    "get_shop",
]
