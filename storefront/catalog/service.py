"""
Catalog Service

Fixed, process-wide product list. Read-only after initialization.
"""
from collections.abc import Iterable
from typing import Optional

from storefront.logging import get_logger

from .models import Product

logger = get_logger(__name__)


DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(id="prod1", name="Wireless Earbuds", unit_price="79.99"),
    Product(id="prod2", name="Smartwatch Pro", unit_price="199.99"),
    Product(id="prod3", name="Portable Bluetooth Speaker", unit_price="49.99"),
    Product(id="prod4", name="Noise-Cancelling Headphones", unit_price="149.99"),
    Product(id="prod5", name="USB-C Hub Adapter", unit_price="29.99"),
    Product(id="prod6", name="Ergonomic Mouse", unit_price="34.99"),
    Product(id="prod7", name="Mechanical Keyboard", unit_price="89.99"),
    Product(id="prod8", name="Webcam HD", unit_price="59.99"),
)


class Catalog:
    """Immutable product catalog keyed by product id."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        items = tuple(DEFAULT_PRODUCTS if products is None else products)
        by_id: dict[str, Product] = {}
        for product in items:
            if product.id in by_id:
                raise ValueError(f"Duplicate product id in catalog: {product.id}")
            by_id[product.id] = product
        self._products = items
        self._by_id = by_id
        logger.debug(f"Catalog initialized with {len(items)} products")

    def list(self) -> list[Product]:
        """Return every product in definition order."""
        return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        """Look up a product by id."""
        return self._by_id.get(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __len__(self) -> int:
        return len(self._products)
