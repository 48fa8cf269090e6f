"""Cart store: owns the product id -> cart line mapping."""
from dataclasses import replace
from typing import Optional

from storefront.catalog import Catalog
from storefront.errors import ProductNotFound
from storefront.logging import get_logger, sanitize_id_for_logging

from .models import CartLine

logger = get_logger(__name__)


class CartStore:
    """
    In-memory cart keyed by product id, ordered by first insertion.

    Invariants:
    - at most one line per product id
    - every line has quantity >= 1; lowering a quantity to 0 or below
      removes the line

    The store is synchronous; callers serialize access through the gateway.
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._lines: dict[str, CartLine] = {}

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def lines(self) -> list[CartLine]:
        """Copies of the current lines in insertion order."""
        return [replace(line) for line in self._lines.values()]

    def get(self, product_id: str) -> Optional[CartLine]:
        """Copy of the line for product_id, or None."""
        line = self._lines.get(product_id)
        return replace(line) if line else None

    def add(self, product_id: str) -> CartLine:
        """Add one unit of a catalog product."""
        product = self._catalog.get(product_id)
        if product is None:
            logger.warning(f"Add to cart for unknown product {sanitize_id_for_logging(product_id)}")
            raise ProductNotFound(product_id)

        existing = self._lines.get(product_id)
        if existing:
            existing.quantity += 1
            line = existing
        else:
            line = CartLine(
                product_id=product.id,
                product_name=product.name,
                unit_price=product.unit_price,
                quantity=1,
            )
            self._lines[product_id] = line

        logger.debug(f"Cart line {sanitize_id_for_logging(product_id)} quantity={line.quantity}")
        return replace(line)

    def remove(self, product_id: str) -> bool:
        """Remove the line for product_id. Absent ids are a no-op."""
        removed = self._lines.pop(product_id, None) is not None
        if removed:
            logger.debug(f"Cart line {sanitize_id_for_logging(product_id)} removed")
        return removed

    def set_quantity(self, product_id: str, new_quantity: int) -> Optional[CartLine]:
        """Overwrite a line's quantity; <= 0 removes it. Absent ids are a no-op."""
        if new_quantity <= 0:
            self.remove(product_id)
            return None

        line = self._lines.get(product_id)
        if line is None:
            return None

        line.quantity = new_quantity
        logger.debug(f"Cart line {sanitize_id_for_logging(product_id)} quantity={new_quantity}")
        return replace(line)

    def clear(self) -> None:
        """Drop every line."""
        self._lines.clear()
