"""Catalog package: product model and the fixed product list."""
from .models import Product
from .service import Catalog, DEFAULT_PRODUCTS

__all__ = [
    "Product",
    "Catalog",
    "DEFAULT_PRODUCTS",
]
