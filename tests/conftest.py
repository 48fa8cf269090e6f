"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables before storefront modules are imported
os.environ.setdefault("STOREFRONT_API_LATENCY_MS", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from storefront.cart import CartStore
from storefront.catalog import Catalog, Product
from storefront.shop import Shop


@pytest.fixture
def sample_product():
    """Sample product"""
    return Product(id="prod1", name="Wireless Earbuds", unit_price="79.99")


@pytest.fixture
def catalog():
    """Default eight-product catalog"""
    return Catalog()


@pytest.fixture
def cart_store(catalog):
    """Empty cart over the default catalog"""
    return CartStore(catalog)


@pytest.fixture
def shop():
    """Shop with no simulated latency"""
    return Shop(latency=0)


@pytest.fixture
def slow_shop():
    """Shop with a short but real latency window"""
    return Shop(latency=0.01)
