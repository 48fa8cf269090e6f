"""
Storefront Core Module

In-memory shopping cart behind a simulated client-server boundary:
- catalog: fixed product list
- cart: cart store and pricing calculator
- checkout: receipt snapshot and checkout transaction
- gateway: simulated latency, busy flag, error channel
- shop: owned state object exposing intents and projections

Note: Imports are lazy so `import storefront` does not configure logging
or build the default catalog.
"""

__version__ = "0.1.0"

__all__ = [
    "Shop",
    "get_shop",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "Shop":
        from storefront.shop import Shop
        return Shop
    elif name == "get_shop":
        from storefront.shop import get_shop
        return get_shop
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
