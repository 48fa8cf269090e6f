"""Cart package: models, store, and pricing."""
from .models import CartLine, LinePricing, PricingSnapshot
from .pricing import compute_pricing
from .service import CartStore

__all__ = [
    "CartLine",
    "LinePricing",
    "PricingSnapshot",
    "compute_pricing",
    "CartStore",
]
