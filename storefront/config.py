"""
Storefront Configuration

Settings are read once from the environment at import time.
Constructors accept explicit overrides, so tests never need to patch these.
"""

import os

# Simulated network round trip for every gateway call
API_LATENCY_MS = int(os.environ.get("STOREFRONT_API_LATENCY_MS", "500"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# "production" switches logging to the compact format
STOREFRONT_ENV = os.environ.get("STOREFRONT_ENV", "development")

# Prefix of generated receipt ids
RECEIPT_ID_PREFIX = "receipt-"


def is_production() -> bool:
    """Check whether the process runs with production settings."""
    return STOREFRONT_ENV.lower() == "production"


def get_api_latency() -> float:
    """Get the simulated latency in seconds."""
    return max(API_LATENCY_MS, 0) / 1000
