"""Shared services used across storefront domains."""
from .money import to_decimal, parse_money, round_money, format_money

__all__ = [
    "to_decimal",
    "parse_money",
    "round_money",
    "format_money",
]
