"""
Money Utilities - Safe Decimal operations for monetary values.

All prices and totals are Decimal; floats only appear at the edges.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Two decimal places, standard (half-up) rounding
MONEY_PRECISION = Decimal("0.01")

ZERO = Decimal("0.00")


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Go through str so 79.99 stays 79.99
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_money(value: Union[Number, None]) -> Decimal:
    """
    Convert a price to Decimal, rejecting anything that is not one.

    Raises:
        ValueError: value is None, not numeric, not finite, or negative
    """
    if value is None or isinstance(value, bool):
        raise ValueError("Price is required")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValueError(f"Invalid price: {value!r}") from None
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Invalid price: {value!r}")
    return amount


def round_money(value: Number) -> Decimal:
    """Round monetary value to two decimal places."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def format_money(value: Number, symbol: str = "$") -> str:
    """
    Format monetary value with a currency symbol.

    Args:
        value: Value to format
        symbol: Symbol placed before the amount

    Returns:
        Formatted string, e.g. "$1,159.98"
    """
    return f"{symbol}{round_money(value):,.2f}"


__all__ = [
    "MONEY_PRECISION",
    "ZERO",
    "to_decimal",
    "parse_money",
    "round_money",
    "add",
    "multiply",
    "format_money",
]
