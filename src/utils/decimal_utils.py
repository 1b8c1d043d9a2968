"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_price(value) -> Decimal | None:
    """Parse a quoted unit price, rejecting anything that is not a price.

    Args:
        value: Raw value returned by a price source.

    Returns:
        Decimal | None: Finite non-negative price, or None when unusable.
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, Decimal, str)):
        return None
    try:
        price = coerce_decimal(value)
    except (InvalidOperation, ValueError):
        return None
    if not price.is_finite() or price < 0:
        return None
    return price


__all__ = ["coerce_decimal", "parse_price"]
