"""Domain constants for portfolio valuation."""

from decimal import Decimal

CASH_TYPE = "cash"
LIABILITY_TYPE = "liability"

# Price of one unit of cash in the reporting currency.
CASH_UNIT_PRICE = Decimal("1")
UNAVAILABLE_PRICE = Decimal("0")

# Market suffixes hidden when a symbol is displayed. Lookups keep them.
DISPLAY_SUFFIXES = (".TW",)

LIABILITY_COLOR = "#ff4d4d"
ASSET_PALETTE = (
    "#ffffff",
    "#888888",
    "#444444",
    "#222222",
)


__all__ = [
    "CASH_TYPE",
    "LIABILITY_TYPE",
    "CASH_UNIT_PRICE",
    "UNAVAILABLE_PRICE",
    "DISPLAY_SUFFIXES",
    "LIABILITY_COLOR",
    "ASSET_PALETTE",
]
