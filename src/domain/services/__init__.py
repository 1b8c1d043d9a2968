"""Domain services package."""

from .breakdown import (
    build_chart_slices,
    format_amount,
    format_net_worth,
    format_quantity,
)
from .valuation import PriceLookup, net_worth_contribution, valuate

__all__ = [
    "PriceLookup",
    "build_chart_slices",
    "format_amount",
    "format_net_worth",
    "format_quantity",
    "net_worth_contribution",
    "valuate",
]
