"""Chart and display helpers derived from a portfolio summary."""

from decimal import Decimal

from src.domain.constants import ASSET_PALETTE, LIABILITY_COLOR
from src.domain.models import ChartSlice, EnrichedAsset, PortfolioSummary


def build_chart_slices(summary: PortfolioSummary) -> list[ChartSlice]:
    """Build donut slices, one per item, in summary order.

    Liabilities are drawn in a fixed warning color. Other items cycle
    through the asset palette by position.

    Args:
        summary: Valued portfolio.

    Returns:
        list[ChartSlice]: Chart-ready slices.
    """
    slices: list[ChartSlice] = []
    for index, item in enumerate(summary.items):
        color = (
            LIABILITY_COLOR
            if item.is_liability
            else ASSET_PALETTE[index % len(ASSET_PALETTE)]
        )
        slices.append(
            ChartSlice(
                label=item.name,
                value=float(item.total_value),
                color=color,
                is_liability=item.is_liability,
                value_label=format_amount(item.total_value),
            )
        )
    return slices


def format_net_worth(value: Decimal) -> str:
    """Format net worth with thousands separators and no decimals."""
    return f"{value:,.0f}"


def format_amount(value: Decimal) -> str:
    """Format a monetary amount with two decimals."""
    return f"{value:,.2f}"


def format_quantity(item: EnrichedAsset) -> str:
    """Format the held quantity with the display symbol, e.g. ``10 2330``."""
    return f"{item.amount.normalize():f} {item.display_symbol}".strip()


__all__ = [
    "build_chart_slices",
    "format_net_worth",
    "format_amount",
    "format_quantity",
]
