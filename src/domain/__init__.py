"""Domain package for valuation rules and core models."""

from .constants import CASH_TYPE, LIABILITY_TYPE
from .models import (
    AssetRecord,
    ChartSlice,
    EnrichedAsset,
    Identity,
    PortfolioSummary,
)
from .policies import (
    is_cash,
    is_liability,
    normalize_asset_type,
    strip_display_suffix,
)
from .services import (
    build_chart_slices,
    format_net_worth,
    net_worth_contribution,
    valuate,
)

__all__ = [
    "CASH_TYPE",
    "LIABILITY_TYPE",
    "AssetRecord",
    "ChartSlice",
    "EnrichedAsset",
    "Identity",
    "PortfolioSummary",
    "is_cash",
    "is_liability",
    "normalize_asset_type",
    "strip_display_suffix",
    "build_chart_slices",
    "format_net_worth",
    "net_worth_contribution",
    "valuate",
]
