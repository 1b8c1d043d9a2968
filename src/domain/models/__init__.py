"""Domain models package."""

from .portfolio import (
    AssetRecord,
    ChartSlice,
    EnrichedAsset,
    Identity,
    PortfolioSummary,
)

__all__ = [
    "AssetRecord",
    "ChartSlice",
    "EnrichedAsset",
    "Identity",
    "PortfolioSummary",
]
