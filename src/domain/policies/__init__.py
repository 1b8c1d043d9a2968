"""Domain policies package."""

from .asset_types import (
    is_cash,
    is_liability,
    normalize_asset_type,
    strip_display_suffix,
)

__all__ = [
    "is_cash",
    "is_liability",
    "normalize_asset_type",
    "strip_display_suffix",
]
