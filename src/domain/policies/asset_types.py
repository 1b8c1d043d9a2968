"""Policies deciding how an asset type is valued and displayed."""

from collections.abc import Iterable

from src.domain.constants import CASH_TYPE, LIABILITY_TYPE


def normalize_asset_type(asset_type: str | None) -> str:
    """Normalize an asset type tag for comparison.

    Args:
        asset_type: Raw type value from the asset store.

    Returns:
        str: Lowercased, stripped type tag (empty when missing).
    """
    if not asset_type:
        return ""
    return asset_type.strip().lower()


def is_cash(asset_type: str | None) -> bool:
    """Return True when the type is priced at one unit without lookup."""
    return normalize_asset_type(asset_type) == CASH_TYPE


def is_liability(asset_type: str | None) -> bool:
    """Return True when the type is subtracted from net worth."""
    return normalize_asset_type(asset_type) == LIABILITY_TYPE


def strip_display_suffix(symbol: str | None, suffixes: Iterable[str]) -> str:
    """Remove a market suffix from a symbol for display.

    Args:
        symbol: Ticker as stored, e.g. ``2330.TW``.
        suffixes: Suffixes to hide.

    Returns:
        str: Symbol without the first matching suffix.
    """
    if not symbol:
        return ""
    upper = symbol.upper()
    for suffix in suffixes:
        if suffix and upper.endswith(suffix.upper()):
            return symbol[: -len(suffix)]
    return symbol


__all__ = [
    "normalize_asset_type",
    "is_cash",
    "is_liability",
    "strip_display_suffix",
]
