"""Application ports package."""

from .asset_repository import AssetRepositoryPort
from .database import DatabaseEnginePort
from .identity import IdentityProviderPort
from .price_lookup import PriceLookupPort

__all__ = [
    "AssetRepositoryPort",
    "DatabaseEnginePort",
    "IdentityProviderPort",
    "PriceLookupPort",
]
