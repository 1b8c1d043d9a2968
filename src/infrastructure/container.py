"""Composition root for wiring infrastructure adapters."""

from src.application.identity_context import IdentityContext
from src.application.ports.asset_repository import AssetRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.identity import IdentityProviderPort
from src.application.ports.price_lookup import PriceLookupPort
from src.application.use_cases.refresh_portfolio import (
    RefreshPortfolioUseCase,
)
from src.application.use_cases.value_portfolio import ValuePortfolioUseCase
from src.infrastructure.asset_repository import SqlAlchemyAssetRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.supabase_auth import SupabaseIdentityProvider
from src.infrastructure.yahoo_price_lookup import YahooPriceLookup


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_asset_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AssetRepositoryPort:
    """Return the repository reading asset rows."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAssetRepository(resolved_db)


def build_price_lookup(
    settings: DashboardSettings | None = None,
) -> PriceLookupPort:
    """Return the configured live price lookup."""
    resolved = settings or DashboardSettings.from_env()
    return YahooPriceLookup(
        timeout=resolved.price_timeout_seconds,
        relay_url=resolved.price_relay_url,
        logger=get_app_logger(),
    )


def build_identity_provider(
    identity_context: IdentityContext,
    settings: DashboardSettings | None = None,
) -> IdentityProviderPort:
    """Return the identity provider publishing to ``identity_context``."""
    resolved = settings or DashboardSettings.from_env()
    return SupabaseIdentityProvider(
        resolved,
        identity_context,
        logger=get_app_logger(),
    )


def build_value_portfolio_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> ValuePortfolioUseCase:
    """Return the portfolio valuation use case."""
    return ValuePortfolioUseCase(
        asset_repository=build_asset_repository(db_port),
        price_lookup=build_price_lookup(settings),
        logger=get_app_logger(),
    )


def build_refresh_portfolio_use_case(
    identity_context: IdentityContext,
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> RefreshPortfolioUseCase:
    """Return the refresh use case bound to ``identity_context``."""
    return RefreshPortfolioUseCase(
        identity_context,
        build_value_portfolio_use_case(db_port, settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_asset_repository",
    "build_price_lookup",
    "build_identity_provider",
    "build_value_portfolio_use_case",
    "build_refresh_portfolio_use_case",
]
