"""Use case to value the signed-in user's portfolio with live prices."""

import asyncio

from src.application.ports.asset_repository import AssetRepositoryPort
from src.application.ports.price_lookup import PriceLookupPort
from src.domain.models import Identity, PortfolioSummary
from src.domain.services.valuation import valuate
from src.infrastructure.logging.logger import get_app_logger


class ValuePortfolioUseCase:
    """Read the user's asset rows and value them."""

    def __init__(
        self,
        asset_repository: AssetRepositoryPort,
        price_lookup: PriceLookupPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            asset_repository: Port reading asset rows for a user.
            price_lookup: Port returning live unit prices.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._asset_repository = asset_repository
        self._price_lookup = price_lookup
        self._logger = logger or get_app_logger()

    async def execute(self, identity: Identity | None) -> PortfolioSummary:
        """Return the valued portfolio for ``identity``.

        Args:
            identity: Signed-in user. None yields an empty summary without
                reading rows or prices.

        Returns:
            PortfolioSummary: Enriched items and net worth.
        """
        if identity is None:
            return PortfolioSummary()

        records = await asyncio.to_thread(
            self._asset_repository.fetch_assets,
            identity.user_id,
        )
        summary = await valuate(
            records,
            self._price_lookup.lookup,
            logger=self._logger,
        )

        self._logger.info(
            f"Portfolio valued: items={summary.asset_count}, "
            f"unavailable={summary.unavailable_count}, "
            f"net_worth={summary.net_worth}"
        )
        return summary


__all__ = ["ValuePortfolioUseCase"]
