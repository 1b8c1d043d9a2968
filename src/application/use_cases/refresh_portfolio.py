"""Use case keeping the dashboard's portfolio in step with the identity."""

import asyncio

from src.application.identity_context import IdentityContext
from src.application.use_cases.value_portfolio import ValuePortfolioUseCase
from src.domain.models import Identity, PortfolioSummary
from src.infrastructure.logging.logger import get_app_logger


class RefreshPortfolioUseCase:
    """Value the portfolio on sign in and on explicit refresh.

    A valuation started for one identity is discarded if the identity has
    changed by the time all prices are in.
    """

    def __init__(
        self,
        identity_context: IdentityContext,
        value_portfolio: ValuePortfolioUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            identity_context: Observable holder of the signed-in identity.
            value_portfolio: Use case valuing one identity's portfolio.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._identity_context = identity_context
        self._value_portfolio = value_portfolio
        self._logger = logger or get_app_logger()
        self._latest: PortfolioSummary | None = None
        self._pending: asyncio.Task | None = None
        self._unsubscribe = None

    @property
    def latest(self) -> PortfolioSummary | None:
        """Most recent summary for the current identity, if any."""
        return self._latest

    @property
    def pending(self) -> asyncio.Task | None:
        """Refresh scheduled by the last sign in, if still tracked."""
        return self._pending

    async def refresh(self) -> PortfolioSummary | None:
        """Value the portfolio of the current identity.

        Returns:
            PortfolioSummary | None: The new summary, or None when nobody is
            signed in or the identity changed during the valuation.
        """
        identity = self._identity_context.current
        if identity is None:
            self._latest = None
            return None

        summary = await self._value_portfolio.execute(identity)

        if not _same_user(self._identity_context.current, identity):
            self._logger.info(
                "Discarding portfolio valuation: identity changed while "
                "prices were loading"
            )
            return None
        self._latest = summary
        return summary

    def attach(self) -> None:
        """Start refreshing on identity changes."""
        if self._unsubscribe is None:
            self._unsubscribe = self._identity_context.subscribe(
                self._on_identity_changed
            )

    def detach(self) -> None:
        """Stop listening and cancel any scheduled refresh."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._cancel_pending()

    def _on_identity_changed(self, identity: Identity | None) -> None:
        self._cancel_pending()
        if identity is None:
            self._latest = None
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Callers without a running loop refresh explicitly.
            return
        self._pending = loop.create_task(self.refresh())

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None


def _same_user(left: Identity | None, right: Identity | None) -> bool:
    if left is None or right is None:
        return left is right
    return left.user_id == right.user_id


__all__ = ["RefreshPortfolioUseCase"]
