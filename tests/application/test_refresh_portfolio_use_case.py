"""Tests for the RefreshPortfolioUseCase."""

import asyncio
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.identity_context import IdentityContext
from src.application.use_cases.refresh_portfolio import (
    RefreshPortfolioUseCase,
)
from src.domain.models import Identity, PortfolioSummary


class _FakeValuePortfolio:
    def __init__(self, on_execute=None) -> None:
        self.identities: list[Identity | None] = []
        self._on_execute = on_execute

    async def execute(self, identity: Identity | None) -> PortfolioSummary:
        self.identities.append(identity)
        await asyncio.sleep(0)
        if self._on_execute is not None:
            self._on_execute()
        return PortfolioSummary(net_worth=Decimal("42"), items=[])


def _build(identity: Identity | None = None, on_execute=None):
    context = IdentityContext(identity, logger=MagicMock())
    value_portfolio = _FakeValuePortfolio(on_execute)
    use_case = RefreshPortfolioUseCase(
        context,
        value_portfolio,
        logger=MagicMock(),
    )
    return context, value_portfolio, use_case


def test_refresh_without_identity_returns_none() -> None:
    """Signed-out refresh should not value anything."""
    _, value_portfolio, use_case = _build()

    result = asyncio.run(use_case.refresh())

    assert result is None
    assert use_case.latest is None
    assert value_portfolio.identities == []


def test_refresh_stores_latest_summary() -> None:
    """A completed valuation becomes the latest summary."""
    identity = Identity(user_id="u-1")
    _, value_portfolio, use_case = _build(identity)

    result = asyncio.run(use_case.refresh())

    assert result is use_case.latest
    assert result.net_worth == Decimal("42")
    assert value_portfolio.identities == [identity]


def test_refresh_discards_result_when_identity_changes_mid_flight() -> None:
    """A valuation for a user who signed out must not be kept."""
    context = IdentityContext(Identity(user_id="u-1"), logger=MagicMock())

    def _switch_user() -> None:
        context.set(Identity(user_id="u-2"))

    use_case = RefreshPortfolioUseCase(
        context,
        _FakeValuePortfolio(on_execute=_switch_user),
        logger=MagicMock(),
    )

    result = asyncio.run(use_case.refresh())

    assert result is None
    assert use_case.latest is None


def test_attach_refreshes_on_sign_in() -> None:
    """Signing in while attached should schedule a refresh."""
    context, value_portfolio, use_case = _build()

    async def _run():
        use_case.attach()
        context.set(Identity(user_id="u-1"))
        pending = use_case.pending
        assert pending is not None
        return await pending

    result = asyncio.run(_run())

    assert result.net_worth == Decimal("42")
    assert use_case.latest is result
    assert [i.user_id for i in value_portfolio.identities] == ["u-1"]


def test_sign_out_cancels_pending_refresh_and_clears_latest() -> None:
    """Signing out should drop both the running refresh and old data."""
    context, _, use_case = _build()

    async def _run():
        use_case.attach()
        context.set(Identity(user_id="u-1"))
        pending = use_case.pending
        context.clear()
        await asyncio.sleep(0)
        return pending

    pending = asyncio.run(_run())

    assert pending.cancelled()
    assert use_case.pending is None
    assert use_case.latest is None


def test_detach_stops_listening() -> None:
    """After detach, identity changes do not schedule refreshes."""
    context, value_portfolio, use_case = _build()

    async def _run():
        use_case.attach()
        use_case.detach()
        context.set(Identity(user_id="u-1"))
        await asyncio.sleep(0)

    asyncio.run(_run())

    assert use_case.pending is None
    assert value_portfolio.identities == []


def test_attach_without_running_loop_leaves_refresh_to_caller() -> None:
    """Outside an event loop a sign in only updates the identity."""
    context, value_portfolio, use_case = _build()
    use_case.attach()

    context.set(Identity(user_id="u-1"))

    assert use_case.pending is None
    assert value_portfolio.identities == []
    assert asyncio.run(use_case.refresh()).net_worth == Decimal("42")
