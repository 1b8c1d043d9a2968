"""CLI adapter printing the live valuation of a user's portfolio.

The access token comes from ``SUPABASE_ACCESS_TOKEN``; it is verified, the
user's rows are read and priced, and one line per row is printed followed
by the net worth.
"""

import asyncio
import os

from src.application.identity_context import IdentityContext
from src.domain.services.breakdown import (
    format_amount,
    format_net_worth,
    format_quantity,
)
from src.infrastructure.container import (
    build_identity_provider,
    build_value_portfolio_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.supabase_auth import AuthenticationError


def main() -> None:
    """Value the portfolio of the token's user and print it."""
    logger = get_app_logger()
    access_token = os.getenv("SUPABASE_ACCESS_TOKEN")
    if not access_token:
        logger.warning("SUPABASE_ACCESS_TOKEN is required to value a portfolio.")
        return

    settings = DashboardSettings.from_env()
    identity_context = IdentityContext(logger=logger)
    provider = build_identity_provider(identity_context, settings)
    try:
        identity = provider.sign_in(access_token)
    except AuthenticationError as exc:
        logger.error(str(exc))
        return

    use_case = build_value_portfolio_use_case(settings=settings)
    summary = asyncio.run(use_case.execute(identity))

    for item in summary.items:
        marker = "-" if item.is_liability else "+"
        note = "" if item.price_available else " (price unavailable)"
        print(
            f"{marker} {item.name}: {format_quantity(item)} "
            f"@ {format_amount(item.current_price)} = "
            f"{format_amount(item.total_value)}{note}"
        )
    print(
        f"Net worth: {format_net_worth(summary.net_worth)} "
        f"({summary.asset_count} assets)"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
