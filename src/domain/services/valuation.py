"""Portfolio valuation: enrich asset rows with live prices and sum net worth.

Every non-cash record is priced through an injected lookup. All lookups are
started together and joined before the summary is built, so the slowest
quote bounds the latency. A failed quote degrades that record to a zero
price; it never aborts the valuation.
"""

import asyncio
import inspect
import logging
from collections.abc import Callable, Sequence
from decimal import Decimal
from logging import Logger

from src.domain.constants import CASH_UNIT_PRICE, UNAVAILABLE_PRICE
from src.domain.models import AssetRecord, EnrichedAsset, PortfolioSummary
from src.domain.policies.asset_types import is_cash, is_liability
from src.utils.decimal_utils import coerce_decimal, parse_price


PriceLookup = Callable[[str, str], object]


async def valuate(
    records: Sequence[AssetRecord],
    price_lookup: PriceLookup,
    *,
    logger: Logger | None = None,
) -> PortfolioSummary:
    """Value a portfolio with live prices.

    Args:
        records: Asset rows in display order.
        price_lookup: Callable ``(symbol, type)`` returning a unit price or
            an awaitable of one.
        logger: Logger used for degraded lookups.

    Returns:
        PortfolioSummary: One enriched item per record, in input order, and
        the signed net worth.

    Raises:
        TypeError: If ``records`` is not a sequence.
    """
    if not isinstance(records, Sequence) or isinstance(records, (str, bytes)):
        raise TypeError(
            f"records must be a sequence of AssetRecord, got "
            f"{type(records).__name__}"
        )
    resolved_logger = logger or logging.getLogger(__name__)

    results = await asyncio.gather(
        *(
            _enrich(record, price_lookup, resolved_logger)
            for record in records
        )
    )

    net_worth = sum(
        (contribution for _, contribution in results),
        Decimal("0"),
    )
    return PortfolioSummary(
        net_worth=net_worth,
        items=[item for item, _ in results],
    )


async def _enrich(
    record: AssetRecord,
    price_lookup: PriceLookup,
    logger: Logger,
) -> tuple[EnrichedAsset, Decimal]:
    price, available = await _resolve_price(record, price_lookup, logger)
    amount = coerce_decimal(record.amount)
    raw_value = price * amount
    item = EnrichedAsset(
        id=record.id,
        name=record.name,
        symbol=record.symbol,
        amount=amount,
        type=record.type,
        current_price=price,
        total_value=raw_value,
        price_available=available,
    )
    return item, net_worth_contribution(record.type, raw_value)


async def _resolve_price(
    record: AssetRecord,
    price_lookup: PriceLookup,
    logger: Logger,
) -> tuple[Decimal, bool]:
    if is_cash(record.type):
        return CASH_UNIT_PRICE, True
    try:
        result = price_lookup(record.symbol, record.type)
        if inspect.isawaitable(result):
            result = await result
    except Exception as exc:
        logger.warning(f"Price lookup failed for {record.symbol}: {exc}")
        return UNAVAILABLE_PRICE, False

    price = parse_price(result)
    if price is None:
        logger.warning(
            f"Price lookup returned no usable price for {record.symbol}: "
            f"{result!r}"
        )
        return UNAVAILABLE_PRICE, False
    return price, True


def net_worth_contribution(asset_type: str, raw_value: Decimal) -> Decimal:
    """Return the signed amount a valued row adds to net worth.

    Args:
        asset_type: Type tag of the row.
        raw_value: Unit price times amount.

    Returns:
        Decimal: ``-abs(raw_value)`` for liabilities, ``raw_value`` otherwise.
    """
    if is_liability(asset_type):
        return -abs(raw_value)
    return raw_value


__all__ = ["PriceLookup", "valuate", "net_worth_contribution"]
