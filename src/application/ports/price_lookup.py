"""Application port for live market prices."""

from decimal import Decimal
from typing import Protocol


class PriceLookupPort(Protocol):
    """Port returning a best-effort unit price for a symbol.

    Implementations must settle within a bounded time and return
    ``Decimal("0")`` instead of raising when no price is available.
    """

    async def lookup(self, symbol: str, asset_type: str) -> Decimal:
        """Return the current unit price of ``symbol`` in the reporting
        currency, or zero when unavailable."""


__all__ = ["PriceLookupPort"]
