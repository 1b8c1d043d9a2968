"""Domain models for portfolio valuation."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.constants import DISPLAY_SUFFIXES
from src.domain.policies import asset_types


@dataclass(frozen=True)
class AssetRecord:
    """One asset or liability row read from the asset store.

    Attributes:
        id: Opaque row identifier.
        name: Display label.
        symbol: Ticker used for price lookups, market suffix included.
        amount: Quantity held. Liabilities keep a positive amount.
        type: Category tag such as ``cash``, ``liability`` or ``stock``.
    """

    id: object
    name: str
    symbol: str
    amount: Decimal
    type: str


@dataclass(frozen=True)
class EnrichedAsset:
    """Asset record with its live unit price and computed value.

    Attributes:
        current_price: Unit price in the reporting currency.
        total_value: ``current_price * amount``. Not negated for liabilities.
        price_available: False when the price lookup degraded to zero.
    """

    id: object
    name: str
    symbol: str
    amount: Decimal
    type: str
    current_price: Decimal
    total_value: Decimal
    price_available: bool = True

    @property
    def is_liability(self) -> bool:
        return asset_types.is_liability(self.type)

    @property
    def display_symbol(self) -> str:
        return asset_types.strip_display_suffix(
            self.symbol,
            DISPLAY_SUFFIXES,
        )


@dataclass(frozen=True)
class PortfolioSummary:
    """Net worth and enriched items in input order."""

    net_worth: Decimal = Decimal("0")
    items: list[EnrichedAsset] = field(default_factory=list)

    @property
    def asset_count(self) -> int:
        return len(self.items)

    @property
    def unavailable_count(self) -> int:
        return sum(1 for item in self.items if not item.price_available)


@dataclass(frozen=True)
class Identity:
    """Authenticated user as seen by the dashboard."""

    user_id: str
    email: str | None = None
    access_token: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class ChartSlice:
    """One slice of the portfolio donut chart."""

    label: str
    value: float
    color: str
    is_liability: bool
    value_label: str


__all__ = [
    "AssetRecord",
    "EnrichedAsset",
    "PortfolioSummary",
    "Identity",
    "ChartSlice",
]
