"""Tests for the portfolio valuation service."""

import asyncio
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import AssetRecord
from src.domain.services.valuation import net_worth_contribution, valuate


def _record(
    record_id,
    symbol: str,
    amount,
    asset_type: str,
    name: str | None = None,
) -> AssetRecord:
    return AssetRecord(
        id=record_id,
        name=name or symbol,
        symbol=symbol,
        amount=Decimal(str(amount)),
        type=asset_type,
    )


def _prices(mapping: dict[str, object]):
    calls: list[tuple[str, str]] = []

    async def lookup(symbol: str, asset_type: str):
        calls.append((symbol, asset_type))
        value = mapping[symbol]
        if isinstance(value, Exception):
            raise value
        return value

    return lookup, calls


def test_valuate_matches_reference_scenario() -> None:
    """Asset, cash and liability rows should combine into net worth 100."""
    records = [
        _record(1, "AAA", 10, "asset"),
        _record(2, "cash", 500, "cash"),
        _record(3, "BBB", 2, "liability"),
    ]
    lookup, _ = _prices({"AAA": 20, "BBB": 300})

    summary = asyncio.run(valuate(records, lookup, logger=MagicMock()))

    assert [item.total_value for item in summary.items] == [
        Decimal("200"),
        Decimal("500"),
        Decimal("600"),
    ]
    assert summary.net_worth == Decimal("100")


def test_valuate_empty_input_returns_zero_summary() -> None:
    """No records should produce zero net worth and no items."""
    lookup, calls = _prices({})

    summary = asyncio.run(valuate([], lookup, logger=MagicMock()))

    assert summary.net_worth == Decimal("0")
    assert summary.items == []
    assert calls == []


def test_valuate_prices_cash_at_one_without_lookup() -> None:
    """Cash rows should never reach the price lookup."""
    records = [_record("c", "TWD", 1234.5, "cash")]
    lookup, calls = _prices({"TWD": 99})

    summary = asyncio.run(valuate(records, lookup, logger=MagicMock()))

    item = summary.items[0]
    assert item.current_price == Decimal("1")
    assert item.total_value == Decimal("1234.5")
    assert item.price_available is True
    assert calls == []


def test_valuate_subtracts_liabilities_but_keeps_unsigned_value() -> None:
    """Liability value stays positive on the item and negative in net worth."""
    records = [_record("loan", "MORTGAGE", 3, "liability")]
    lookup, _ = _prices({"MORTGAGE": Decimal("1500.50")})

    summary = asyncio.run(valuate(records, lookup, logger=MagicMock()))

    assert summary.items[0].total_value == Decimal("4501.50")
    assert summary.net_worth == Decimal("-4501.50")


def test_valuate_adds_generic_asset_subtypes() -> None:
    """Any type other than cash and liability should add to net worth."""
    records = [
        _record(1, "BTC-USD", "0.5", "crypto"),
        _record(2, "2330.TW", 1000, "stock"),
    ]
    lookup, calls = _prices({"BTC-USD": 60000, "2330.TW": "950.5"})

    summary = asyncio.run(valuate(records, lookup, logger=MagicMock()))

    assert summary.net_worth == Decimal("30000.0") + Decimal("950500.0")
    assert ("2330.TW", "stock") in calls


def test_valuate_degrades_failed_lookup_to_zero() -> None:
    """A raising lookup should zero only its own row."""
    logger = MagicMock()
    records = [
        _record(1, "GOOD", 2, "stock"),
        _record(2, "BAD", 5, "stock"),
        _record(3, "DEBT", 1, "liability"),
    ]
    lookup, _ = _prices(
        {
            "GOOD": 10,
            "BAD": RuntimeError("rate limited"),
            "DEBT": 4,
        }
    )

    summary = asyncio.run(valuate(records, lookup, logger=logger))

    bad = summary.items[1]
    assert bad.current_price == Decimal("0")
    assert bad.total_value == Decimal("0")
    assert bad.price_available is False
    assert summary.items[0].total_value == Decimal("20")
    assert summary.net_worth == Decimal("16")
    assert summary.unavailable_count == 1
    logger.warning.assert_called_once()


@pytest.mark.parametrize(
    "bad_result",
    [None, "n/a", float("nan"), -3, object(), True],
)
def test_valuate_treats_unusable_results_as_unavailable(bad_result) -> None:
    """Non-numeric, missing or negative prices should degrade to zero."""
    records = [_record(1, "ODD", 4, "stock")]

    async def lookup(symbol: str, asset_type: str):
        return bad_result

    summary = asyncio.run(valuate(records, lookup, logger=MagicMock()))

    assert len(summary.items) == 1
    assert summary.items[0].current_price == Decimal("0")
    assert summary.items[0].price_available is False
    assert summary.net_worth == Decimal("0")


def test_valuate_accepts_synchronous_lookup() -> None:
    """Plain callables returning numbers should work as lookups."""
    records = [_record(1, "AAA", 3, "stock")]

    summary = asyncio.run(
        valuate(records, lambda symbol, asset_type: 7, logger=MagicMock())
    )

    assert summary.net_worth == Decimal("21")


def test_valuate_preserves_input_order_when_lookups_finish_reversed() -> None:
    """Items should follow input order, not lookup completion order."""
    records = [_record(i, f"S{i}", 1, "stock") for i in range(5)]

    async def lookup(symbol: str, asset_type: str):
        index = int(symbol[1:])
        await asyncio.sleep(0.01 * (5 - index))
        return index + 1

    summary = asyncio.run(valuate(records, lookup, logger=MagicMock()))

    assert [item.id for item in summary.items] == [0, 1, 2, 3, 4]
    assert [item.current_price for item in summary.items] == [
        Decimal(1),
        Decimal(2),
        Decimal(3),
        Decimal(4),
        Decimal(5),
    ]


def test_valuate_issues_lookups_concurrently() -> None:
    """Every lookup should start before any of them completes."""
    records = [_record(i, f"S{i}", 1, "stock") for i in range(3)]
    started: list[str] = []
    all_started = asyncio.Event()

    async def lookup(symbol: str, asset_type: str):
        started.append(symbol)
        if len(started) == len(records):
            all_started.set()
        await asyncio.wait_for(all_started.wait(), timeout=1.0)
        return 1

    summary = asyncio.run(valuate(records, lookup, logger=MagicMock()))

    assert sorted(started) == ["S0", "S1", "S2"]
    assert summary.net_worth == Decimal("3")


def test_valuate_keeps_cardinality_with_duplicate_rows() -> None:
    """Duplicate rows should each produce their own item."""
    records = [_record(1, "AAA", 1, "stock"), _record(1, "AAA", 1, "stock")]
    lookup, calls = _prices({"AAA": 5})

    summary = asyncio.run(valuate(records, lookup, logger=MagicMock()))

    assert len(summary.items) == 2
    assert len(calls) == 2
    assert summary.net_worth == Decimal("10")


def test_valuate_rejects_non_sequence_records() -> None:
    """Passing something that is not a sequence is a caller error."""
    lookup, calls = _prices({})

    with pytest.raises(TypeError):
        asyncio.run(valuate(None, lookup, logger=MagicMock()))
    with pytest.raises(TypeError):
        asyncio.run(valuate("AAA", lookup, logger=MagicMock()))
    assert calls == []


def test_net_worth_contribution_signs_by_type() -> None:
    """Liabilities subtract their magnitude, other types add."""
    assert net_worth_contribution("liability", Decimal("600")) == Decimal("-600")
    assert net_worth_contribution(" Liability ", Decimal("-5")) == Decimal("-5")
    assert net_worth_contribution("stock", Decimal("200")) == Decimal("200")
    assert net_worth_contribution("cash", Decimal("500")) == Decimal("500")
