"""Live unit prices from the Yahoo Finance chart endpoint.

Quotes are requested with ``httpx`` under a bounded timeout. When a relay
URL is configured, the chart URL is passed to it as ``?url=...`` and the
relay's JSON envelope (``{"contents": "<chart json>"}``) is unwrapped.
"""

import json
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Any, Optional
from urllib.parse import quote

import httpx

from src.application.ports.price_lookup import PriceLookupPort
from src.domain.constants import CASH_UNIT_PRICE, UNAVAILABLE_PRICE
from src.domain.policies.asset_types import is_cash
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DEFAULT_PRICE_TIMEOUT_SECONDS
from src.utils.decimal_utils import parse_price


YAHOO_CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart/{symbol}"
DEFAULT_HEADERS = {"User-Agent": "Mozilla/5.0 (wealth-dashboard)"}


class YahooPriceLookup(PriceLookupPort):
    """PriceLookupPort reading ``regularMarketPrice`` from Yahoo Finance."""

    def __init__(
        self,
        timeout: float = DEFAULT_PRICE_TIMEOUT_SECONDS,
        relay_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        logger=None,
    ) -> None:
        """Initialize the lookup.

        Args:
            timeout: Upper bound in seconds for one quote request.
            relay_url: Optional relay endpoint wrapping the chart URL.
            client: Optional shared client; one is opened per call otherwise.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._timeout = timeout
        self._relay_url = relay_url
        self._http = client
        self._logger = logger or get_app_logger()

    @asynccontextmanager
    async def _client(self):
        if self._http is not None:
            yield self._http
        else:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                headers=DEFAULT_HEADERS,
            ) as client:
                yield client

    async def lookup(self, symbol: str, asset_type: str) -> Decimal:
        """Return the current unit price, or zero when unavailable.

        Args:
            symbol: Ticker exactly as stored, market suffix included.
            asset_type: Type tag of the row being valued.

        Returns:
            Decimal: Unit price; ``1`` for cash; ``0`` on any failure.
        """
        if is_cash(asset_type):
            return CASH_UNIT_PRICE
        clean_symbol = (symbol or "").strip()
        if not clean_symbol:
            self._logger.warning("Skipping price lookup for empty symbol")
            return UNAVAILABLE_PRICE

        try:
            async with self._client() as client:
                url, params = self._build_request(clean_symbol)
                response = await client.get(
                    url,
                    params=params,
                    timeout=self._timeout,
                )
                response.raise_for_status()
                payload = self._unwrap(response.json())
            price = self._extract_price(payload)
        except Exception as exc:
            self._logger.warning(
                f"Unable to fetch price for {clean_symbol}: {exc}"
            )
            return UNAVAILABLE_PRICE

        if price is None:
            self._logger.warning(f"No market price in quote for {clean_symbol}")
            return UNAVAILABLE_PRICE
        return price

    def _build_request(self, symbol: str) -> tuple[str, dict[str, str]]:
        target_url = YAHOO_CHART_URL.format(symbol=quote(symbol, safe=""))
        if self._relay_url:
            return self._relay_url, {"url": target_url}
        return target_url, {}

    def _unwrap(self, payload: Any) -> Any:
        if not self._relay_url:
            return payload
        contents = payload["contents"]
        if isinstance(contents, str):
            return json.loads(contents)
        return contents

    @staticmethod
    def _extract_price(payload: Any) -> Decimal | None:
        """Read ``chart.result[0].meta.regularMarketPrice``.

        Args:
            payload: Decoded chart JSON.

        Returns:
            Decimal | None: Parsed price, or None when absent or invalid.
        """
        results = payload["chart"]["result"]
        if not results:
            return None
        meta = results[0].get("meta") or {}
        return parse_price(meta.get("regularMarketPrice"))


__all__ = ["YahooPriceLookup", "YAHOO_CHART_URL"]
