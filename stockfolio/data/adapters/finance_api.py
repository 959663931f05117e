"""Keyed Yahoo Finance REST adapter (yfapi.net) for quotes and symbol search.

Requires an api key from https://financeapi.net. With no key configured,
every call fails with :class:`~stockfolio.errors.KeyNotSetError` before any
request is made.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import requests

from stockfolio.config.defaults import FINANCE_API_DEFAULTS
from stockfolio.config.schema import StockfolioConfig
from stockfolio.data.price_source import Quote, SearchResult
from stockfolio.errors import KeyNotSetError, LookupFailedError, PriceUnavailableError

logger = logging.getLogger(__name__)

_QUOTE_PATH = "/v6/finance/quote"
_AUTOCOMPLETE_PATH = "/v6/finance/autocomplete"


class FinanceApiProvider:
    """Blocking :class:`~stockfolio.data.price_source.PriceSource` over HTTP."""

    def __init__(
        self,
        api_key: str = "",
        base_url: str = FINANCE_API_DEFAULTS["base_url"],
        timeout: float = FINANCE_API_DEFAULTS["timeout"],
        region: str = FINANCE_API_DEFAULTS["region"],
        lang: str = FINANCE_API_DEFAULTS["lang"],
    ) -> None:
        self._key = api_key or None
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.region = region
        self.lang = lang

    @property
    def has_key(self) -> bool:
        return self._key is not None

    def _check_key(self) -> None:
        if self._key is None:
            raise KeyNotSetError()

    def _get(self, path: str, params: dict[str, str], symbol: str) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s %s", url, params)
        try:
            resp = requests.get(
                url,
                params=params,
                headers={"X-API-KEY": self._key, "accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Request for %s failed: %s", symbol, e)
            raise LookupFailedError(f"Request failed for {symbol}: {e}", symbol) from e

        if resp.status_code != 200:
            logger.warning("Finance API returned %d for %s", resp.status_code, symbol)
            raise LookupFailedError(
                f"Finance API returned HTTP {resp.status_code} for {symbol}",
                symbol,
                details={"status_code": resp.status_code},
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise LookupFailedError(f"Malformed response for {symbol}", symbol) from e
        if not isinstance(data, dict):
            raise LookupFailedError(f"Malformed response for {symbol}", symbol)
        return data

    # ------------------------------------------------------------------
    # PriceSource
    # ------------------------------------------------------------------

    def get_quote(self, symbol: str) -> Quote:
        """Fetch the current quote for *symbol*."""
        self._check_key()
        data = self._get(
            _QUOTE_PATH,
            {"region": self.region, "lang": self.lang, "symbols": symbol},
            symbol,
        )
        results = (data.get("quoteResponse") or {}).get("result") or []
        if not results:
            raise LookupFailedError(f"No quote found for {symbol}", symbol)

        raw = results[0]
        return Quote(
            symbol=raw.get("symbol", symbol),
            price=raw.get("regularMarketPrice"),
            day_change=raw.get("regularMarketChange"),
            day_change_percent=raw.get("regularMarketChangePercent"),
            currency=raw.get("currency") or "",
            type_disp=raw.get("typeDisp") or raw.get("quoteType") or "",
            name=raw.get("longName") or raw.get("shortName") or "",
        )

    def get_latest_price(self, symbol: str) -> float:
        """Latest regular-market price for *symbol*."""
        self._check_key()
        quote = self.get_quote(symbol)
        if quote.price is None:
            raise PriceUnavailableError(symbol)
        try:
            price = float(quote.price)
        except (TypeError, ValueError):
            raise PriceUnavailableError(symbol, details={"raw": quote.price}) from None
        if not math.isfinite(price):
            raise PriceUnavailableError(symbol, details={"raw": quote.price})
        return price

    def search(self, symbol: str) -> list[SearchResult]:
        """Autocomplete matches for *symbol*."""
        self._check_key()
        data = self._get(
            _AUTOCOMPLETE_PATH,
            {"region": self.region, "lang": self.lang, "query": symbol},
            symbol,
        )
        results = (data.get("ResultSet") or {}).get("Result") or []
        return [
            SearchResult(
                symbol=r.get("symbol", ""),
                exchange=r.get("exchDisp") or r.get("exch") or "",
                name=r.get("name", ""),
                type_disp=r.get("typeDisp") or r.get("type") or "",
            )
            for r in results
        ]


def provider_from_config(api_key: str, config: StockfolioConfig) -> FinanceApiProvider:
    """Build a provider for *api_key* using ``config.finance_api`` settings."""
    api = config.finance_api
    return FinanceApiProvider(
        api_key=api_key,
        base_url=api.base_url,
        timeout=api.timeout,
        region=api.region,
        lang=api.lang,
    )
