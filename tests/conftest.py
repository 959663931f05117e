"""Shared test fixtures for stockfolio.

Provides a temp-file ledger, a recording fake price source, and an
:class:`AppContext` wired to both for CLI tests.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from stockfolio.cli.context import AppContext
from stockfolio.config.schema import StockfolioConfig
from stockfolio.data.price_source import Quote, SearchResult
from stockfolio.errors import KeyNotSetError, LookupFailedError, PriceUnavailableError
from stockfolio.storage.ledger import Ledger

# ---------------------------------------------------------------------------
# Fake price source
# ---------------------------------------------------------------------------


class FakePriceSource:
    """In-memory price source that records every lookup."""

    def __init__(self, prices: dict[str, float | None] | None = None, key: str = "test-key"):
        self.prices = dict(prices or {})
        self.key = key
        self.calls: list[str] = []

    def _check(self) -> None:
        if not self.key:
            raise KeyNotSetError()

    def get_quote(self, symbol: str) -> Quote:
        self._check()
        self.calls.append(symbol)
        if symbol not in self.prices:
            raise LookupFailedError(f"No quote found for {symbol}", symbol)
        return Quote(symbol=symbol, price=self.prices[symbol], currency="USD", type_disp="Equity")

    def get_latest_price(self, symbol: str) -> float:
        quote = self.get_quote(symbol)
        if quote.price is None:
            raise PriceUnavailableError(symbol)
        return quote.price

    def search(self, symbol: str) -> list[SearchResult]:
        self._check()
        self.calls.append(symbol)
        return [
            SearchResult(symbol=s, exchange="NASDAQ", name=f"{s} Inc.", type_disp="Equity")
            for s in self.prices
            if s.startswith(symbol.upper())
        ]


# ---------------------------------------------------------------------------
# Core infrastructure
# ---------------------------------------------------------------------------

@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Ledger location inside a not-yet-existing directory."""
    return tmp_path / "data" / "stockfolio.dat"


@pytest.fixture
def ledger(data_file: Path) -> Ledger:
    """Freshly loaded empty ledger."""
    return Ledger.load(data_file)


@pytest.fixture
def aapl_ledger(ledger: Ledger) -> Ledger:
    """Ledger holding the two-purchase AAPL example."""
    ledger.add("AAPL", 10, 150.0, date(2024, 1, 1))
    ledger.add("AAPL", 5, 180.0, date(2024, 6, 1))
    return ledger


@pytest.fixture
def source() -> FakePriceSource:
    return FakePriceSource({"AAPL": 200.0, "MSFT": 400.0, "NOPRICE": None})


@pytest.fixture
def test_config(tmp_path: Path) -> StockfolioConfig:
    """Config with a temp data dir and colors off."""
    return StockfolioConfig(
        storage={"data_dir": str(tmp_path / "data")},
        display={"color": False},
    )


@pytest.fixture
def app(test_config: StockfolioConfig, ledger: Ledger, source: FakePriceSource) -> AppContext:
    return AppContext(config=test_config, ledger=ledger, source=source)
