"""Price source protocol consumed by the performance engine and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Quote:
    """Current market data for one symbol."""

    symbol: str
    price: float | None = None
    day_change: float | None = None
    day_change_percent: float | None = None
    currency: str = ""
    type_disp: str = ""
    name: str = ""


@dataclass
class SearchResult:
    """One autocomplete match."""

    symbol: str
    exchange: str = ""
    name: str = ""
    type_disp: str = ""


class PriceSource(Protocol):
    """Synchronous market data lookups.

    Implementations raise :class:`~stockfolio.errors.KeyNotSetError` when no
    credential is configured and propagate lookup failures otherwise.
    """

    def get_latest_price(self, symbol: str) -> float: ...

    def get_quote(self, symbol: str) -> Quote: ...

    def search(self, symbol: str) -> list[SearchResult]: ...
