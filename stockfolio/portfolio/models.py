"""Portfolio entities: Portfolio -> Asset -> Transaction.

The mutators on :class:`Portfolio` only change memory; persisting the result
is the job of :class:`~stockfolio.storage.ledger.Ledger`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from stockfolio.errors import InvalidTransactionError, NotFoundError, OutOfRangeError
from stockfolio.portfolio.dates import is_representable
from stockfolio.portfolio.performance import Performance, combine

if TYPE_CHECKING:
    from stockfolio.data.price_source import PriceSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transaction:
    """A single purchase of ``quantity`` units at ``price`` on ``date``."""

    symbol: str
    quantity: int
    price: float
    date: date

    def performance(
        self, source: PriceSource, current_price: float | None = None
    ) -> Performance:
        """Performance of this purchase at *current_price*.

        The price is looked up from *source* only when not supplied.
        """
        if current_price is None:
            current_price = source.get_latest_price(self.symbol)
        return Performance.from_purchase(self.quantity, self.price, current_price)


@dataclass
class Asset:
    """A held security and its purchases, in entry order."""

    symbol: str
    transactions: list[Transaction] = field(default_factory=list)

    def performance(
        self, source: PriceSource, current_price: float | None = None
    ) -> Performance:
        """Fold every purchase against a single price lookup for the asset."""
        if current_price is None:
            current_price = source.get_latest_price(self.symbol)
        return combine(t.performance(source, current_price) for t in self.transactions)

    @property
    def quantity(self) -> int:
        return sum(t.quantity for t in self.transactions)


@dataclass
class Portfolio:
    """All held assets keyed by symbol."""

    assets: dict[str, Asset] = field(default_factory=dict)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self.assets

    def __len__(self) -> int:
        return len(self.assets)

    def get(self, symbol: str) -> Asset:
        try:
            return self.assets[symbol]
        except KeyError:
            raise NotFoundError(symbol) from None

    def performance(self, source: PriceSource) -> Performance:
        """Fold every asset's performance; one price lookup per asset, in map order."""
        return combine(asset.performance(source) for asset in self.assets.values())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_transaction(
        self, symbol: str, quantity: int, price: float, on: date
    ) -> Transaction:
        """Append a purchase, creating the asset on first use."""
        if not symbol:
            raise InvalidTransactionError("Symbol must not be empty")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidTransactionError(
                f"Quantity must be a positive integer, got {quantity!r}"
            )
        if not (price > 0 and math.isfinite(price)):
            raise InvalidTransactionError(f"Price must be positive and finite, got {price!r}")
        if not is_representable(on):
            raise InvalidTransactionError(
                f"Date {on.isoformat()} cannot be stored as dd/mm/yy (years 1969-2068)"
            )

        asset = self.assets.setdefault(symbol, Asset(symbol=symbol))
        txn = Transaction(symbol=symbol, quantity=quantity, price=float(price), date=on)
        asset.transactions.append(txn)
        logger.debug("Added %d %s @ %.4f on %s", quantity, symbol, price, on)
        return txn

    def remove_asset(self, symbol: str) -> Asset:
        """Remove an asset and all of its purchases."""
        try:
            asset = self.assets.pop(symbol)
        except KeyError:
            raise NotFoundError(symbol) from None
        logger.debug("Removed asset %s (%d transactions)", symbol, len(asset.transactions))
        return asset

    def remove_transaction(self, symbol: str, index: int) -> Transaction:
        """Remove the purchase at 1-based *index*; the asset stays even if emptied."""
        asset = self.get(symbol)
        count = len(asset.transactions)
        if index < 1 or index > count:
            raise OutOfRangeError(symbol, index, count)
        txn = asset.transactions.pop(index - 1)
        logger.debug("Removed transaction %d of %s", index, symbol)
        return txn
