"""Nested performance report: portfolio, per asset, per transaction.

Built with exactly one price lookup per asset. The per-transaction and
per-asset figures are computed from that single price, and the portfolio
figure is the fold of the asset figures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from stockfolio.portfolio.models import Asset, Portfolio, Transaction
from stockfolio.portfolio.performance import Performance, combine, portfolio_weight

if TYPE_CHECKING:
    from stockfolio.data.price_source import PriceSource

logger = logging.getLogger(__name__)


@dataclass
class TransactionLine:
    index: int
    """1-based position within the asset, as accepted by ``delete --index``."""
    transaction: Transaction
    performance: Performance


@dataclass
class AssetReport:
    symbol: str
    latest_price: float
    performance: Performance
    lines: list[TransactionLine] = field(default_factory=list)
    weight: float = 0.0
    """Percent of the portfolio's latest value; ``nan`` for an empty portfolio value."""


@dataclass
class PortfolioReport:
    performance: Performance = field(default_factory=Performance)
    assets: list[AssetReport] = field(default_factory=list)


def _asset_report(asset: Asset, source: PriceSource) -> AssetReport:
    latest = source.get_latest_price(asset.symbol)
    lines = [
        TransactionLine(index=i, transaction=t, performance=t.performance(source, latest))
        for i, t in enumerate(asset.transactions, start=1)
    ]
    return AssetReport(
        symbol=asset.symbol,
        latest_price=latest,
        performance=combine(line.performance for line in lines),
        lines=lines,
    )


def build_report(portfolio: Portfolio, source: PriceSource) -> PortfolioReport:
    """Compute every figure ``show`` displays, asset by asset."""
    assets = [_asset_report(asset, source) for asset in portfolio.assets.values()]
    total = combine(a.performance for a in assets)
    for a in assets:
        a.weight = portfolio_weight(a.performance, total)
    logger.debug("Built report for %d assets", len(assets))
    return PortfolioReport(performance=total, assets=assets)
