"""Portfolio data model and performance aggregation.

Public API::

    from stockfolio.portfolio import (
        Transaction,
        Asset,
        Portfolio,
        Performance,
        combine,
        portfolio_weight,
        build_report,
    )
"""

from stockfolio.portfolio.dates import format_date, parse_date
from stockfolio.portfolio.models import Asset, Portfolio, Transaction
from stockfolio.portfolio.performance import Performance, combine, portfolio_weight
from stockfolio.portfolio.report import (
    AssetReport,
    PortfolioReport,
    TransactionLine,
    build_report,
)

__all__ = [
    "Transaction",
    "Asset",
    "Portfolio",
    "Performance",
    "combine",
    "portfolio_weight",
    "AssetReport",
    "PortfolioReport",
    "TransactionLine",
    "build_report",
    "format_date",
    "parse_date",
]
