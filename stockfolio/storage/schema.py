"""Pydantic models for the on-disk ledger layout.

The file is a YAML document::

    api_key: ''
    portfolio:
      asset:
        AAPL:
          symbol: AAPL
          op:
          - {symbol: AAPL, quantity: 10, price: 150.0, date: 01/01/24}
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field, field_serializer, field_validator

from stockfolio.errors import BadDateFormatError
from stockfolio.portfolio.dates import format_date, parse_date
from stockfolio.portfolio.models import Asset, Portfolio, Transaction


class TransactionRecord(BaseModel):
    symbol: str = ""
    quantity: int = Field(gt=0)
    price: float = Field(gt=0, allow_inf_nan=False)
    date: dt.date

    @field_validator("date", mode="before")
    @classmethod
    def parse_ddmmyy(cls, v: object) -> object:
        if isinstance(v, str):
            try:
                return parse_date(v)
            except BadDateFormatError as e:
                raise ValueError(str(e)) from None
        return v

    @field_serializer("date")
    def dump_ddmmyy(self, v: dt.date) -> str:
        return format_date(v)


class AssetRecord(BaseModel):
    symbol: str = ""
    op: list[TransactionRecord] = Field(default_factory=list)


class PortfolioRecord(BaseModel):
    asset: dict[str, AssetRecord] = Field(default_factory=dict)


class LedgerFile(BaseModel):
    """Root document of the data file."""

    api_key: str = ""
    portfolio: PortfolioRecord = Field(default_factory=PortfolioRecord)

    # ------------------------------------------------------------------
    # Domain conversion
    # ------------------------------------------------------------------

    def to_portfolio(self) -> Portfolio:
        """Build the entity graph; the map key is authoritative for symbols."""
        assets: dict[str, Asset] = {}
        for key, record in self.portfolio.asset.items():
            assets[key] = Asset(
                symbol=key,
                transactions=[
                    Transaction(symbol=key, quantity=op.quantity, price=op.price, date=op.date)
                    for op in record.op
                ],
            )
        return Portfolio(assets=assets)

    @classmethod
    def from_state(cls, api_key: str, portfolio: Portfolio) -> LedgerFile:
        return cls(
            api_key=api_key,
            portfolio=PortfolioRecord(
                asset={
                    symbol: AssetRecord(
                        symbol=asset.symbol,
                        op=[
                            TransactionRecord(
                                symbol=t.symbol, quantity=t.quantity, price=t.price, date=t.date
                            )
                            for t in asset.transactions
                        ],
                    )
                    for symbol, asset in portfolio.assets.items()
                }
            ),
        )
