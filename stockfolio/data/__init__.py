"""Market data access: the price source protocol and its adapters."""

from stockfolio.data.price_source import PriceSource, Quote, SearchResult

__all__ = ["PriceSource", "Quote", "SearchResult"]
