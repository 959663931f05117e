"""Ledger persistence."""

from stockfolio.storage.ledger import Ledger
from stockfolio.storage.schema import LedgerFile

__all__ = ["Ledger", "LedgerFile"]
