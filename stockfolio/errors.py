"""Exception hierarchy shared by the ledger, the price source, and the CLI.

Every error raised by stockfolio derives from :class:`StockfolioError` so the
command layer can report it with a single ``except`` clause.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class StockfolioError(Exception):
    """Base class for all application errors.

    Holds a human-readable message plus an optional ``details`` dict with
    structured context for logging.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


# ---------------------------------------------------------------------------
# Price source
# ---------------------------------------------------------------------------

class KeyNotSetError(StockfolioError):
    """No api key configured; the lookup was not attempted."""

    def __init__(self, message: str = "API key not set (use: conf --set-key KEY)") -> None:
        super().__init__(message)


class PriceUnavailableError(StockfolioError):
    """The lookup succeeded but the quote carried no usable price."""

    def __init__(self, symbol: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Unable to fetch latest price for {symbol}", details)
        self.symbol = symbol


class LookupFailedError(StockfolioError):
    """Network or HTTP failure talking to the price source."""

    def __init__(self, message: str, symbol: str = "", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)
        self.symbol = symbol


# ---------------------------------------------------------------------------
# Portfolio mutation
# ---------------------------------------------------------------------------

class NotFoundError(StockfolioError):
    """Unknown symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Symbol not found: {symbol}")
        self.symbol = symbol


class OutOfRangeError(StockfolioError):
    """Transaction index is 0 or past the end of the asset's history."""

    def __init__(self, symbol: str, index: int, count: int) -> None:
        super().__init__(
            f"Index out of bounds: {index} (asset {symbol} has {count} transactions)"
        )
        self.symbol = symbol
        self.index = index
        self.count = count


class InvalidTransactionError(StockfolioError):
    """Quantity or price is not strictly positive."""


class BadDateFormatError(StockfolioError):
    """Date text is not in dd/mm/yy form."""

    def __init__(self, raw_value: str) -> None:
        super().__init__(f"Wrong date format: {raw_value!r} (expected dd/mm/yy)")
        self.raw_value = raw_value


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------

class CorruptStateError(StockfolioError):
    """The ledger file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Corrupt data file {path}: {reason}")
        self.path = path


class StorageIOError(StockfolioError):
    """Filesystem failure while reading, writing, or creating the ledger."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error while accessing {path}: {reason}")
        self.path = path
