"""Durable ledger: api key plus portfolio, persisted after every mutation.

Single writer, single process. Saves go through a temporary file in the
target directory followed by ``os.replace`` so a reader never observes a
half-written file. The on-disk save is last-writer-wins; sharing a ledger
across threads or processes requires serializing access through one owner.
"""

from __future__ import annotations

import copy
import logging
import os
import tempfile
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Generator

import yaml
from pydantic import ValidationError

from stockfolio.errors import CorruptStateError, StorageIOError
from stockfolio.portfolio.models import Portfolio, Transaction
from stockfolio.storage.schema import LedgerFile

logger = logging.getLogger(__name__)


class Ledger:
    """In-memory ledger state bound to its backing file."""

    def __init__(
        self,
        path: str | Path,
        api_key: str = "",
        portfolio: Portfolio | None = None,
    ) -> None:
        self.path = Path(path).expanduser()
        self.api_key = api_key
        self.portfolio = portfolio or Portfolio()

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> Ledger:
        """Read the ledger at *path*, or start empty if the file is missing.

        The parent directory is created if needed and the state is written
        back immediately, which fills in defaults for older files.
        """
        path = Path(path).expanduser()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(path.parent, str(e)) from e

        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No data file at %s, starting empty", path)
            content = ""
        except UnicodeDecodeError as e:
            raise CorruptStateError(path, str(e)) from e
        except OSError as e:
            raise StorageIOError(path, str(e)) from e

        document = cls._parse(path, content)
        ledger = cls(path, api_key=document.api_key, portfolio=document.to_portfolio())
        logger.debug(
            "Loaded %s: %d assets, api key %s",
            path,
            len(ledger.portfolio),
            "set" if ledger.api_key else "unset",
        )
        ledger.save()
        return ledger

    @staticmethod
    def _parse(path: Path, content: str) -> LedgerFile:
        try:
            raw = yaml.safe_load(content) if content.strip() else {}
        except yaml.YAMLError as e:
            raise CorruptStateError(path, f"invalid YAML: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise CorruptStateError(path, "top-level value must be a mapping")

        try:
            return LedgerFile.model_validate(raw)
        except ValidationError as e:
            raise CorruptStateError(path, str(e)) from e

    def dumps(self) -> str:
        """Serialized form of the current state."""
        document = LedgerFile.from_state(self.api_key, self.portfolio)
        return yaml.safe_dump(
            document.model_dump(mode="json"), sort_keys=False, default_flow_style=False
        )

    def save(self) -> None:
        """Overwrite the data file with the current state."""
        content = self.dumps()
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageIOError(self.path, str(e)) from e
        logger.debug("Saved %s", self.path)

    # ------------------------------------------------------------------
    # Mutations (each persists)
    # ------------------------------------------------------------------

    @contextmanager
    def _mutation(self) -> Generator[None, None, None]:
        """Persist after the block; restore memory if the block or save fails."""
        saved_key = self.api_key
        saved_portfolio = copy.deepcopy(self.portfolio)
        try:
            yield
            self.save()
        except Exception:
            self.api_key = saved_key
            self.portfolio = saved_portfolio
            raise

    def add(self, symbol: str, quantity: int, price: float, on: date) -> Transaction:
        """Record a purchase and persist."""
        with self._mutation():
            txn = self.portfolio.add_transaction(symbol, quantity, price, on)
        logger.info("Added %s x%d @ %s", symbol, quantity, price)
        return txn

    def delete(self, symbol: str, index: int | None = None) -> None:
        """Remove a whole asset, or its 1-based *index* purchase, and persist."""
        with self._mutation():
            if index is None:
                self.portfolio.remove_asset(symbol)
            else:
                self.portfolio.remove_transaction(symbol, index)
        logger.info("Deleted %s%s", symbol, "" if index is None else f" #{index}")

    def set_api_key(self, key: str) -> None:
        """Replace the stored api key; an empty key means unset."""
        with self._mutation():
            self.api_key = key

    def reset(self) -> None:
        """Drop the api key and every asset, keeping the file location."""
        with self._mutation():
            self.api_key = ""
            self.portfolio = Portfolio()
        logger.info("Ledger reset: %s", self.path)
