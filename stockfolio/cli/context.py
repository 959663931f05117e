"""Per-process application context shared by every command.

Built once (lazily, on the first command that needs it) and stored in the
click context object, so the one-shot CLI and the interactive shell operate
on the same loaded ledger and price source.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable

import click

from stockfolio.config.loader import data_file_path, load_config
from stockfolio.config.schema import StockfolioConfig
from stockfolio.data.adapters.finance_api import provider_from_config
from stockfolio.data.price_source import PriceSource
from stockfolio.errors import StockfolioError
from stockfolio.output.tables import TableStyle
from stockfolio.storage.ledger import Ledger

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    config: StockfolioConfig
    ledger: Ledger
    source: PriceSource

    @classmethod
    def create(cls, config_path: str | None = None) -> AppContext:
        config = load_config(config_path)
        ledger = Ledger.load(data_file_path(config))
        return cls(config=config, ledger=ledger, source=provider_from_config(ledger.api_key, config))

    def rebuild_source(self) -> None:
        """Point the price source at the ledger's current api key."""
        self.source = provider_from_config(self.ledger.api_key, self.config)

    @property
    def style(self) -> TableStyle:
        return TableStyle.from_config(self.config)


def get_app(ctx: click.Context) -> AppContext:
    """Return the shared :class:`AppContext`, creating it on first use."""
    obj = ctx.ensure_object(dict)
    app = obj.get("app")
    if app is None:
        app = AppContext.create(obj.get("config_path"))
        obj["app"] = app
    return app


def report_errors(f: Callable[..., Any]) -> Callable[..., Any]:
    """Print application errors as ``ERROR: ...`` and exit with status 1."""

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except StockfolioError as e:
            logger.debug("Command failed", exc_info=True)
            click.echo(f"ERROR: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper
