"""Portfolio CLI commands: add, delete, show."""

from __future__ import annotations

from datetime import date

import click

from stockfolio.cli.context import get_app, report_errors
from stockfolio.output.tables import render_portfolio
from stockfolio.portfolio.dates import format_date, parse_date
from stockfolio.portfolio.report import build_report


@click.command("add")
@click.argument("symbol")
@click.argument("quantity", type=int)
@click.argument("price", type=float, required=False)
@click.argument("when", metavar="[DATE]", required=False)
@click.pass_context
@report_errors
def add_cmd(
    ctx: click.Context,
    symbol: str,
    quantity: int,
    price: float | None,
    when: str | None,
) -> None:
    """Record a purchase of QUANTITY units of SYMBOL.

    PRICE defaults to the latest market price, DATE (dd/mm/yy) to today.
    """
    app = get_app(ctx)
    symbol = symbol.upper().strip()

    on = parse_date(when) if when is not None else date.today()
    if price is None:
        price = app.source.get_latest_price(symbol)

    txn = app.ledger.add(symbol, quantity, price, on)
    click.echo(f"Added {txn.quantity} {txn.symbol} @ {txn.price:.2f} on {format_date(txn.date)}")


@click.command("delete")
@click.argument("symbol")
@click.option("--index", "-i", type=int, default=None, help="1-based transaction to remove")
@click.pass_context
@report_errors
def delete_cmd(ctx: click.Context, symbol: str, index: int | None) -> None:
    """Remove SYMBOL entirely, or only its INDEX-th transaction."""
    app = get_app(ctx)
    symbol = symbol.upper().strip()
    app.ledger.delete(symbol, index)
    if index is None:
        click.echo(f"Removed {symbol}.")
    else:
        click.echo(f"Removed transaction {index} of {symbol}.")


@click.command("show")
@click.pass_context
@report_errors
def show_cmd(ctx: click.Context) -> None:
    """Show portfolio, per-asset, and per-transaction performance."""
    app = get_app(ctx)
    if not app.ledger.portfolio.assets:
        click.echo("Portfolio is empty. Run: add SYMBOL QUANTITY [PRICE] [DATE]")
        return
    report = build_report(app.ledger.portfolio, app.source)
    click.echo(render_portfolio(report, app.style))
