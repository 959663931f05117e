"""Market data CLI commands: search, info."""

from __future__ import annotations

import click

from stockfolio.cli.context import get_app, report_errors
from stockfolio.output.tables import render_quote, render_search


@click.command("search")
@click.argument("symbol")
@click.pass_context
@report_errors
def search_cmd(ctx: click.Context, symbol: str) -> None:
    """Search tickers matching SYMBOL."""
    app = get_app(ctx)
    results = app.source.search(symbol)
    if not results:
        click.echo(f"No matches for {symbol}.")
        return
    click.echo(render_search(results, app.style))


@click.command("info")
@click.argument("symbol")
@click.pass_context
@report_errors
def info_cmd(ctx: click.Context, symbol: str) -> None:
    """Show the current quote for SYMBOL."""
    app = get_app(ctx)
    quote = app.source.get_quote(symbol.upper().strip())
    click.echo(render_quote(quote, app.style))
