"""CLI command: stockfolio conf -- show or change the api key and data file."""

from __future__ import annotations

import click

from stockfolio.cli.context import get_app, report_errors


@click.command("conf")
@click.option("--reset", "-r", is_flag=True, help="Erase the api key and every asset")
@click.option("--set-key", "-s", "set_key", default=None, help="Store a new api key")
@click.pass_context
@report_errors
def conf_cmd(ctx: click.Context, reset: bool, set_key: str | None) -> None:
    """Show configuration; optionally reset the ledger or set the api key."""
    app = get_app(ctx)

    if reset:
        app.ledger.reset()
        app.rebuild_source()
    elif set_key is not None:
        app.ledger.set_api_key(set_key)
        app.rebuild_source()

    click.echo(f"API key: {app.ledger.api_key}")
    click.echo(f"DATA file: {app.ledger.path}")
