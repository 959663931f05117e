"""Top-level CLI entry point for stockfolio."""

from __future__ import annotations

import logging

import click

from stockfolio import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stockfolio")
@click.option(
    "--config",
    type=click.Path(),
    default=None,
    envvar="STOCKFOLIO_CONFIG",
    help="Path to stockfolio.yaml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """stockfolio -- track purchases and portfolio performance."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config_path", config)

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


# Register sub-commands
from stockfolio.cli.conf_cmd import conf_cmd  # noqa: E402
from stockfolio.cli.market_cmd import info_cmd, search_cmd  # noqa: E402
from stockfolio.cli.portfolio_cmd import add_cmd, delete_cmd, show_cmd  # noqa: E402
from stockfolio.cli.shell_cmd import shell_cmd  # noqa: E402

cli.add_command(add_cmd, "add")
cli.add_command(conf_cmd, "conf")
cli.add_command(delete_cmd, "delete")
cli.add_command(info_cmd, "info")
cli.add_command(search_cmd, "search")
cli.add_command(shell_cmd, "shell")
cli.add_command(show_cmd, "show")
