"""CLI command: stockfolio shell -- interactive prompt over the same commands."""

from __future__ import annotations

import logging
import shlex

import click

from stockfolio.cli.context import get_app, report_errors

logger = logging.getLogger(__name__)

_EXIT_WORDS = {"exit", "quit"}


def run_line(ctx: click.Context, line: str) -> None:
    """Dispatch one shell line as a CLI invocation sharing *ctx*'s state."""
    from stockfolio.cli.main import cli

    try:
        args = shlex.split(line)
    except ValueError as e:
        click.echo(f"ERROR: {e}", err=True)
        return
    if not args:
        return
    if args[0] == "shell":
        click.echo("Already in the shell.")
        return

    try:
        cli.main(args=args, prog_name="", standalone_mode=False, obj=ctx.obj)
    except click.exceptions.Exit:
        pass
    except click.ClickException as e:
        e.show()
    except click.exceptions.Abort:
        click.echo("Aborted.", err=True)
    except SystemExit as e:
        logger.debug("Command exited with status %s", e.code)


@click.command("shell")
@click.pass_context
@report_errors
def shell_cmd(ctx: click.Context) -> None:
    """Start an interactive prompt; type 'exit' or press Ctrl-D to leave."""
    get_app(ctx)
    while True:
        try:
            line = click.prompt(
                "", prompt_suffix="stockfolio> ", default="", show_default=False
            )
        except click.exceptions.Abort:
            click.echo()
            break
        if line.strip() in _EXIT_WORDS:
            break
        run_line(ctx, line)
