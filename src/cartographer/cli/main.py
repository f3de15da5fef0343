from __future__ import annotations

import os
from typing import Annotated

import typer

from cartographer.common import setup_cli_logging
from cartographer.settings import get_settings

from .commands import store as store_commands

app = typer.Typer(help="Cartographer command-line interface.")
app.add_typer(store_commands.app, name="store")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(app_info=settings.app, config=settings.logging)


def main() -> None:
    """Entrypoint for the cartographer CLI."""
    _setup_logging()
    app()
