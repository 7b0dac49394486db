"""Factor library CLI: Typer app factory and entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from cli.commands import compute, info, list_factors, snapshot
from cli.state import CliState
from factorlib import __version__
from factorlib.config import FactorSettings

app = typer.Typer(
    name="factors",
    help="Standardized equity factor library: discover and compute factors.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"factors CLI {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...). Overrides FACTORLIB_LOG_LEVEL.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show CLI version and exit.",
    ),
) -> None:
    """Global options applied before any sub-command."""
    load_dotenv()
    settings = FactorSettings.from_env()
    level = (log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    ctx.obj = CliState(settings=settings)


# Register commands
app.command("list")(list_factors)
app.command()(info)
app.command()(compute)
app.command()(snapshot)


if __name__ == "__main__":
    app()
