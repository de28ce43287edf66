"""Main Typer application for resfunc."""

from pathlib import Path
from typing import Annotated

import typer

from resfunc.cli.callbacks import version_callback
from resfunc.cli.commands import (
    eval_command,
    info_command,
    init_command,
    scan_command,
    validate_command,
)
from resfunc.core.resolutions.registry import RESOLUTIONS
from resfunc.ui import console, setup_logging

app = typer.Typer(
    name="resfunc",
    help="resfunc - Energy-dependent resolution functions",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo log records to the console."),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write a log file (.json for structured records)."),
    ] = None,
) -> None:
    """resfunc - Energy-dependent resolution functions for likelihood fits."""
    setup_logging(log_file=log_file, verbose=verbose)


@app.command(name="list")
def list_command() -> None:
    """List the registered resolution shapes."""
    for name, resolution_cls in sorted(RESOLUTIONS.items()):
        groups = ", ".join(resolution_cls.GROUP_NAMES)
        console.print(f"[key]{name}[/key]: {resolution_cls.__name__} ({groups})")


app.command(name="info")(info_command)
app.command(name="eval")(eval_command)
app.command(name="scan")(scan_command)
app.command(name="validate")(validate_command)
app.command(name="init")(init_command)
