"""Validate command implementation."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import typer  # Required at runtime by Typer
from rich.markup import escape

from resfunc.cli.commands.shared import cli_reporter
from resfunc.core.resolutions.factory import create_resolution
from resfunc.core.shared.exceptions import ResFuncError
from resfunc.io.config import load_config
from resfunc.ui import console, create_table, setup_logging

logger = logging.getLogger("resfunc.cli")


def validate_command(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to a resfunc TOML configuration",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
) -> None:
    """Check that every resolution of a configuration can be built."""
    try:
        config = load_config(config_path)
    except (ResFuncError, tomllib.TOMLDecodeError) as exc:
        console.print(f"[error]✗[/error] {escape(str(exc))}", highlight=False)
        raise typer.Exit(1) from exc

    if config.logging.file is not None or config.logging.verbose:
        log_file = config.logging.file
        if log_file is not None and not log_file.is_absolute():
            log_file = config_path.parent / log_file
        setup_logging(
            log_file=log_file,
            verbose=config.logging.verbose,
            log_format=config.logging.format,
        )

    table = create_table("Resolutions")
    table.add_column("Label", style="key")
    table.add_column("Kind")
    table.add_column("Order", justify="right")
    table.add_column("Status")

    failures = 0
    reporter = cli_reporter()
    for label, entry in config.resolutions.items():
        try:
            resolution = create_resolution(entry, base_dir=config_path.parent, reporter=reporter)
        except ResFuncError as exc:
            failures += 1
            table.add_row(label, entry.kind, "-", f"[error]✗[/error] {escape(str(exc))}")
            continue
        logger.info(f"Resolution '{label}': {resolution!r}")
        table.add_row(label, resolution.name, str(resolution.order), "[success]✓[/success] ok")

    console.print(table)
    if failures:
        raise typer.Exit(1)
