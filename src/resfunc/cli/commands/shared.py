"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.markup import escape

from resfunc.core.resolutions.registry import get_resolution
from resfunc.core.shared.exceptions import ResFuncError
from resfunc.core.shared.reporter import CompositeReporter, LoggingReporter
from resfunc.ui import ConsoleReporter, console

if TYPE_CHECKING:
    from resfunc.core.resolutions.base import ResolutionBase


def cli_reporter() -> CompositeReporter:
    """Reporter echoing diagnostics to the console and the log."""
    return CompositeReporter([ConsoleReporter(), LoggingReporter("resfunc.cli")])


def load_resolution(paramfile: Path, kind: str, order: int | None) -> ResolutionBase:
    """Build a resolution from a parameter file, exiting with status 1 on failure."""
    try:
        resolution_cls = get_resolution(kind)
        return resolution_cls.from_file(paramfile, order=order, reporter=cli_reporter())
    except ResFuncError as exc:
        console.print(f"[error]✗[/error] {escape(str(exc))}", highlight=False)
        raise typer.Exit(1) from exc
