"""Info command implementation."""

from __future__ import annotations

from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import typer  # Required at runtime by Typer

from resfunc.cli.commands.shared import load_resolution
from resfunc.ui import print_parameter_table, print_summary


def info_command(
    paramfile: Annotated[
        Path,
        typer.Argument(
            help="Path to the resolution parameter file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    kind: Annotated[
        str,
        typer.Option("--kind", "-k", help="Resolution shape (see 'resfunc list')"),
    ] = "double_gauss",
    order: Annotated[
        int | None,
        typer.Option("--order", help="Polynomial order of each shape parameter", min=0),
    ] = None,
    at: Annotated[
        float | None,
        typer.Option("--at", help="Also evaluate the shape parameters at this true value"),
    ] = None,
) -> None:
    """Show the layout and coefficients of a parameter file."""
    resolution = load_resolution(paramfile, kind, order)

    print_summary(
        {
            "File": paramfile,
            "Resolution": type(resolution).__name__,
            "Polynomial order": resolution.order,
            "Coefficients": resolution.n_parameters,
        },
        title="Resolution",
    )
    print_parameter_table(resolution)

    if at is not None:
        shape = resolution.shape_parameters(at)
        print_summary({name: f"{value:.6g}" for name, value in shape.items()}, title=f"x = {at:g}")
