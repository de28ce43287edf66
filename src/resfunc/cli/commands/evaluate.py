"""Eval and scan command implementations."""

from __future__ import annotations

from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import numpy as np
import typer  # Required at runtime by Typer
from scipy.integrate import trapezoid

from resfunc.cli.commands.shared import load_resolution
from resfunc.ui import console, print_density_table, print_summary

_NORMALISATION_POINTS = 4001
_DEFAULT_HALF_WIDTH = 10.0


def eval_command(
    paramfile: Annotated[
        Path,
        typer.Argument(
            help="Path to the resolution parameter file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    x: Annotated[float, typer.Argument(help="Hypothesised true value")],
    xmeas: Annotated[float, typer.Argument(help="Measured value")],
    kind: Annotated[
        str,
        typer.Option("--kind", "-k", help="Resolution shape (see 'resfunc list')"),
    ] = "double_gauss",
    order: Annotated[
        int | None,
        typer.Option("--order", help="Polynomial order of each shape parameter", min=0),
    ] = None,
    log: Annotated[
        bool,
        typer.Option("--log", help="Print the natural log of the density"),
    ] = False,
) -> None:
    """Evaluate p(xmeas | x) for one pair of values."""
    resolution = load_resolution(paramfile, kind, order)
    if log:
        console.print(f"{resolution.log_density(x, xmeas):.10g}", highlight=False)
    else:
        console.print(f"{resolution.density(x, xmeas):.10g}", highlight=False)


def scan_command(
    paramfile: Annotated[
        Path,
        typer.Argument(
            help="Path to the resolution parameter file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    x: Annotated[float, typer.Argument(help="Hypothesised true value")],
    lo: Annotated[
        float | None,
        typer.Option("--lo", help="Lowest measured value (default: x - 10 sigma)"),
    ] = None,
    hi: Annotated[
        float | None,
        typer.Option("--hi", help="Highest measured value (default: x + 10 sigma)"),
    ] = None,
    n: Annotated[
        int,
        typer.Option("--n", "-n", help="Number of tabulated points", min=2),
    ] = 21,
    kind: Annotated[
        str,
        typer.Option("--kind", "-k", help="Resolution shape (see 'resfunc list')"),
    ] = "double_gauss",
    order: Annotated[
        int | None,
        typer.Option("--order", help="Polynomial order of each shape parameter", min=0),
    ] = None,
) -> None:
    """Tabulate the density over measured values and check its normalisation."""
    resolution = load_resolution(paramfile, kind, order)

    sigma = abs(resolution.sigma(x)) or 1.0
    lo = x - _DEFAULT_HALF_WIDTH * sigma if lo is None else lo
    hi = x + _DEFAULT_HALF_WIDTH * sigma if hi is None else hi
    if hi <= lo:
        console.print(f"[error]✗[/error] Empty range: lo={lo:g} >= hi={hi:g}", highlight=False)
        raise typer.Exit(1)

    measured = np.linspace(lo, hi, n)
    print_density_table(
        measured.tolist(),
        resolution.density_grid(x, measured).tolist(),
        title=f"p(xmeas | x = {x:g})",
    )

    fine = np.linspace(lo, hi, _NORMALISATION_POINTS)
    area = float(trapezoid(resolution.density_grid(x, fine), fine))
    print_summary({"Range": f"[{lo:g}, {hi:g}]", "Integral": f"{area:.6f}"}, title="Normalisation")
