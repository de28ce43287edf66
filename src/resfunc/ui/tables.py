"""UI tables for displaying resolution parameters and densities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table

from resfunc.ui.console import console

if TYPE_CHECKING:
    from collections.abc import Sequence

    from resfunc.core.resolutions.base import ResolutionBase


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling."""
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table."""
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)


def print_parameter_table(resolution: ResolutionBase, title: str | None = None) -> None:
    """Print one row per shape parameter with its polynomial coefficients."""
    order = resolution.order
    table = create_table(title or f"{type(resolution).__name__} parameters")
    table.add_column("Group", style="key")
    for power in range(order + 1):
        table.add_column(f"c{power}", style="value", justify="right")

    for name in resolution.GROUP_NAMES:
        coefs = resolution.parameters.group(name)
        table.add_row(name, *(f"{c:.6g}" for c in coefs))

    console.print(table)


def print_density_table(
    measured: Sequence[float], densities: Sequence[float], title: str = "Density scan"
) -> None:
    """Print measured values and their densities."""
    table = create_table(title)
    table.add_column("xmeas", style="key", justify="right")
    table.add_column("p(xmeas | x)", style="value", justify="right")
    for m, d in zip(measured, densities, strict=True):
        table.add_row(f"{m:.6g}", f"{d:.6e}")
    console.print(table)


__all__ = ["create_table", "print_density_table", "print_parameter_table", "print_summary"]
