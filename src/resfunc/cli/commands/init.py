"""Init command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from resfunc.io.config import generate_default_config
from resfunc.ui import console


def init_command(
    path: Annotated[
        Path,
        typer.Argument(
            help="Path for new configuration file",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = Path("resfunc.toml"),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
) -> None:
    """Generate a default configuration file.

    Examples
    --------
      Create default config:
        $ resfunc init

      Overwrite existing config:
        $ resfunc init my_resolutions.toml --force
    """
    if path.exists() and not force:
        console.print(f"[error]✗[/error] File already exists: [path]{path}[/path]")
        console.print("Use --force to overwrite", highlight=False)
        raise typer.Exit(1)

    path.write_text(generate_default_config())
    console.print(f"[success]✓[/success] Created configuration file: [path]{path}[/path]")
