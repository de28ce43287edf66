"""Console configuration and theme for resfunc UI.

This module provides the central console instance and theme used throughout
the command-line interface for consistent styling.
"""

from rich.console import Console
from rich.theme import Theme

from resfunc import __version__

RESFUNC_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- UI Structure ---
        "header": "bold cyan",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "path": "blue underline",
    }
)

# Single console instance for entire application
console = Console(theme=RESFUNC_THEME)

VERSION = __version__

__all__ = ["RESFUNC_THEME", "VERSION", "console"]
