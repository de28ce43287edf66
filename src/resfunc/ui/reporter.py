"""Console-based reporter implementation using Rich."""

from __future__ import annotations

from resfunc.core.shared.reporter import Reporter
from resfunc.ui.console import console


class ConsoleReporter:
    """Reporter that prints styled diagnostics to the shared console.

    Example:
        >>> resolution = DoubleGaussianResolution(values, reporter=ConsoleReporter())
    """

    def info(self, message: str) -> None:
        """Display an informational message."""
        console.print(f"[info]ℹ[/info] {message}", highlight=False)

    def warning(self, message: str) -> None:
        """Display a warning message."""
        console.print(f"[warning]⚠[/warning] {message}", highlight=False)

    def error(self, message: str) -> None:
        """Display an error message."""
        console.print(f"[error]✗[/error] {message}", highlight=False)


# Verify protocol compliance at import time
if not isinstance(ConsoleReporter(), Reporter):
    raise TypeError("ConsoleReporter must satisfy Reporter protocol")
