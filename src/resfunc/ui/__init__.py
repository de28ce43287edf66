"""UI and terminal output for resfunc.

Submodules:
- console: Theme and console instance
- logging: Log file and console logging setup
- tables: Table display utilities
- reporter: Rich implementation of the Reporter protocol
"""

from resfunc.ui.console import RESFUNC_THEME, VERSION, console
from resfunc.ui.logging import close_logging, setup_logging
from resfunc.ui.reporter import ConsoleReporter
from resfunc.ui.tables import (
    create_table,
    print_density_table,
    print_parameter_table,
    print_summary,
)

__all__ = [
    "RESFUNC_THEME",
    "VERSION",
    "ConsoleReporter",
    "close_logging",
    "console",
    "create_table",
    "print_density_table",
    "print_parameter_table",
    "print_summary",
    "setup_logging",
]
