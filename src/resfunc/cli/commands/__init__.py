"""CLI command modules for resfunc.

Each module exports a command function with its Typer annotations; the main
app.py imports and registers them.
"""

from resfunc.cli.commands.evaluate import eval_command, scan_command
from resfunc.cli.commands.info import info_command
from resfunc.cli.commands.init import init_command
from resfunc.cli.commands.validate import validate_command

__all__ = [
    "eval_command",
    "info_command",
    "init_command",
    "scan_command",
    "validate_command",
]
