"""
CLI command modules for treeyaml.

Each command module defines a single Typer-compatible command function.
"""

from treeyaml.cli.commands.check import check_command
from treeyaml.cli.commands.export import export_command
from treeyaml.cli.commands.fmt import fmt_command
from treeyaml.cli.commands.stats import stats_command

__all__ = [
    "check_command",
    "export_command",
    "fmt_command",
    "stats_command",
]
