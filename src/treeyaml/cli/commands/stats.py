from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from treeyaml.cli.utils import load_tree_or_exit

console = Console()


def stats_command(
    path: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a tree file.
    """
    tree = load_tree_or_exit(path, verbose=verbose)

    nodes = list(tree.iter_nodes())
    leaves = sum(1 for n in nodes if not n.children)
    multi_line = sum(1 for n in nodes if "\n" in n.value)

    table = Table(title="Tree Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Top-level nodes", str(tree.child_count))
    table.add_row("Nodes", str(len(nodes)))
    table.add_row("Leaves", str(leaves))
    table.add_row("Max depth", str(tree.depth()))
    table.add_row("Multi-line values", str(multi_line))

    console.print(table)
