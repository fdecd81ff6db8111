from __future__ import annotations

from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from treeyaml.cli.utils import load_tree
from treeyaml.loader import collect_tree_files

console = Console()


def check_command(
    paths: List[Path] = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Parse tree files (directories are searched for *.yaml / *.yml) and
    report the first error in each. Exits with status 1 if any file fails.
    """
    files = collect_tree_files(paths)

    table = Table(title="Tree Files")
    table.add_column("File", style="bold")
    table.add_column("Status")
    table.add_column("Nodes", justify="right")
    table.add_column("Lines", justify="right")

    failures = 0
    for path in files:
        _, result = load_tree(path, verbose=verbose)
        if result.ok:
            status = "[green]ok[/green]"
        else:
            failures += 1
            status = f"[red]{escape(str(result.error))}[/red]"
        table.add_row(escape(str(path)), status, str(result.nodes_added), str(result.lines_read))

    console.print(table)

    if failures:
        console.print(f"[red]{failures} of {len(files)} file(s) failed[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]{len(files)} file(s) ok[/green]")
