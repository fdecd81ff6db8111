from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from treeyaml.cli.utils import load_tree_or_exit, write_text
from treeyaml.exporter import EXPORT_SHAPES, serialize_tree_to_json_string

console = Console()


def export_command(
    path: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    shape: str = typer.Option(
        "nodes",
        "--shape",
        help="'nodes' (lossless) or 'mapping' (nested name -> value)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export a tree file to JSON (stdout by default).
    """
    if shape not in EXPORT_SHAPES:
        raise typer.BadParameter(f"shape must be one of {', '.join(EXPORT_SHAPES)}")

    tree = load_tree_or_exit(path, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    payload = serialize_tree_to_json_string(tree, shape=shape, indent=2 if pretty else None)
    write_text(payload, out=out)

    if verbose:
        console.log("Export complete")
