from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from treeyaml.cli.utils import load_tree_or_exit, write_text
from treeyaml.config import get_config
from treeyaml.exporter import TreeWriter

console = Console()


def fmt_command(
    path: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    in_place: bool = typer.Option(
        False,
        "--in-place",
        "-i",
        help="Rewrite the input file",
    ),
    indent: Optional[int] = typer.Option(
        None,
        "--indent",
        min=1,
        help="Spaces per nesting level (default from config)",
    ),
    quote: Optional[str] = typer.Option(
        None,
        "--quote",
        help="Quote character placed around values (default from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Re-emit a tree file in canonical form.

    Files holding '|' or '>' blocks are refused and left untouched.
    """
    if in_place and out is not None:
        raise typer.BadParameter("--in-place and --out are mutually exclusive")

    tree = load_tree_or_exit(path, verbose=verbose)

    # Values are written unescaped, so a multi-line value would not load back.
    multi_line = [node.name for node in tree.iter_nodes() if "\n" in node.value]
    if multi_line:
        console.print(
            f"[red]{escape(str(path))}[/red]: cannot reformat multi-line values "
            f"({escape(', '.join(multi_line))})"
        )
        raise typer.Exit(code=1)

    writer = TreeWriter.from_config(get_config())
    if indent is not None:
        writer.indent_width = indent
    if quote is not None:
        writer.quote_char = quote

    target = path if in_place else out
    write_text(writer.dumps(tree), out=target)

    if verbose and target is not None:
        console.log(f"Wrote {target}")
