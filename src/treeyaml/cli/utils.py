from __future__ import annotations

import time
from pathlib import Path
from typing import Tuple

import typer
from rich.console import Console
from rich.markup import escape

from treeyaml.config import get_config
from treeyaml.loader import LoadResult, TreeReader
from treeyaml.tree import Tree

console = Console()


def load_tree(path: Path, *, verbose: bool = False) -> Tuple[Tree, LoadResult]:
    """
    Read one tree file with the configured reader.

    The result is returned as-is; callers decide how to report failures.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    tree = Tree()
    reader = TreeReader.from_config(get_config())
    result = reader.load_file(tree, path)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {path} in {elapsed:.3f}s")

    return tree, result


def load_tree_or_exit(path: Path, *, verbose: bool = False) -> Tree:
    tree, result = load_tree(path, verbose=verbose)
    if not result.ok:
        console.print(f"[red]{escape(str(path))}[/red]: {escape(str(result.error))}")
        raise typer.Exit(code=1)
    return tree


def write_text(payload: str, *, out: Path | None) -> None:
    """
    Write text to stdout or file.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload, end="" if payload.endswith("\n") else "\n")
