"""
File Locator

Resolves the tree files named on the command line.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from treeyaml.logging import get_logger

log = get_logger(__name__)

TREE_FILE_SUFFIXES = (".yaml", ".yml")


def resolve_input_path(path: str | os.PathLike | None) -> str | None:
    """
    Convert a user-provided path into an absolute validated file path.

    Returns:
        Absolute path string, or None if no input path was provided.
    """
    if path is None:
        log.debug("No input path provided to resolve_input_path().")
        return None

    abs_path = os.path.abspath(path)
    log.debug(f"Resolving input file: {abs_path}")

    if not os.path.exists(abs_path):
        log.error(f"Input file does not exist: {abs_path}")
        raise FileNotFoundError(f"Input file not found: {abs_path}")

    if not os.path.isfile(abs_path):
        log.error(f"Input path is not a file: {abs_path}")
        raise ValueError(f"Input path is not a file: {abs_path}")

    log.debug(f"Validated input file: {abs_path}")
    return abs_path


def collect_tree_files(paths: Iterable[str | os.PathLike]) -> List[Path]:
    """
    Expand directories into the tree files they contain (recursively,
    sorted); plain files are validated and kept in the given order.
    """
    found: List[Path] = []
    for entry in paths:
        p = Path(entry)
        if p.is_dir():
            matches = sorted(
                f for f in p.rglob("*") if f.is_file() and f.suffix.lower() in TREE_FILE_SUFFIXES
            )
            log.debug(f"Found {len(matches)} tree files under {p}")
            found.extend(matches)
        else:
            found.append(Path(resolve_input_path(p)))
    return found
