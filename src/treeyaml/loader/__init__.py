# src/treeyaml/loader/__init__.py

"""
Public interface for the tree loader stack.

Intended usage from other parts of the project and tests:

    from treeyaml.loader import (
        LineParser,
        Declaration,
        Continuation,
        Skip,
        ParseFailure,
        ValueKind,
        TreeReader,
        LoadResult,
        load_tree_from_file,
        load_tree_from_stream,
        load_tree_from_string,
    )
"""

from __future__ import annotations

from .file_locator import collect_tree_files, resolve_input_path
from .line_parser import (
    Continuation,
    Declaration,
    LineEvent,
    LineParser,
    ParseFailure,
    Skip,
    ValueKind,
    strip_quotes,
)
from .reader import (
    LoadResult,
    TreeReader,
    load_tree_from_file,
    load_tree_from_stream,
    load_tree_from_string,
)


__all__ = [
    "Continuation",
    "Declaration",
    "LineEvent",
    "LineParser",
    "LoadResult",
    "ParseFailure",
    "Skip",
    "TreeReader",
    "ValueKind",
    "collect_tree_files",
    "load_tree_from_file",
    "load_tree_from_stream",
    "load_tree_from_string",
    "resolve_input_path",
    "strip_quotes",
]
