"""
treeyaml: reader and writer for the indented tree format used to persist
configuration, model and view definitions.

    from treeyaml import Tree, load_tree_from_file, save_tree_to_file

    tree = Tree()
    load_tree_from_file(tree, "Config.yaml")
    tree.get_string("MainDatabase/Adapter")
    save_tree_to_file(tree, "Config.out.yaml")
"""

from __future__ import annotations

from treeyaml.core.exceptions import TreeFormatError, YamlIndentationError, YamlSyntaxError
from treeyaml.exporter import TreeWriter, dump_tree, save_tree_to_file, save_tree_to_stream
from treeyaml.loader import (
    LineParser,
    LoadResult,
    TreeReader,
    ValueKind,
    load_tree_from_file,
    load_tree_from_stream,
    load_tree_from_string,
)
from treeyaml.tree import Node, Tree

__version__ = "0.1.0"

__all__ = [
    "LineParser",
    "LoadResult",
    "Node",
    "Tree",
    "TreeFormatError",
    "TreeReader",
    "TreeWriter",
    "ValueKind",
    "YamlIndentationError",
    "YamlSyntaxError",
    "dump_tree",
    "load_tree_from_file",
    "load_tree_from_stream",
    "load_tree_from_string",
    "save_tree_to_file",
    "save_tree_to_stream",
]
