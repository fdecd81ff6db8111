"""
Exporter package.

Re-exports the tree writer and the JSON export helpers.
"""

from __future__ import annotations

from .json_exporter import (
    EXPORT_SHAPES,
    build_tree_dict,
    export_tree_json,
    serialize_tree_to_json_string,
    tree_to_mapping,
)
from .yaml_writer import TreeWriter, dump_tree, save_tree_to_file, save_tree_to_stream

__all__ = [
    "EXPORT_SHAPES",
    "TreeWriter",
    "build_tree_dict",
    "dump_tree",
    "export_tree_json",
    "save_tree_to_file",
    "save_tree_to_stream",
    "serialize_tree_to_json_string",
    "tree_to_mapping",
]
