"""
json_exporter.py
Structured JSON export for trees.

Two shapes are offered:
- "nodes": lossless, every node as {"name", "value", "children"}
- "mapping": nested dicts keyed by name; a node with children maps to its
  children, a leaf maps to its value. Duplicate names keep the last one.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from treeyaml.logging import get_logger
from treeyaml.tree import Node, Tree

log = get_logger(__name__)

EXPORT_SHAPES = ("nodes", "mapping")


def tree_to_mapping(node: Node) -> Dict[str, Any]:
    root: Dict[str, Any] = {}
    stack = [(node, root)]
    while stack:
        current, out = stack.pop()
        for child in current.children:
            if child.children:
                nested: Dict[str, Any] = {}
                out[child.name] = nested
                stack.append((child, nested))
            else:
                out[child.name] = child.value
    return root


def build_tree_dict(tree: Tree, shape: str = "nodes") -> Dict[str, Any]:
    if shape == "nodes":
        return tree.to_dict()
    if shape == "mapping":
        return tree_to_mapping(tree)
    raise ValueError(f"Unknown export shape {shape!r}; expected one of {EXPORT_SHAPES}")


def serialize_tree_to_json_string(tree: Tree, shape: str = "nodes", indent: int | None = 2) -> str:
    return json.dumps(
        build_tree_dict(tree, shape),
        indent=indent,
        ensure_ascii=False,
    )


def export_tree_json(tree: Tree, output_path: str | Path, shape: str = "nodes", indent: int = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info("Exporting tree JSON to: %s (nodes=%d, shape=%s)", output_path, tree.node_count(), shape)

    json_str = serialize_tree_to_json_string(tree, shape=shape, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
