"""
yaml_writer.py
Canonical text output for trees.

Each node becomes one line:

    <indent_width * depth spaces><name>:[<spacing spaces><quote><value><quote>]

Values are written verbatim. Nothing is escaped, so a value holding a
newline, or the quote character at either end, does not read back as the
same value. Only single-line values without such collisions round-trip.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Iterator, List, Tuple, Union

from treeyaml.logging import get_logger
from treeyaml.tree import Node, Tree

log = get_logger(__name__)

LINE_TERMINATOR = "\n"


class TreeWriter:
    def __init__(self, indent_width: int = 4, quote_char: str = "", spacing: int = 1):
        if indent_width < 1:
            raise ValueError(f"indent_width must be positive, got {indent_width}")
        self.indent_width = indent_width
        self.quote_char = quote_char
        self.spacing = spacing

    @classmethod
    def from_config(cls, cfg) -> "TreeWriter":
        return cls(
            indent_width=int(cfg.writer.get("indent_width", 4)),
            quote_char=cfg.writer.get("quote_char", "") or "",
            spacing=int(cfg.writer.get("spacing", 1)),
        )

    def format_node(self, node: Node, depth: int) -> str:
        text = " " * (self.indent_width * depth) + node.name + ":"
        if node.value != "":
            text += " " * self.spacing + self.quote_char + node.value + self.quote_char
        return text

    def iter_lines(self, tree: Node) -> Iterator[str]:
        """
        Yield one line per node below `tree`, depth-first in child order.
        """
        # Explicit stack so deep trees do not hit the recursion limit.
        stack: List[Tuple[Node, int]] = [(c, 0) for c in reversed(tree.children)]
        while stack:
            node, depth = stack.pop()
            if "\n" in node.value or "\r" in node.value:
                log.warning("Value of %r spans lines and will not read back intact", node.name)
            yield self.format_node(node, depth)
            stack.extend((c, depth + 1) for c in reversed(node.children))

    def dumps(self, tree: Node) -> str:
        return "".join(line + LINE_TERMINATOR for line in self.iter_lines(tree))

    def save_to_stream(self, tree: Node, stream: IO) -> None:
        """Write to a text stream, or UTF-8 encoded to a binary stream."""
        text = self.dumps(tree)
        if isinstance(stream, io.TextIOBase):
            stream.write(text)
        else:
            stream.write(text.encode("utf-8"))
        stream.flush()

    def save_to_file(self, tree: Node, path: Union[str, Path]) -> None:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", newline=LINE_TERMINATOR) as f:
            self.save_to_stream(tree, f)
        log.info("Wrote %s (%d bytes)", output_path, output_path.stat().st_size)


def save_tree_to_file(tree: Tree, path: Union[str, Path], **options) -> None:
    TreeWriter(**options).save_to_file(tree, path)


def save_tree_to_stream(tree: Tree, stream: IO, **options) -> None:
    TreeWriter(**options).save_to_stream(tree, stream)


def dump_tree(tree: Tree, **options) -> str:
    return TreeWriter(**options).dumps(tree)
