# src/treeyaml/loader/reader.py

"""
Tree Reader: rebuilds a Tree from the indented text format.

The reader drives a LineParser over the physical lines of a source and
keeps a stack of open nodes that mirrors the parser's indent stack:

    a:            push a
      b: 1        push b            (delta +1)
      c: 2        pop b, push c     (delta  0)
    d: 3          pop c, a; push d  (delta -1)

A declaration always closes the previous declaration plus one more level
per step of negative delta. Continuation lines of a '|' or '>' block are
appended to the value of the node on top of the stack.

Loading is not atomic: when a line fails, the nodes added before it stay
in the tree and the failure is reported in the returned LoadResult. Load
into a scratch Tree and swap it in on success when that matters.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from treeyaml.core.exceptions import TreeFormatError
from treeyaml.logging import get_logger
from treeyaml.tree import Node, Tree

from .line_parser import (
    Continuation,
    Declaration,
    LineParser,
    ParseFailure,
    Skip,
    ValueKind,
)

log = get_logger(__name__)


@dataclass
class LoadResult:
    """
    Outcome of one load.

    Attributes:
        lines_read: Physical lines consumed, including the failing one.
        nodes_added: Nodes created in the target tree.
        error: The failure that stopped the load, or None.
    """

    lines_read: int = 0
    nodes_added: int = 0
    error: Optional[TreeFormatError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "LoadResult":
        if self.error is not None:
            raise self.error
        return self


class TreeReader:
    """
    Loads trees from lines, streams and files.

    An explicit `quote_char` is applied to a supplied parser as well;
    without one the parser keeps its own setting.
    """

    def __init__(self, parser: Optional[LineParser] = None, quote_char: Optional[str] = None):
        if parser is not None and quote_char is not None:
            parser.quote_char = quote_char
        if quote_char is None:
            quote_char = parser.quote_char if parser is not None else '"'
        self._parser = parser
        self.quote_char = quote_char

    @property
    def parser(self) -> LineParser:
        if self._parser is None:
            self._parser = LineParser(quote_char=self.quote_char)
        return self._parser

    @classmethod
    def from_config(cls, cfg) -> "TreeReader":
        return cls(quote_char=cfg.reader.get("quote_char", '"') or "")

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #

    def load_lines(self, tree: Tree, lines: Iterable[str]) -> LoadResult:
        """Clear `tree` and fill it from `lines`."""
        tree.clear()
        parser = self.parser
        parser.reset()

        result = LoadResult()
        node_stack: List[Node] = []
        pending_blanks = 0

        for raw_line in lines:
            result.lines_read += 1
            event = parser.parse_line(raw_line)

            if isinstance(event, Skip):
                continue

            if isinstance(event, ParseFailure):
                result.error = event.error
                log.debug("Load stopped at line %d: %s", event.lineno, event.error)
                break

            if isinstance(event, Continuation):
                if not node_stack:
                    continue
                if not event.fragment:
                    # Trailing blank lines of a block are dropped.
                    pending_blanks += 1
                    continue
                target = node_stack[-1]
                for _ in range(pending_blanks):
                    _append_fragment(target, "", event.value_kind)
                pending_blanks = 0
                _append_fragment(target, event.fragment, event.value_kind)
                continue

            if isinstance(event, Declaration):
                pending_blanks = 0
                for _ in range(max(0, 1 - event.indent_delta)):
                    if not node_stack:
                        break
                    node_stack.pop()

                parent: Node = node_stack[-1] if node_stack else tree
                node_stack.append(parent.add_child(event.name, event.value))
                result.nodes_added += 1

        return result

    def load_string(self, tree: Tree, text: str) -> LoadResult:
        # Same line breaks as the stream loaders: \n, \r and \r\n only.
        return self.load_lines(tree, io.StringIO(text, newline=None))

    def load_stream(self, tree: Tree, stream: IO) -> LoadResult:
        """
        Load from a text stream or a binary stream (decoded as UTF-8).
        """
        if isinstance(stream, io.TextIOBase):
            return self.load_lines(tree, stream)

        text_stream = io.TextIOWrapper(stream, encoding="utf-8-sig", newline=None)
        try:
            return self.load_lines(tree, text_stream)
        finally:
            # Leave the caller's stream open.
            text_stream.detach()

    def load_file(self, tree: Tree, path: Union[str, Path]) -> LoadResult:
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Tree file not found: {file_path}")

        with file_path.open("r", encoding="utf-8-sig", newline=None) as f:
            result = self.load_lines(tree, f)

        log.debug(
            "Read %s: lines=%d nodes=%d ok=%s",
            file_path,
            result.lines_read,
            result.nodes_added,
            result.ok,
        )
        return result


def _append_fragment(node: Node, fragment: str, kind: ValueKind) -> None:
    current = node.value
    if kind is ValueKind.LITERAL:
        if current == "":
            node.value = fragment
        else:
            node.value = current + "\n" + fragment
    elif kind is ValueKind.FOLDED:
        # Blank lines mark paragraphs; other lines are joined with a space.
        if fragment == "":
            node.value = current + "\n"
        elif current == "" or current.endswith("\n"):
            node.value = current + fragment
        else:
            node.value = current + " " + fragment


# ---------------------------------------------------------------------- #
# Module-level API (raises on failure)
# ---------------------------------------------------------------------- #

def _finish(result: LoadResult, source: str) -> LoadResult:
    if not result.ok:
        log.error("Failed to load %s: %s", source, result.error)
        result.raise_for_error()
    log.info("Loaded %s: %d nodes from %d lines", source, result.nodes_added, result.lines_read)
    return result


def load_tree_from_file(
    tree: Tree, path: Union[str, Path], reader: Optional[TreeReader] = None
) -> LoadResult:
    """
    Clear `tree` and load it from the file at `path`.

    Raises:
        FileNotFoundError: if `path` is not a file.
        YamlSyntaxError / YamlIndentationError: on the first bad line; the
            nodes read before it remain in `tree`.
    """
    reader = reader or TreeReader()
    return _finish(reader.load_file(tree, path), str(path))


def load_tree_from_stream(tree: Tree, stream: IO, reader: Optional[TreeReader] = None) -> LoadResult:
    reader = reader or TreeReader()
    return _finish(reader.load_stream(tree, stream), "<stream>")


def load_tree_from_string(tree: Tree, text: str, reader: Optional[TreeReader] = None) -> LoadResult:
    reader = reader or TreeReader()
    return _finish(reader.load_string(tree, text), "<string>")
