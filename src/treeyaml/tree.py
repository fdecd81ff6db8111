# src/treeyaml/tree.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

PATH_SEPARATOR = "/"

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0", ""}


@dataclass
class Node:
    """
    A named entry in an ordered configuration tree.

    Attributes:
        name: Key as it appears before the ':' delimiter.
        value: Scalar value (string, may be empty).
        children: Nested nodes, in the order they were added.
    """

    name: str
    value: str = ""
    children: List["Node"] = field(default_factory=list)

    # ---------- Collaborator contract ----------

    def clear(self) -> None:
        self.children = []

    def add_child(self, name: str, value: str = "") -> "Node":
        """Append a new child and return it."""
        child = Node(name=name, value=value)
        self.children.append(child)
        return child

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child_at(self, index: int) -> "Node":
        return self.children[index]

    # ---------- Lookup helpers ----------

    def find_child(self, name: str) -> Optional["Node"]:
        """Return the first direct child with this name, or None."""
        for c in self.children:
            if c.name == name:
                return c
        return None

    def find_node(self, path: str) -> Optional["Node"]:
        """
        Resolve a '/'-separated path relative to this node.

        Example:
            tree.find_node("MainDatabase/Connection")
        """
        node: Optional[Node] = self
        for segment in path.split(PATH_SEPARATOR):
            if not segment:
                continue
            node = node.find_child(segment)
            if node is None:
                return None
        return node

    def get_node(self, path: str) -> "Node":
        """Like find_node(), but a missing path raises KeyError."""
        node = self.find_node(path)
        if node is None:
            raise KeyError(f"Node not found: {path}")
        return node

    def get_string(self, path: str, default: str = "") -> str:
        node = self.find_node(path)
        if node is None:
            return default
        return node.value

    def get_integer(self, path: str, default: int = 0) -> int:
        node = self.find_node(path)
        if node is None or not node.value.strip():
            return default
        return int(node.value)

    def get_boolean(self, path: str, default: bool = False) -> bool:
        node = self.find_node(path)
        if node is None:
            return default
        text = node.value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"Not a boolean value at {path}: {node.value!r}")

    def iter_subtree(self) -> Iterator["Node"]:
        """Yield this node and all descendants in depth-first order."""
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_dict(self) -> Dict[str, Any]:
        root: Dict[str, Any] = {"name": self.name, "value": self.value, "children": []}
        stack = [(self, root)]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                entry = {"name": child.name, "value": child.value, "children": []}
                out["children"].append(entry)
                stack.append((child, entry))
        return root

    def __repr__(self) -> str:
        return f"<Node {self.name}: {self.value!r} children={len(self.children)}>"


@dataclass
class Tree(Node):
    """
    Root of a persisted tree. It owns the top-level nodes and has no
    name or value of its own.
    """

    name: str = ""

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate over every node below the root (depth-first)."""
        for node in self.iter_subtree():
            if node is not self:
                yield node

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def depth(self) -> int:
        """Number of nesting levels below the root (0 for an empty tree)."""
        best = 0
        stack = [(c, 1) for c in self.children]
        while stack:
            node, level = stack.pop()
            best = max(best, level)
            stack.extend((c, level + 1) for c in node.children)
        return best

    def to_dict(self) -> Dict[str, Any]:
        return {"children": super().to_dict()["children"]}

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<Tree children={len(self.children)}>"
