# tests/test_pyyaml_compat.py

"""
Documents inside the common subset must read the same with PyYAML.

PyYAML resolves scalars to ints/bools and maps empty values to None, so
both sides are compared as strings with empty values normalised.
"""

from __future__ import annotations

import pytest
import yaml

from treeyaml import Tree, load_tree_from_string
from treeyaml.exporter import tree_to_mapping


def normalise(data):
    if isinstance(data, dict):
        return {str(k): normalise(v) for k, v in data.items()}
    if data is None:
        return ""
    if isinstance(data, bool):
        return "true" if data else "false"
    return str(data)


DOCUMENTS = [
    "a:\n  b: 1\n  c: 2\nd: 3\n",
    "server:\n    host: localhost\n    port: 8080\n    tls:\n        enabled: true\nname: demo\n",
    "# comment\nroot:\n\n  child: value with spaces\n  url: http://example.org/x\n",
    "desc: |\n  line1\n  line2\n",
    "desc: >\n  word1\n  word2\n\n  word3\n",
    'title: "Hello, world"\n',
]


@pytest.mark.parametrize("text", DOCUMENTS)
def test_matches_pyyaml(text):
    tree = Tree()
    load_tree_from_string(tree, text)
    ours = tree_to_mapping(tree)
    theirs = normalise(yaml.safe_load(text))
    # PyYAML keeps the final newline of block scalars; this format does not.
    if isinstance(theirs, dict) and "desc" in theirs:
        theirs["desc"] = theirs["desc"].rstrip("\n")
    assert ours == theirs
