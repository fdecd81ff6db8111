from treeyaml.tree import Node, Tree

import pytest


def build():
    tree = Tree()
    db = tree.add_child("MainDatabase")
    db.add_child("Adapter", "ADO")
    conn = db.add_child("Connection")
    conn.add_child("Timeout", "30")
    conn.add_child("Pooling", "Yes")
    tree.add_child("AppName", "Hello")
    return tree


def test_add_child_preserves_order():
    tree = Tree()
    for name in ["c", "a", "b"]:
        tree.add_child(name)
    assert [tree.child_at(i).name for i in range(tree.child_count)] == ["c", "a", "b"]


def test_add_child_returns_new_node():
    tree = Tree()
    node = tree.add_child("a", "1")
    assert isinstance(node, Node)
    node.value = "2"
    assert tree.child_at(0).value == "2"


def test_clear():
    tree = build()
    tree.clear()
    assert tree.child_count == 0


def test_find_node_by_path():
    tree = build()
    assert tree.find_node("MainDatabase/Adapter").value == "ADO"
    assert tree.find_node("MainDatabase/Missing") is None
    assert tree.find_node("") is tree
    assert tree.get_node("MainDatabase").find_node("Connection/Timeout").value == "30"


def test_get_node_missing_raises():
    with pytest.raises(KeyError):
        build().get_node("Nope/Nothing")


def test_typed_getters():
    tree = build()
    assert tree.get_string("AppName") == "Hello"
    assert tree.get_string("AppTitle", "Kitto") == "Kitto"
    assert tree.get_integer("MainDatabase/Connection/Timeout") == 30
    assert tree.get_integer("MainDatabase/Connection/Missing", 5) == 5
    assert tree.get_boolean("MainDatabase/Connection/Pooling") is True
    assert tree.get_boolean("MainDatabase/Connection/Missing", True) is True


def test_get_boolean_rejects_garbage():
    tree = Tree()
    tree.add_child("flag", "maybe")
    with pytest.raises(ValueError):
        tree.get_boolean("flag")


def test_iteration_and_depth():
    tree = build()
    names = [n.name for n in tree.iter_nodes()]
    assert names == ["MainDatabase", "Adapter", "Connection", "Timeout", "Pooling", "AppName"]
    assert tree.node_count() == 6
    assert tree.depth() == 3
    assert Tree().depth() == 0


def test_structural_equality():
    assert build() == build()
    other = build()
    other.get_node("MainDatabase/Adapter").value = "FD"
    assert other != build()


def test_to_dict_is_lossless():
    tree = Tree()
    tree.add_child("a", "1")
    tree.add_child("a", "2")
    assert tree.to_dict() == {
        "children": [
            {"name": "a", "value": "1", "children": []},
            {"name": "a", "value": "2", "children": []},
        ]
    }


def test_deep_tree_walks_without_recursion():
    tree = Tree()
    node = tree
    for i in range(3000):
        node = node.add_child(f"n{i}", str(i))

    assert tree.node_count() == 3000
    assert [n.name for n in tree.iter_nodes()][-1] == "n2999"

    leaf = tree.to_dict()
    for _ in range(3000):
        leaf = leaf["children"][0]
    assert leaf == {"name": "n2999", "value": "2999", "children": []}
