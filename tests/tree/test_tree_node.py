"""Unit tests for the TreeNode class."""

import pytest
from anytree import TreeError

from treecreator.tree.tree_node import TreeNode


def test_tree_node_initialization():
    """Test basic initialization of TreeNode."""
    file_node = TreeNode("notes.txt", full_path="/p/notes.txt", relative_path="notes.txt")
    assert file_node.name == "notes.txt"
    assert file_node.full_path == "/p/notes.txt"
    assert file_node.relative_path == "notes.txt"
    assert not file_node.is_dir
    assert not file_node.is_expandable
    assert file_node.children == ()

    dir_node = TreeNode("p", full_path="/p", is_dir=True, is_expandable=True)
    assert dir_node.relative_path == "."
    assert dir_node.is_dir
    assert dir_node.is_expandable


def test_tree_node_children_keep_insertion_order():
    root = TreeNode("root", is_dir=True)
    b = TreeNode("b", parent=root, is_dir=True)
    a = TreeNode("a", parent=root, is_dir=True)
    z = TreeNode("z.txt", parent=root)

    assert root.children == (b, a, z)
    assert a.parent is root
    assert z.depth == 1


def test_cannot_attach_child_to_file_node():
    root = TreeNode("root", is_dir=True)
    file_node = TreeNode("file.txt", parent=root)

    with pytest.raises(TreeError):
        TreeNode("child", parent=file_node)
    assert file_node.children == ()


def test_find_child_is_case_insensitive():
    root = TreeNode("root", is_dir=True)
    readme = TreeNode("README.md", parent=root)

    assert root.find_child("readme.md") is readme
    assert root.find_child("README.MD") is readme
    assert root.find_child("missing") is None


def test_tree_node_with_additional_attributes():
    node = TreeNode("data.bin", size=1024)
    assert node.size == 1024
