"""Unit tests for TreeResult path handling and node construction."""

import os

import pytest

from treecreator.tree.tree_result import TreeResult


@pytest.fixture
def result(tmp_path):
    return TreeResult(tmp_path)


def test_initial_state(tmp_path, result):
    assert result.root_path == str(tmp_path)
    assert result.lines == (f"{tmp_path}/",)
    assert result.root.name == tmp_path.name
    assert result.root.relative_path == "."
    assert result.root.full_path == str(tmp_path)
    assert result.root.is_dir
    assert result.root.is_expandable
    assert result.directory_count == 0
    assert result.file_count == 0


def test_root_is_not_printed_when_disabled(tmp_path):
    assert TreeResult(tmp_path, print_root=False).lines == ("/",)


def test_root_path_is_canonicalized(tmp_path):
    messy = os.path.join(str(tmp_path), "sub", "..")
    assert TreeResult(messy).root_path == str(tmp_path)


def test_text_joins_lines_with_platform_separator(result):
    result.append_line("└── a.txt")
    assert result.text == os.linesep.join(result.lines)
    assert str(result) == result.text
    assert result.lines[-1] == "└── a.txt"


def test_lines_is_read_only_view(result):
    lines = result.lines
    result.append_line("├── b")
    assert len(lines) == 1
    assert len(result.lines) == 2


def test_create_or_get_root_returns_root(tmp_path, result):
    assert result.create_or_get_node(tmp_path, is_dir=True, is_expandable=False) is result.root


def test_create_or_get_node_is_idempotent(tmp_path, result):
    first = result.create_or_get_node(tmp_path / "a.txt", is_dir=False, is_expandable=False)
    second = result.create_or_get_node(tmp_path / "a.txt", is_dir=False, is_expandable=False)
    assert first is second
    assert result.root.children == (first,)


def test_create_or_get_node_matches_names_case_insensitively(tmp_path, result):
    first = result.create_or_get_node(tmp_path / "Docs", is_dir=True, is_expandable=False)
    second = result.create_or_get_node(tmp_path / "docs", is_dir=True, is_expandable=True)
    assert first is second
    assert not second.is_expandable


def test_create_or_get_node_creates_missing_ancestors(tmp_path, result):
    leaf = result.create_or_get_node(tmp_path / "a" / "b" / "c.txt", is_dir=False, is_expandable=False)

    a = result.root.find_child("a")
    b = a.find_child("b")
    assert leaf.parent is b
    assert a.is_dir and a.is_expandable
    assert b.is_dir and b.is_expandable
    assert b.relative_path == "a/b"
    assert leaf.relative_path == "a/b/c.txt"
    assert leaf.full_path == str(tmp_path / "a" / "b" / "c.txt")
    assert result.directory_count == 2
    assert result.file_count == 1


def test_create_or_get_node_outside_root_raises(tmp_path):
    result = TreeResult(tmp_path / "inner")
    with pytest.raises(ValueError):
        result.create_or_get_node(tmp_path / "elsewhere.txt", is_dir=False, is_expandable=False)


def test_sibling_with_common_prefix_is_outside_root(tmp_path):
    result = TreeResult(tmp_path / "proj")
    assert not result.is_within_root(tmp_path / "project")
    assert result.is_within_root(tmp_path / "proj" / "x")


def test_create_or_get_node_by_relative_path(result):
    node = result.create_or_get_node_by_relative_path("src/main.py", is_dir=False, is_expandable=False)
    assert node.relative_path == "src/main.py"
    assert result.create_or_get_node_by_relative_path(".", True, True) is result.root


def test_relative_and_absolute_path_translation(tmp_path, result):
    assert result.relative_path(tmp_path) == "."
    assert result.relative_path(tmp_path / "x" / "y.txt") == "x/y.txt"
    assert result.relative_path(tmp_path.parent / "sibling") == "../sibling"
    assert result.absolute_path(".") == str(tmp_path)
    assert result.absolute_path("") == str(tmp_path)
    assert result.absolute_path("x/y.txt") == str(tmp_path / "x" / "y.txt")
