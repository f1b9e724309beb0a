"""Result of a tree generation: rendered lines plus the node hierarchy."""

import os
from typing import List, Tuple

from anytree import PreOrderIter

from treecreator.rendering import root_line
from treecreator.tree.tree_node import TreeNode
from treecreator.types import PathType


def _canonical(path: PathType) -> str:
    return os.path.normpath(os.path.abspath(os.fspath(path)))


def _same_path(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


class TreeResult:
    """Rendered diagram and materialized node tree for one generation run.

    The result starts with a single line (the root path followed by a slash, or
    a bare slash when root printing is disabled) and a root node. Traversal then
    appends lines and creates nodes; once traversal completes the result is not
    modified further.

    Nodes are addressable by absolute or root-relative path. Looking up an
    existing path returns the node already in the tree; missing ancestors are
    created as expandable directory nodes, so a node is never attached before
    its parent exists.

    Attributes:
        root_path (str): Absolute, normalized path of the tree root.
        root (TreeNode): The root node, with relative path '.'.

    Example:
        >>> result = TreeResult("/srv/project")
        >>> node = result.create_or_get_node("/srv/project/src/app.py", is_dir=False, is_expandable=False)
        >>> node.relative_path
        'src/app.py'
        >>> node.parent.is_expandable
        True
        >>> result.create_or_get_node("/srv/project/src/app.py", False, False) is node
        True
        >>> result.lines
        ('/srv/project/',)
    """

    def __init__(self, root_path: PathType, print_root: bool = True) -> None:
        """Initialize the result for a root directory.

        Args:
            root_path: The root directory. It is made absolute and normalized.
            print_root: False to render a bare '/' instead of the root path on the first line.
        """
        self.root_path = _canonical(root_path)
        self._root_prefix = self.root_path if self.root_path.endswith(os.sep) else self.root_path + os.sep
        self.print_root = print_root
        self._lines: List[str] = [root_line(self.root_path, print_root)]

        # A filesystem root such as '/' has no base name
        root_name = os.path.basename(self.root_path) or self.root_path
        self.root = TreeNode(root_name, full_path=self.root_path, relative_path=".", is_dir=True, is_expandable=True)

    def append_line(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> Tuple[str, ...]:
        """All rendered lines, in traversal order."""
        return tuple(self._lines)

    @property
    def text(self) -> str:
        """The rendered lines joined with the platform line separator."""
        return os.linesep.join(self._lines)

    def __str__(self) -> str:
        return self.text

    @property
    def directory_count(self) -> int:
        """Number of directory nodes, excluding the root."""
        return sum(1 for node in PreOrderIter(self.root) if node.is_dir) - 1

    @property
    def file_count(self) -> int:
        """Number of file nodes."""
        return sum(1 for node in PreOrderIter(self.root) if not node.is_dir)

    def relative_path(self, path: PathType) -> str:
        """Convert a path to one relative to the root, using '/' separators.

        The root itself maps to '.'. Paths outside the root are expressed with
        '..' components.

        Example:
            >>> result = TreeResult("/srv/project")
            >>> result.relative_path("/srv/project")
            '.'
            >>> result.relative_path("/srv/project/docs/index.md")
            'docs/index.md'
            >>> result.relative_path("/srv/other")
            '../other'
        """
        path = _canonical(path)

        if _same_path(path, self.root_path):
            return "."

        if self.is_within_root(path):
            relative = path[len(self._root_prefix) :]
        else:
            relative = os.path.relpath(path, self.root_path)
        return relative.replace("\\", "/") or "."

    def absolute_path(self, relative_path: str) -> str:
        """Convert a root-relative path to an absolute one.

        Example:
            >>> result = TreeResult("/srv/project")
            >>> result.absolute_path(".")
            '/srv/project'
            >>> result.absolute_path("src/../docs")
            '/srv/project/docs'
        """
        if not relative_path or relative_path == ".":
            return self.root_path
        return _canonical(os.path.join(self.root_path, relative_path))

    def is_within_root(self, path: PathType) -> bool:
        path = _canonical(path)
        return _same_path(path, self.root_path) or path.casefold().startswith(self._root_prefix.casefold())

    def create_or_get_node(self, path: PathType, is_dir: bool, is_expandable: bool) -> TreeNode:
        """Return the node for an absolute path, creating it (and missing ancestors) if needed.

        Args:
            path: Path of the entry. It is made absolute and normalized.
            is_dir: Whether a newly created node is a directory.
            is_expandable: Whether a newly created node has visible children.

        Returns:
            The existing node with the same (case-insensitive) name under the
            same parent, or the newly attached node.

        Raises:
            ValueError: If path is not inside the root directory.
            anytree.TreeError: If the parent of path is a file node.
        """
        path = _canonical(path)

        if _same_path(path, self.root_path):
            return self.root
        if not self.is_within_root(path):
            raise ValueError(f"Path '{path}' is not inside root '{self.root_path}'")

        parent_path = os.path.dirname(path)
        parent = self.create_or_get_node(parent_path, is_dir=True, is_expandable=True)

        name = os.path.basename(path)
        existing = parent.find_child(name)
        if existing is not None:
            return existing

        return TreeNode(
            name,
            parent=parent,
            full_path=path,
            relative_path=self.relative_path(path),
            is_dir=is_dir,
            is_expandable=is_expandable,
        )

    def create_or_get_node_by_relative_path(self, relative_path: str, is_dir: bool, is_expandable: bool) -> TreeNode:
        """Like create_or_get_node, for a path relative to the root."""
        return self.create_or_get_node(self.absolute_path(relative_path), is_dir, is_expandable)
