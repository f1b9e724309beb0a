"""Node representation for entries of a generated tree."""

from typing import Any, Optional

from anytree import Node, TreeError


class TreeNode(Node):  # type: ignore
    """Node representing a file or directory shown in a generated tree.

    Extends anytree.Node with the paths and flags of the entry it represents.
    Children keep the order in which they were attached, which during traversal
    is directories first, then files, each sorted by name.

    Attributes:
        name (str): Base name of the entry.
        parent (Optional[TreeNode]): The parent node, None for the root.
        full_path (str): Absolute, normalized path of the entry.
        relative_path (str): Path relative to the tree root with '/' separators, '.' for the root.
        is_dir (bool): True for directories.
        is_expandable (bool): True if the directory had at least one visible child
            when the node was created. Not re-evaluated afterwards.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("project", full_path="/project", is_dir=True, is_expandable=True)
        >>> readme = TreeNode("README.md", parent=root, full_path="/project/README.md", relative_path="README.md")
        >>> root.find_child("readme.MD") is readme
        True
        >>> TreeNode("oops", parent=readme)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        anytree.TreeError: Cannot add children to file node 'README.md'.
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        full_path: str = "",
        relative_path: str = ".",
        is_dir: bool = False,
        is_expandable: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.full_path = full_path
        self.relative_path = relative_path
        self.is_dir = is_dir
        self.is_expandable = is_expandable

    def _pre_attach(self, parent: Node) -> None:
        if not getattr(parent, "is_dir", True):
            raise TreeError(f"Cannot add children to file node '{parent.name}'.")

    def find_child(self, name: str) -> Optional["TreeNode"]:
        """Return the child with the given name, compared case-insensitively, or None."""
        folded = name.casefold()
        return next((child for child in self.children if child.name.casefold() == folded), None)
