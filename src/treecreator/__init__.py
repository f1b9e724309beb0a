"""Directory tree rendering utilities.

This package renders a filesystem subtree as an indented ASCII diagram, in the
style of the Unix ``tree`` utility, while building an addressable node tree of
the same filtered view.
"""

from importlib.metadata import PackageNotFoundError, version

from treecreator.filtering.filter_policy import FilterPolicy
from treecreator.generator import TreeGenerator, create_generator
from treecreator.tree.tree_node import TreeNode
from treecreator.tree.tree_result import TreeResult

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treecreator")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "FilterPolicy",
    "TreeGenerator",
    "TreeNode",
    "TreeResult",
    "create_generator",
    "__version__",
]
