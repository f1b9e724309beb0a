"""Fluent entry point for generating filtered directory trees.

Example:
    >>> generator = (
    ...     create_generator()
    ...     .exclude_directories("node_modules", ".git")
    ...     .include_only_extensions("py", "md")
    ... )
    >>> result = generator.generate("src")  # doctest: +SKIP
    >>> print(result)  # doctest: +SKIP
    /home/user/project/src/
    ├── pkg/
    │   └── module.py
    └── README.md
"""

import logging
import os
from typing import Optional

from treecreator.exceptions import DirectoryNotFoundError, InvalidRootPathError
from treecreator.filtering.filter_policy import FilterPolicy
from treecreator.filtering.included_paths import IncludedPathIndex
from treecreator.filtering.pattern_rules import PatternExclusionRules
from treecreator.traversal import DirectoryTraversal
from treecreator.tree.tree_result import TreeResult
from treecreator.types import PathType

logger = logging.getLogger(__name__)

# Build artifacts and IDE state commonly left out of project trees
DEFAULT_EXCLUDED_DIRECTORIES = ("bin", "obj", "Debug", "Release", ".vs", "packages", "node_modules")
DEFAULT_EXCLUDED_EXTENSIONS = (".dll", ".exe", ".pdb", ".cache", ".suo", ".user", ".baml", ".resources")


class TreeGenerator:
    """Configurable generator of directory tree diagrams.

    Filter configuration methods mutate the generator's FilterPolicy and return
    the generator itself, so calls can be chained. A configured generator can be
    reused for several roots one after another; the include-path index is
    rebuilt at the start of every generate call. It must not be shared between
    concurrent calls.

    Attributes:
        policy (FilterPolicy): The filters applied by generate.
    """

    def __init__(self, policy: Optional[FilterPolicy] = None) -> None:
        self.policy = policy if policy is not None else FilterPolicy()
        self._included_paths = IncludedPathIndex()

    def exclude_directories(self, *names: str) -> "TreeGenerator":
        """Exclude directories by name (case-insensitive)."""
        self.policy.exclude_directories(*names)
        return self

    def exclude_extensions(self, *extensions: str) -> "TreeGenerator":
        """Exclude files by extension; ``"log"`` and ``".LOG"`` are equivalent."""
        self.policy.exclude_extensions(*extensions)
        return self

    def include_only_directories(self, *specs: str) -> "TreeGenerator":
        """Show only directories matching a name or subpath, along with their contents."""
        self.policy.include_only_directories(*specs)
        return self

    def include_only_extensions(self, *extensions: str) -> "TreeGenerator":
        """Show only files with the given extensions."""
        self.policy.include_only_extensions(*extensions)
        return self

    def ignore_patterns(self, *patterns: str) -> "TreeGenerator":
        """Exclude root-relative paths matching gitignore-style patterns."""
        for pattern in patterns:
            self._pattern_rules().add_rule(pattern)
        return self

    def load_ignore_files(self, *paths: PathType) -> "TreeGenerator":
        """Exclude paths matching the patterns of gitignore-style files.

        Raises:
            FileNotFoundError: If any file does not exist.
        """
        if paths:
            self._pattern_rules().load_rules(list(paths))
        return self

    def with_default_exclusions(self) -> "TreeGenerator":
        """Exclude common build output directories and binary artifact extensions."""
        return self.exclude_directories(*DEFAULT_EXCLUDED_DIRECTORIES).exclude_extensions(*DEFAULT_EXCLUDED_EXTENSIONS)

    def generate(self, root_path: Optional[PathType], print_root: bool = True) -> TreeResult:
        """Walk root_path and return its filtered diagram and node tree.

        Args:
            root_path: Directory to render.
            print_root: False to print '/' instead of the root path on the first line.

        Returns:
            A populated TreeResult.

        Raises:
            InvalidRootPathError: If root_path is None, empty or whitespace.
            DirectoryNotFoundError: If root_path is not an existing directory.
        """
        if root_path is None or not os.fspath(root_path).strip():
            raise InvalidRootPathError()

        if not os.path.isdir(root_path):
            raise DirectoryNotFoundError(os.fspath(root_path))

        result = TreeResult(root_path, print_root=print_root)

        self._included_paths.clear()
        if self.policy.included_directories:
            self._included_paths.rebuild(result.root_path, self.policy.included_directories)

        logger.debug("Generating tree for %s", result.root_path)
        return DirectoryTraversal(self.policy, self._included_paths, result).run()

    def _pattern_rules(self) -> PatternExclusionRules:
        rules = self.policy.exclusion_rules
        if rules is None:
            rules = PatternExclusionRules()
            self.policy.exclusion_rules = rules
        elif not isinstance(rules, PatternExclusionRules):
            raise TypeError(
                f"Policy already uses {type(rules).__name__}; ignore patterns require PatternExclusionRules"
            )
        return rules


def create_generator(policy: Optional[FilterPolicy] = None) -> TreeGenerator:
    """Create a new tree generator, optionally around an existing policy."""
    return TreeGenerator(policy)
