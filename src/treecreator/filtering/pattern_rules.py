"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from treecreator.types import PathType

from .base_rules import BaseExclusionRules


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion rules built from gitignore-style patterns.

    Patterns are matched with the pathspec library's ``gitwildmatch`` syntax, so
    globs, directory-only patterns (``build/``), ``**`` and negations
    (``!keep.log``) behave as they do in git. Patterns from files and patterns
    added one at a time are combined in the order they were supplied; later
    patterns may override earlier ones.

    Example:
        >>> rules = PatternExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("debug.log")
        True
        >>> rules.exclude("keep.log")
        False
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path or sequence of paths to gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a root-relative path against the configured patterns."""
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns contained in one or more gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._extend(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Append a single gitignore-style pattern, e.g. ``"*.pyc"`` or ``"!keep.txt"``."""
        self._extend([rule])

    def has_rules(self) -> bool:
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def _extend(self, lines: Sequence[str]) -> None:
        self._lines.extend(lines)
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
