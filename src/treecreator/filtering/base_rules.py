from abc import ABC, abstractmethod
from typing import Sequence, Union

from treecreator.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for path-based exclusion rules.

    Exclusion rules complement the name and extension filters of a FilterPolicy:
    they are consulted with the path of each entry relative to the traversal root,
    using forward slashes, with a trailing slash for directories. File loading and
    individual rule addition are optional capabilities that depend on the rule type.

    Example:
        >>> from treecreator.filtering.pattern_rules import PatternExclusionRules
        >>> rules = PatternExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/module.pyc')
        True
        >>> rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Path relative to the traversal root, using '/' separators.
                Directory paths end with '/'.

        Returns:
            bool: True if the path should be excluded, False if it should be kept.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Report whether any rule is configured. Subclasses without state always have rules."""
        return True
