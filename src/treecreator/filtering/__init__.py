"""Visibility rules for directories and files encountered during traversal."""

from .base_rules import BaseExclusionRules
from .filter_policy import FilterPolicy
from .included_paths import IncludedPathIndex
from .pattern_rules import PatternExclusionRules

__all__ = [
    "BaseExclusionRules",
    "FilterPolicy",
    "IncludedPathIndex",
    "PatternExclusionRules",
]
