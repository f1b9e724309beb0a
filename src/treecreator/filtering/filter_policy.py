"""Filter configuration deciding which directories and files are visible."""

from typing import FrozenSet, Optional, Set

from .base_rules import BaseExclusionRules
from .included_paths import IncludedPathIndex
from .path_matcher import normalize_path


def normalize_extension(extension: str) -> str:
    """Prepend a dot if missing and fold case.

    Example:
        >>> normalize_extension("TXT")
        '.txt'
        >>> normalize_extension(".cs")
        '.cs'
    """
    extension = extension.casefold()
    return extension if extension.startswith(".") else f".{extension}"


def file_extension(name: str) -> str:
    """Return the extension of a file name, including the leading dot.

    The extension starts at the last dot. A name without a dot, or ending with
    one, has no extension. A dotfile such as ``.gitignore`` is its own extension.

    Example:
        >>> file_extension("archive.tar.gz")
        '.gz'
        >>> file_extension(".gitignore")
        '.gitignore'
        >>> file_extension("Makefile")
        ''
    """
    index = name.rfind(".")
    if index == -1 or index == len(name) - 1:
        return ""
    return name[index:]


class FilterPolicy:
    """Filter sets consulted for every directory and file during traversal.

    Directory visibility runs in one of two modes. With no include specs, every
    directory is shown unless its name is excluded. Once an include spec is
    registered, only directories matching a spec, and those on the path to or
    beneath a match, are shown. File visibility works the same way with
    extensions, except that an excluded extension always hides the file.

    The excluded-directory check and the include check are evaluated
    independently. A directory whose name is both excluded and included is
    dropped when its parent is listed, but it is still recorded as an include
    match when the included path index is built.

    Membership tests are case-insensitive. Optional pattern rules (see
    PatternExclusionRules) are applied to root-relative paths on top of the
    name and extension filters.

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Additional path-based rules.

    Example:
        >>> policy = FilterPolicy().exclude_extensions("log").include_only_extensions(".py", "LOG")
        >>> policy.is_file_visible("main.PY")
        True
        >>> policy.is_file_visible("debug.log")
        False
    """

    def __init__(self, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        self._excluded_directories: Set[str] = set()
        self._excluded_extensions: Set[str] = set()
        self._included_directories: Set[str] = set()
        self._included_extensions: Set[str] = set()
        self.exclusion_rules = exclusion_rules

    @property
    def excluded_directories(self) -> FrozenSet[str]:
        return frozenset(self._excluded_directories)

    @property
    def excluded_extensions(self) -> FrozenSet[str]:
        return frozenset(self._excluded_extensions)

    @property
    def included_directories(self) -> FrozenSet[str]:
        return frozenset(self._included_directories)

    @property
    def included_extensions(self) -> FrozenSet[str]:
        return frozenset(self._included_extensions)

    def exclude_directories(self, *names: str) -> "FilterPolicy":
        """Hide directories with any of the given names."""
        self._excluded_directories.update(name.casefold() for name in names)
        return self

    def exclude_extensions(self, *extensions: str) -> "FilterPolicy":
        """Hide files with any of the given extensions. A missing leading dot is added."""
        self._excluded_extensions.update(normalize_extension(ext) for ext in extensions)
        return self

    def include_only_directories(self, *specs: str) -> "FilterPolicy":
        """Show only directories matching a name or relative subpath such as ``src/lib``."""
        self._included_directories.update(normalize_path(spec).casefold() for spec in specs)
        return self

    def include_only_extensions(self, *extensions: str) -> "FilterPolicy":
        """Show only files with one of the given extensions."""
        self._included_extensions.update(normalize_extension(ext) for ext in extensions)
        return self

    def is_directory_excluded(self, name: str) -> bool:
        return name.casefold() in self._excluded_directories

    def is_directory_included_by_name(self, name: str) -> bool:
        return name.casefold() in self._included_directories

    def is_directory_visible(self, path: str, name: str, included_paths: IncludedPathIndex) -> bool:
        """Decide whether a directory is shown.

        Args:
            path: Absolute path of the directory.
            name: Base name of the directory.
            included_paths: Index of include matches for the current traversal.
                Only consulted in include-list mode.

        Returns:
            True if the directory is visible.
        """
        if not self._included_directories:
            return not self.is_directory_excluded(name)

        if self.is_directory_included_by_name(name):
            return True

        return included_paths.covers(path)

    def is_file_visible(self, name: str) -> bool:
        """Decide whether a file is shown, based on its extension alone."""
        extension = file_extension(name).casefold()
        if extension in self._excluded_extensions:
            return False
        return not self._included_extensions or extension in self._included_extensions

    def is_path_excluded(self, relative_path: str, is_dir: bool) -> bool:
        """Consult the pattern rules, if any, for a root-relative path."""
        if self.exclusion_rules is None or not self.exclusion_rules.has_rules():
            return False
        if is_dir and not relative_path.endswith("/"):
            relative_path += "/"
        return self.exclusion_rules.exclude(relative_path)

