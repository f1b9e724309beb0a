"""Depth-first traversal producing diagram lines and nodes."""

import os
from typing import List

from treecreator.filtering.filter_policy import FilterPolicy
from treecreator.filtering.included_paths import IncludedPathIndex
from treecreator.listing import list_directory
from treecreator.rendering import child_indent, render_line
from treecreator.tree.tree_result import TreeResult


class DirectoryTraversal:
    """Walks a directory tree once, filling a TreeResult.

    For every directory, subdirectories whose names are excluded are dropped,
    the rest are sorted by name and filtered through the policy's visibility
    predicate; files are filtered by extension and sorted by name.
    Subdirectories are emitted before files. Each visible directory gets its
    line and its node before its own contents are visited.

    An entry is drawn with the terminal connector when it is the last thing in
    its directory: the last visible subdirectory when there are no visible
    files, or the last file.

    Attributes:
        policy (FilterPolicy): Filters applied at every level.
        included_paths (IncludedPathIndex): Include matches for this traversal.
        result (TreeResult): Receives lines and nodes.
    """

    def __init__(self, policy: FilterPolicy, included_paths: IncludedPathIndex, result: TreeResult) -> None:
        self.policy = policy
        self.included_paths = included_paths
        self.result = result

    def run(self) -> TreeResult:
        self._visit(self.result.root_path, "", is_root=True)
        return self.result

    def _visit(self, path: str, indent: str, is_root: bool = False) -> None:
        if not is_root and not self._is_directory_visible(path):
            return

        directories, files = list_directory(path)
        directories = [
            entry for entry in self._surviving_directories(directories) if self._is_directory_visible(entry.path)
        ]
        files = self._surviving_files(files)

        for i, directory in enumerate(directories):
            is_last = i == len(directories) - 1 and not files
            self.result.append_line(render_line(indent, directory.name, is_last, is_dir=True))
            self.result.create_or_get_node(
                directory.path, is_dir=True, is_expandable=self._has_visible_children(directory.path)
            )
            self._visit(directory.path, child_indent(indent, is_last))

        for i, file in enumerate(files):
            is_last = i == len(files) - 1
            self.result.append_line(render_line(indent, file.name, is_last))
            self.result.create_or_get_node(file.path, is_dir=False, is_expandable=False)

    def _is_directory_visible(self, path: str) -> bool:
        return self.policy.is_directory_visible(path, os.path.basename(path), self.included_paths)

    def _surviving_directories(self, entries: List[os.DirEntry]) -> List[os.DirEntry]:
        survivors = [
            entry
            for entry in entries
            if not self.policy.is_directory_excluded(entry.name)
            and not self.policy.is_path_excluded(self.result.relative_path(entry.path), is_dir=True)
        ]
        return sorted(survivors, key=lambda entry: entry.name)

    def _surviving_files(self, entries: List[os.DirEntry]) -> List[os.DirEntry]:
        survivors = [
            entry
            for entry in entries
            if self.policy.is_file_visible(entry.name)
            and not self.policy.is_path_excluded(self.result.relative_path(entry.path), is_dir=False)
        ]
        return sorted(survivors, key=lambda entry: entry.name)

    def _has_visible_children(self, path: str) -> bool:
        """Look one level into a directory without emitting anything."""
        directories, files = list_directory(path)
        if self._surviving_files(files):
            return True
        return any(self._is_directory_visible(entry.path) for entry in self._surviving_directories(directories))
