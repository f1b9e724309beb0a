"""Index of directories matching include-only specs."""

import logging
import os
from collections import deque
from typing import Deque, Iterable, Iterator, Set

from treecreator.listing import list_directory

from .path_matcher import matches_include_spec, normalize_path

logger = logging.getLogger(__name__)


def _is_same_or_ancestor(ancestor: str, path: str) -> bool:
    if ancestor == path:
        return True
    prefix = ancestor if ancestor.endswith(os.sep) else ancestor + os.sep
    return path.startswith(prefix)


class IncludedPathIndex:
    """Absolute paths of directories that satisfy an include spec.

    The index is built by a breadth-first walk from the traversal root. A
    directory whose name equals a spec is recorded and not expanded, since
    everything beneath it is covered anyway. Every other directory is tested
    against each spec in turn and then expanded.

    A directory is covered by the index when it is a recorded path, lies beneath
    one, or lies on the way to one. Comparisons are case-insensitive and respect
    path component boundaries.

    Example:
        >>> index = IncludedPathIndex()
        >>> index.add("/project/src")
        >>> index.covers("/project/src/lib")
        True
        >>> index.covers("/project")
        True
        >>> index.covers("/project/srcgen")
        False
    """

    def __init__(self) -> None:
        self._paths: Set[str] = set()

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and path.casefold() in self._paths

    def add(self, path: str) -> None:
        self._paths.add(path.casefold())

    def clear(self) -> None:
        self._paths.clear()

    def covers(self, path: str) -> bool:
        """Check whether path is an ancestor or descendant of (or equal to) any recorded path."""
        if path in self:
            return True
        folded = path.casefold()
        return any(
            _is_same_or_ancestor(included, folded) or _is_same_or_ancestor(folded, included)
            for included in self._paths
        )

    def rebuild(self, root_path: str, specs: Iterable[str]) -> None:
        """Clear the index and walk root_path recording every directory matching one of specs.

        Args:
            root_path: Absolute path of the traversal root. The root itself is tested.
            specs: Include specs, normalized and case-folded.
        """
        self.clear()
        specs = list(specs)
        if not specs:
            return

        names = set(specs)
        queue: Deque[str] = deque([root_path])

        while queue:
            current = queue.popleft()

            if os.path.basename(current).casefold() in names:
                self.add(current)
                continue

            normalized = normalize_path(current)
            for spec in specs:
                if matches_include_spec(normalized, spec):
                    self.add(current)
                    break

            directories, _ = list_directory(current)
            queue.extend(entry.path for entry in directories)

        logger.debug("Included path index for %s holds %d paths", root_path, len(self._paths))
