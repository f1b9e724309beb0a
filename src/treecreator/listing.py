"""Directory listing that never fails for a single directory."""

import logging
import os
from typing import List, Tuple

logger = logging.getLogger(__name__)


def list_directory(path: str) -> Tuple[List[os.DirEntry], List[os.DirEntry]]:
    """List the immediate subdirectories and files of a directory.

    Entries that are symbolic links to directories count as directories. Any
    OSError raised while listing (permission denied, name too long, a directory
    removed mid-walk) results in an empty listing so that one unreadable
    directory does not abort the rest of a traversal. The error is logged at
    DEBUG level and is not otherwise reported.

    Args:
        path: Directory to list.

    Returns:
        A pair of (directories, files), each in the order the OS returned them.
    """
    directories: List[os.DirEntry] = []
    files: List[os.DirEntry] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    is_dir = False
                (directories if is_dir else files).append(entry)
    except OSError as e:
        logger.debug("Skipping contents of %s: %s", path, e)
        return [], []
    return directories, files
