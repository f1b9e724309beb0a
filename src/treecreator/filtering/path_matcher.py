"""String matching for include-only directory specifications.

A spec is either a bare directory name (``"src"``) or a ``/``-delimited
subpath (``"src/lib"``). All comparisons are case-insensitive.
"""

from typing import List, Sequence


def normalize_path(path: str) -> str:
    """Convert backslashes to forward slashes and drop trailing separators.

    Example:
        >>> normalize_path("src\\\\lib\\\\")
        'src/lib'
    """
    return path.replace("\\", "/").rstrip("/")


def split_segments(path: str) -> List[str]:
    """Split a normalized path into its non-empty segments.

    Example:
        >>> split_segments("/home/user//project/")
        ['home', 'user', 'project']
    """
    return [segment for segment in path.split("/") if segment]


def matches_segments(candidate_segments: Sequence[str], spec_segments: Sequence[str]) -> bool:
    """Check whether spec_segments occur contiguously in candidate_segments.

    The match is anchored at the first candidate segment equal to the first spec
    segment; later occurrences are not tried.

    Args:
        candidate_segments: Segments of the directory path being tested.
        spec_segments: Segments of the include spec.

    Returns:
        True if the full spec matches starting at the anchor.

    Example:
        >>> matches_segments(["home", "project", "src", "lib"], ["src", "lib"])
        True
        >>> matches_segments(["home", "project", "srclib"], ["src", "lib"])
        False
    """
    if not spec_segments:
        return False

    first = spec_segments[0].casefold()
    start = next((i for i, segment in enumerate(candidate_segments) if segment.casefold() == first), -1)

    if start == -1 or start + len(spec_segments) > len(candidate_segments):
        return False

    return all(
        candidate_segments[start + offset].casefold() == spec_segment.casefold()
        for offset, spec_segment in enumerate(spec_segments)
    )


def matches_include_spec(path: str, spec: str) -> bool:
    """Check whether a directory path satisfies an include spec.

    The suffix check runs first: a path ending with the spec (with or without a
    leading separator) matches. Multi-segment specs then fall back to the
    segment-anchor match.

    Args:
        path: Directory path, absolute or relative. Separators are normalized here.
        spec: Include spec, already normalized with normalize_path.

    Returns:
        True if the path matches the spec.

    Example:
        >>> matches_include_spec("/home/project/src/lib", "src/lib")
        True
        >>> matches_include_spec("/home/project/src/lib/deep", "src/lib")
        True
        >>> matches_include_spec("/home/project/srclib", "src/lib")
        False
    """
    normalized = normalize_path(path).casefold()
    folded_spec = spec.casefold()
    if not folded_spec:
        return False

    if normalized.endswith(folded_spec):
        return True

    spec_segments = split_segments(folded_spec)
    if len(spec_segments) > 1:
        return matches_segments(split_segments(normalized), spec_segments)
    return False
