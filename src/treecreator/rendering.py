"""Line rendering for tree diagrams.

Each entry is drawn as ``<indent><connector><name>``, with a trailing slash for
directories. The connector is ``└── `` for the last entry of a directory and
``├── `` otherwise; the indent carried to an entry's children grows by four
spaces under a last entry and by ``│   `` under any other.

Example:
    >>> print(root_line("/srv/project", print_root=True))
    /srv/project/
    >>> print(render_line("", "src", is_last=False, is_dir=True))
    ├── src/
    >>> print(render_line(child_indent("", is_last=False), "main.py", is_last=True))
    │   └── main.py
"""

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
SPACE_INDENT = "    "
ROOT_PLACEHOLDER = "/"


def root_line(root_path: str, print_root: bool = True) -> str:
    """Return the first line of a diagram: the root path, or a bare slash."""
    return f"{root_path}/" if print_root else ROOT_PLACEHOLDER


def render_line(indent: str, name: str, is_last: bool, is_dir: bool = False) -> str:
    connector = LAST_BRANCH if is_last else BRANCH
    suffix = "/" if is_dir else ""
    return f"{indent}{connector}{name}{suffix}"


def child_indent(indent: str, is_last: bool) -> str:
    return indent + (SPACE_INDENT if is_last else PIPE_INDENT)
