"""Command-line argument parsing for treecreator.

This module defines the command-line interface for treecreator,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from treecreator import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with treecreator's options.
    """
    description = """
    treecreator: Render a directory as an indented tree diagram.

    The output mirrors the Unix 'tree' utility: directories first, then files,
    each sorted by name, drawn with box-drawing connectors. Directories and files
    can be filtered by name, extension, include-only subpaths, and gitignore-style
    patterns.
    """

    epilog = """
    Examples:
      # Render the whole tree
      treecreator /path/to/project

      # Skip build output and binaries commonly found in .NET and Node projects
      treecreator -D /path/to/project

      # Exclude directories by name and files by extension
      treecreator -x node_modules -x .git -X log -X .tmp /path/to/project

      # Show only the src/lib subtree and the Python files in it
      treecreator -d src/lib -t py /path/to/project

      # Apply gitignore rules
      treecreator -e .gitignore -i "*.bak" /path/to/project

      # Hide the root path and write to a file with a summary on stderr
      treecreator -R -o tree.txt -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treecreator {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to render.",
    )
    parser.add_argument(
        "-x",
        "--exclude-dir",
        metavar="NAME",
        action="append",
        default=[],
        help="Directory name to exclude (case-insensitive, can be specified multiple times).",
    )
    parser.add_argument(
        "-X",
        "--exclude-ext",
        metavar="EXT",
        action="append",
        default=[],
        help="File extension to exclude, with or without the leading dot (can be specified multiple times).",
    )
    parser.add_argument(
        "-d",
        "--include-dir",
        metavar="SPEC",
        action="append",
        default=[],
        help=(
            "Show only directories matching SPEC, a directory name or a relative subpath such as src/lib, "
            "together with their contents (can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-t",
        "--include-ext",
        metavar="EXT",
        action="append",
        default=[],
        help="Show only files with this extension (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action="append",
        default=[],
        help="Gitignore-style pattern to exclude, matched against paths relative to the directory.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action="append",
        default=[],
        help="Path to a gitignore-style file of exclusion patterns (can be specified multiple times).",
    )
    parser.add_argument(
        "-D",
        "--default-excludes",
        action="store_true",
        help="Exclude common build output directories (bin, obj, node_modules, ...) and binary extensions.",
    )
    parser.add_argument(
        "-R",
        "--no-root",
        action="store_true",
        help="Print '/' instead of the absolute root path on the first line.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print directory and file counts. Valid destinations: stderr, stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostics, such as unreadable directories, to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    for option, values in (("--include-ext", args.include_ext), ("--exclude-ext", args.exclude_ext)):
        if any(not value.strip(".").strip() for value in values):
            raise ValueError(f"{option} requires a non-empty extension")
    if any(not spec.strip("/\\").strip() for spec in args.include_dir):
        raise ValueError("--include-dir requires a non-empty directory name or path")
