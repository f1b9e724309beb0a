"""Command-line interface for treecreator.

This module provides the command-line entry point that renders a directory tree
with the configured filters and writes it to stdout or a file.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including a missing directory)
    2: Command-line syntax error
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # Render a directory without build output
    $ treecreator -D /path/to/dir

    # Display version information
    $ treecreator --version
"""

import argparse
import logging
import os
import sys
from collections.abc import Mapping

from treecreator.cli.argparser import create_parser, validate_args
from treecreator.generator import TreeGenerator


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing the directory and file counts.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
    ]
    return "\n".join(result)


def configure_logging(verbose: bool) -> None:
    """Send library diagnostics to stderr when verbose output is requested."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def build_generator(args: argparse.Namespace) -> TreeGenerator:
    """Create a TreeGenerator configured from parsed command-line arguments."""
    generator = TreeGenerator()
    if args.default_excludes:
        generator.with_default_exclusions()
    return (
        generator.exclude_directories(*args.exclude_dir)
        .exclude_extensions(*args.exclude_ext)
        .include_only_directories(*args.include_dir)
        .include_only_extensions(*args.include_ext)
        .load_ignore_files(*args.exclude)
        .ignore_patterns(*args.ignore)
    )


def main() -> None:
    """Main entry point for the treecreator command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        141: Broken pipe
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args()

    try:
        validate_args(args)
        configure_logging(args.verbose)

        generator = build_generator(args)
        result = generator.generate(args.directory, print_root=not args.no_root)
        counts = {"directories": result.directory_count, "files": result.file_count}

        try:
            if args.output:
                with open(args.output, "w", encoding="utf-8", errors="surrogateescape") as f:
                    f.write("\n".join(result.lines) + "\n")
            else:
                sys.stdout.write("\n".join(result.lines) + "\n")

            if args.summary == "stdout":
                sys.stdout.write("\n" + format_counts(counts) + "\n")
            elif args.summary == "stderr":
                print(format_counts(counts), file=sys.stderr)

            sys.stdout.flush()
        except BrokenPipeError:
            # Keep the interpreter from reporting the closed pipe again at shutdown
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(141)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
