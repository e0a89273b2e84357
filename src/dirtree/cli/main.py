"""Command-line interface for dirtree.

This module provides the ``dirtree`` command, which prints the tree of a
directory to stdout. It parses the command line, runs the render, and turns
errors and signals into messages and exit codes.

Key Features:
    - Directory tree rendering with depth limit, hidden-entry and
      directories-only filtering, and file sizes
    - Gitignore-style exclusion patterns and rules files
    - Optional directory and file counts
    - Signal handling (SIGPIPE when piped into e.g. ``head``, SIGINT)

Exit Codes:
    0: Successful completion
    1: Invalid root path, unreadable directory during the walk, or missing rules file
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # Render the current directory
    $ dirtree

    # Two levels, with file sizes
    $ dirtree -L 2 --size /path/to/dir
"""

import sys
from collections.abc import Mapping

from dirtree.cli.argparser import PROGRAM_NAME, build_options, create_parser
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.exceptions import InvalidRootError
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.file_system_tree.file_system_tree import FileSystemTree


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the directory and file counts for the summary.

    Args:
        counts: Mapping with "directories" and "files" entries.

    Returns:
        One labelled count per line.
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
        ]
    )


def report_error(error: BaseException) -> None:
    """Write a fatal error as a single line on stderr, prefixed with the program name."""
    print(f"{PROGRAM_NAME}: {error}", file=sys.stderr)


def main() -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Invalid root path, unreadable directory, or missing rules file
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE)
    """
    setup_signal_handling()

    try:
        # Populated by -e/-i while the command line is parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        tree = FileSystemTree(args.path, build_options(args, exclusion_rules))
        tree.validate_root()

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                safe_writer.write_lines(tree.stream_tree_representation())

                if args.summary:
                    counts = {
                        "directories": tree.get_directory_count(),
                        "files": tree.get_file_count(),
                    }
                    if args.summary == "stdout":
                        safe_writer.write("\n" + format_counts(counts) + "\n")
                    else:
                        print(format_counts(counts), file=sys.stderr)

            except BrokenPipeError:
                pass

    except (InvalidRootError, OSError) as e:
        report_error(e)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
