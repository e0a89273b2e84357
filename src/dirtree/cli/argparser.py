"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree and converts the
parsed arguments into DisplayOptions.
"""

import argparse
import sys
from pathlib import Path
from typing import IO, Any, List, Optional, Sequence, Type, Union

from dirtree import __version__
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.options import DisplayOptions

PROGRAM_NAME = "dirtree"


class StderrHelpParser(argparse.ArgumentParser):
    """Argument parser that prints its help text to stderr.

    Only the tree itself goes to stdout, so that help output never ends up
    in a file or pipe that expects a tree.
    """

    def print_help(self, file: Optional[IO[str]] = None) -> None:
        super().print_help(file if file is not None else sys.stderr)


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds exclusion options into a rules object.

    Rules files (-e) and single patterns (-i) are handed to the rules object
    as soon as argparse meets them, so their relative order on the command
    line is the order in which the patterns apply.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, recorded + [values])

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    Renders a text-based directory tree. Defaults to current directory.

    Directories are listed before files, and names are sorted case-insensitively
    within each group. Hidden entries (names starting with ".") are left out
    unless --all is given.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      dirtree

      # Two levels deep, including hidden entries
      dirtree -L 2 --all /path/to/project

      # Directories only
      dirtree --dirs-only /path/to/project

      # File sizes, without build output
      dirtree --size -i "build/" -i "*.pyc" /path/to/project

      # Leave out whatever .gitignore excludes
      dirtree -e .gitignore .

      # Count rendered directories and files on stderr
      dirtree -S stderr /path/to/project
    """

    parser = StderrHelpParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [options] [PATH]",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"{PROGRAM_NAME} {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        type=Path,
        metavar="PATH",
        help="The directory to render (default: current directory).",
    )
    parser.add_argument(
        "-L",
        "--depth",
        type=int,
        default=0,
        metavar="N",
        help="Max depth to display (default: 0 = unlimited).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Include hidden files and directories (those starting with .).",
    )
    parser.add_argument(
        "-d",
        "--dirs-only",
        action="store_true",
        help="Show directories only.",
    )
    parser.add_argument(
        "-s",
        "--size",
        action="store_true",
        help="Show file sizes.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a .gitignore-style file of patterns to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern to leave out, matched against paths relative to PATH. Can be "
            "specified multiple times; patterns apply in command-line order, mixed with -e/--exclude."
        ),
    )
    parser.add_argument(
        "-S",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print directory and file counts after the tree. Valid destinations: stderr, stdout.",
    )

    return parser


def build_options(args: argparse.Namespace, exclusion_rules: Optional[BaseExclusionRules] = None) -> DisplayOptions:
    """Convert parsed arguments into DisplayOptions.

    Args:
        args: Parsed command-line arguments.
        exclusion_rules: Rules populated while parsing, if any were given. They
            are frozen here, so the options keep the rules they were built with.

    Returns:
        The render configuration.
    """
    has_rules = exclusion_rules is not None and exclusion_rules.has_rules()
    if exclusion_rules is not None:
        exclusion_rules.freeze()
    return DisplayOptions(
        max_depth=args.depth,
        include_hidden=args.all,
        directories_only=args.dirs_only,
        show_size=args.size,
        exclusion_rules=exclusion_rules if has_rules else None,
    )
