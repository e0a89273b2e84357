"""Exclusion rules written in .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dirtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches
    them: globs, directory-only patterns ending in "/", negations starting with
    "!", "**" and comment lines are all supported. Patterns keep the order in
    which they were added, whether they came from a file or were added one by
    one, so a later negation can re-include an earlier match.

    Once frozen, the rules reject further patterns, so a render sees the same
    rules from start to finish.

    Attributes:
        spec (PathSpec): Compiled matcher for all patterns added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.add_rule("*.pyc")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/cache.pyc")
        True
        >>> rules.exclude("src/")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Create the rules, optionally loading patterns from files.

        Args:
            rules_files: Path or sequence of paths to files with .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self._frozen = False
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a root-relative path against the patterns.

        Args:
            path: "/"-separated path relative to the tree root. Directories
                should carry a trailing "/" so that directory-only patterns apply.

        Returns:
            True if the last matching pattern excludes the path.
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns from one or more .gitignore-style files.

        Args:
            rules_files: Path or sequence of paths to rules files.

        Raises:
            FileNotFoundError: If any rules file does not exist. Files listed
                before the missing one have already been loaded.
            RuntimeError: If the rules have been frozen.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._extend(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.log")
            >>> rules.add_rule("!keep.log")
            >>> rules.exclude("debug.log"), rules.exclude("keep.log")
            (True, False)
        """
        self._extend([rule])

    def has_rules(self) -> bool:
        return bool(self.spec.patterns)

    def freeze(self) -> None:
        """Reject any further patterns.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.log")
            >>> rules.freeze()
            >>> rules.add_rule("*.tmp")
            Traceback (most recent call last):
                ...
            RuntimeError: Exclusion rules are frozen
        """
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _extend(self, lines: List[str]) -> None:
        if self._frozen:
            raise RuntimeError("Exclusion rules are frozen")
        self._lines.extend(lines)
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)
