"""Display options controlling how a directory tree is rendered."""

from dataclasses import dataclass
from typing import Optional

from dirtree.exclusion_rules.base_rules import BaseExclusionRules


@dataclass(frozen=True)
class DisplayOptions:
    """Immutable configuration for a single tree render.

    Attributes:
        max_depth: Maximum traversal depth. 0 (or any value below 1) means
            unlimited. With a positive value, entries at exactly that depth are
            printed but not expanded.
        include_hidden: Whether entries whose name starts with "." are listed.
        directories_only: Whether non-directory entries are left out. Directories
            are always listed and descended, even when they contain no other
            directories.
        show_size: Whether file entries are annotated with a human-readable size.
        exclusion_rules: Optional rules matched against root-relative paths;
            matching entries are left out together with their subtrees. The
            dataclass does not copy the rules object: callers that want a
            fixed configuration freeze it first, as the command line does.

    Example:
        >>> options = DisplayOptions(max_depth=2, show_size=True)
        >>> options.limits_depth
        True
        >>> DisplayOptions().limits_depth
        False
    """

    max_depth: int = 0
    include_hidden: bool = False
    directories_only: bool = False
    show_size: bool = False
    exclusion_rules: Optional[BaseExclusionRules] = None

    @property
    def limits_depth(self) -> bool:
        """Whether a positive depth limit is in effect."""
        return self.max_depth > 0
