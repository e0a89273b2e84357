from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that leave entries out of a rendered tree.

    The tree renderer asks an exclusion rules object about every entry it lists,
    passing the entry's path relative to the tree root with "/" separators.
    Directory paths carry a trailing "/". An excluded directory is neither
    printed nor descended.

    Loading rules from files and adding single rules are optional capabilities;
    the default implementations raise NotImplementedError.

    Example:
        >>> class NoLogs(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith(".log")
        >>> rules = NoLogs()
        >>> rules.exclude("var/app.log")
        True
        >>> rules.exclude("var/")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine whether an entry should be left out of the tree.

        Args:
            path (str): Root-relative path of the entry, "/"-separated, with a
                trailing "/" for directories.

        Returns:
            bool: True if the entry should be excluded, False otherwise.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a rules file or a sequence of such paths.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If a rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule.

        Args:
            rule (str): The rule to add; its format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Whether any rule is configured. Implementations without state always have rules."""
        return True

    def freeze(self) -> None:
        """Stop the rules from changing. Stateless implementations have nothing to freeze."""
