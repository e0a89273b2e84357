"""Node representation for entries of a rendered directory tree."""

import os
from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory listed in the tree.

    Extends anytree.Node with the filesystem facts the renderer needs. The
    node's ``depth`` (inherited from anytree) is its recursion depth, with the
    root at 0. Sizes are read lazily, and only for entries that are asked for
    one.

    Attributes:
        name (str): The entry name (just the basename).
        is_dir (bool): True if the entry is a directory. Symbolic links are never
            directories, whatever they point to.
        fs_path (Optional[str]): Filesystem path of the entry, as used for listing.

    Example:
        >>> root = FileSystemNode("project", is_dir=True)
        >>> child = FileSystemNode("README.md", parent=root)
        >>> child.depth
        1
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        fs_path: Optional[str] = None,
        entry: Optional["os.DirEntry[str]"] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            fs_path: Filesystem path of the entry. Defaults to None.
            entry: The os.DirEntry the node was listed from, used to read the
                size without another path lookup. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.fs_path = fs_path
        self._entry = entry

    @property
    def file_size(self) -> Optional[int]:
        """Size of the entry in bytes, or None if it cannot be read.

        Symbolic links report the size of the link itself.
        """
        try:
            if self._entry is not None:
                return self._entry.stat(follow_symlinks=False).st_size
            if self.fs_path is not None:
                return os.lstat(self.fs_path).st_size
        except OSError:
            return None
        return None

    @property
    def relative_path(self) -> str:
        """Path from the tree root, "/"-separated, with a trailing "/" for directories.

        Example:
            >>> root = FileSystemNode("project", is_dir=True)
            >>> src = FileSystemNode("src", parent=root, is_dir=True)
            >>> FileSystemNode("main.py", parent=src).relative_path
            'src/main.py'
            >>> src.relative_path
            'src/'
        """
        relative = "/".join(node.name for node in self.path[1:])
        if self.is_dir and relative:
            relative += "/"
        return relative
