"""Rendering of a directory as a text tree.

This module provides the FileSystemTree class, which walks a directory depth
first and renders every listed entry as one line, with box-drawing guides that
show the hierarchy and each entry's position among its siblings.
"""

import os
import stat
from typing import Iterator, List, Optional

from anytree import PreOrderIter

from dirtree.exceptions import DirectoryListingError, InvalidRootError
from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.options import DisplayOptions
from dirtree.size_format import human_size
from dirtree.types import PathType

BRANCH = "├── "
LAST_BRANCH = "└── "
GUIDE = "│   "
BLANK_GUIDE = "    "


class FileSystemTree:
    """A text tree rendering of a directory, driven by DisplayOptions.

    Lines are produced lazily, in depth-first pre-order: a directory's line
    comes before the lines of its children, and each child's subtree is
    finished before the next sibling starts. Every listed entry is recorded as
    a FileSystemNode, so the rendered structure and its counts remain available
    once the render is complete.

    Within a directory, entries are filtered (hidden names, non-directories
    when only directories are wanted, exclusion rules) and then sorted with
    directories first and names compared case-insensitively.

    Error Handling:
        A root that is missing, unreadable or not a directory raises
        InvalidRootError before any line is produced. A directory whose
        children cannot be listed raises DirectoryListingError, which ends the
        render at that point; lines produced before it are not taken back.
        An unreadable file size only drops the size annotation.

    Symbolic Link Behavior:
        Symbolic links are listed under their own name and never followed, so
        a link to a directory is shown as a file.

    Attributes:
        root_path (str): The root path as given, normalised.
        options (DisplayOptions): The render configuration.

    Example:
        >>> tree = FileSystemTree("src", DisplayOptions(max_depth=1))  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src
        ├── dirtree
        └── README.md
    """

    def __init__(self, root_path: PathType, options: Optional[DisplayOptions] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the directory to render. Can be any path-like object.
            options: Render configuration. Defaults to DisplayOptions().
        """
        self.root_path = os.path.normpath(os.fspath(root_path))
        self.options = options if options is not None else DisplayOptions()
        self._tree: Optional[FileSystemNode] = None
        self._complete = False

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root node of the entries rendered so far.

        Returns:
            The root node, or None if no render has started yet.
        """
        return self._tree

    def get_root_name(self) -> str:
        """Get the name shown on the first line of the tree.

        The root is made absolute without resolving symbolic links, and its base
        name is used. If the absolute form cannot be determined (for example
        because the working directory no longer exists), the normalised path as
        given is used instead. A root made only of separators (such as "/" or
        "//") is shown as a single separator.

        Example:
            >>> FileSystemTree("/usr/share/").get_root_name()
            'share'
            >>> FileSystemTree("/").get_root_name()
            '/'
        """
        try:
            resolved = os.path.abspath(self.root_path)
        except OSError:
            resolved = self.root_path

        name = os.path.basename(resolved.rstrip(os.sep))
        return name if name else os.sep

    def validate_root(self) -> None:
        """Check that the root path is a directory that can be stat'd.

        Raises:
            InvalidRootError: If the root path does not exist, cannot be
                accessed, or is not a directory.
        """
        try:
            stat_info = os.stat(self.root_path)
        except OSError as e:
            raise InvalidRootError(self.root_path, e.strerror or str(e)) from e

        if not stat.S_ISDIR(stat_info.st_mode):
            raise InvalidRootError(self.root_path, "not a directory")

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree one line at a time.

        The first line is the root name; every further line is one entry,
        prefixed with the guides of its ancestors and its own branch glyph.

        Yields:
            Lines of the tree, without trailing newlines.

        Raises:
            InvalidRootError: If the root path cannot be rendered.
            DirectoryListingError: If a directory cannot be listed during the walk.

        Example:
            >>> tree = FileSystemTree("project")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            project
            ├── docs
            │   └── index.md
            └── setup.py
        """
        self.validate_root()

        self._complete = False
        self._tree = FileSystemNode(self.get_root_name(), is_dir=True, fs_path=self.root_path)
        yield self._tree.name
        yield from self._walk(self._tree, self.root_path, "")
        self._complete = True

    def get_tree_representation(self) -> str:
        """Get the complete tree as a single string.

        Raises:
            InvalidRootError: If the root path cannot be rendered.
            DirectoryListingError: If a directory cannot be listed during the walk.
        """
        return "\n".join(self.stream_tree_representation())

    def get_directory_count(self) -> int:
        """Get the number of directory entries rendered, excluding the root.

        Renders the tree first if no complete render has happened yet.
        """
        self._ensure_rendered()
        return sum(1 for node in PreOrderIter(self._tree) if node.is_dir) - 1

    def get_file_count(self) -> int:
        """Get the number of non-directory entries rendered.

        Renders the tree first if no complete render has happened yet.
        """
        self._ensure_rendered()
        return sum(1 for node in PreOrderIter(self._tree) if not node.is_dir)

    def _ensure_rendered(self) -> None:
        if not self._complete:
            for _ in self.stream_tree_representation():
                pass

    def _walk(self, node: FileSystemNode, directory: str, prefix: str) -> Iterator[str]:
        """Render the children of a directory node, recursing into subdirectories."""
        if self.options.limits_depth and node.depth >= self.options.max_depth:
            return

        children = self._list_children(node, directory)
        for index, child in enumerate(children):
            is_last = index == len(children) - 1
            line = f"{prefix}{LAST_BRANCH if is_last else BRANCH}{child.name}"

            if self.options.show_size and not child.is_dir:
                size = child.file_size
                if size is not None:
                    line += f" ({human_size(size)})"

            yield line

            if child.is_dir:
                child_prefix = prefix + (BLANK_GUIDE if is_last else GUIDE)
                yield from self._walk(child, os.path.join(directory, child.name), child_prefix)

    def _list_children(self, node: FileSystemNode, directory: str) -> List[FileSystemNode]:
        """List, filter and sort the entries of a directory and attach them to its node.

        Raises:
            DirectoryListingError: If the directory cannot be enumerated.
        """
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise DirectoryListingError(directory, e.errno, e.strerror) from e

        rules = self.options.exclusion_rules
        candidates = []
        for entry in entries:
            if not self.options.include_hidden and entry.name.startswith("."):
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False

            if self.options.directories_only and not is_dir:
                continue
            candidates.append((entry, is_dir))

        candidates.sort(key=lambda item: (not item[1], item[0].name.lower()))

        children = []
        for entry, is_dir in candidates:
            if rules is not None and rules.has_rules():
                relative_path = node.relative_path + entry.name + ("/" if is_dir else "")
                if rules.exclude(relative_path):
                    continue
            children.append(FileSystemNode(entry.name, parent=node, is_dir=is_dir, fs_path=entry.path, entry=entry))
        return children
