"""Text tree rendering of directory structures.

This module provides the classes that walk a directory and render it as a
tree of box-drawing lines, one line per listed entry.
"""

from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree

__all__ = ["FileSystemNode", "FileSystemTree"]
