"""Directory tree rendering utilities.

This package renders the structure of a directory as a text tree, in the
manner of the Unix ``tree`` command.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"
