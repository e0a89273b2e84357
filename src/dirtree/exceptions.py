from typing import Optional


class InvalidRootError(Exception):
    """
    Exception raised when the directory to render cannot be used as a tree root.

    This covers a root path that does not exist, cannot be stat'd, or is not a
    directory. It is raised before any line of the tree is produced.

    Attributes:
        path (str): The root path as it was given.
        reason (str): Human-readable explanation of the problem.

    Example:
        >>> error = InvalidRootError("notes.txt", "not a directory")
        >>> str(error)
        'notes.txt: not a directory'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the offending path and the reason.

        Args:
            path (str): The root path as it was given.
            reason (str): Why the path cannot be rendered.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DirectoryListingError(OSError):
    """
    Exception raised when the children of a directory cannot be enumerated.

    Raised during traversal, for example when a directory is unreadable or was
    removed while the tree was being rendered. The error aborts the whole
    render; it is never caught inside the traversal.

    Attributes:
        path (str): The directory that could not be listed.

    Example:
        >>> import errno
        >>> error = DirectoryListingError("/srv/private", errno.EACCES, "Permission denied")
        >>> str(error)
        'cannot list directory /srv/private: Permission denied'
        >>> error.errno == errno.EACCES
        True
    """

    def __init__(self, path: str, error_number: Optional[int], strerror: Optional[str]) -> None:
        super().__init__(error_number, strerror)
        self.path = path

    def __str__(self) -> str:
        return f"cannot list directory {self.path}: {self.strerror}"
