"""Signal-aware line output for the dirtree command line."""

import errno
import os
import types
from typing import Iterable, Optional, Type

from dirtree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes tree lines straight to a file descriptor.

    Every write first checks whether SIGPIPE or SIGINT has been received and,
    if so, raises BrokenPipeError so that the caller stops producing lines.
    Lines are encoded as UTF-8 and written unbuffered, which keeps stdout and
    stderr output in the order it was produced. Names that are not valid UTF-8
    arrive from the filesystem with surrogate escapes and are written back as
    their original bytes.

    Attributes:
        fd: The file descriptor written to.
        lines_written: Number of lines written so far.

    Example:
        >>> import sys
        >>> with SafeWriter(sys.stdout.fileno()) as writer:  # doctest: +SKIP
        ...     writer.write_line("project")
        project
    """

    def __init__(self, fd: int):
        """Initialize the writer.

        Args:
            fd: An open file descriptor. It is not closed by the writer.

        Raises:
            TypeError: If fd is not an integer.
        """
        if not isinstance(fd, int) or isinstance(fd, bool):
            raise TypeError(f"Expected a file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self.lines_written = 0
        self._closed = False

    def write(self, data: str) -> None:
        """Write a string as is.

        Raises:
            BrokenPipeError: If a SIGPIPE or SIGINT was received, or the pipe is broken.
            OSError: If any other I/O error occurs.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        data_bytes = data.encode("utf-8", "surrogateescape")
        try:
            while data_bytes:
                written = os.write(self.fd, data_bytes)
                data_bytes = data_bytes[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_line(self, line: str) -> None:
        """Write one line followed by a newline."""
        self.write(line + "\n")
        self.lines_written += 1

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write lines as they are produced by an iterable.

        Lines are consumed one at a time, so an exception raised while
        producing a later line leaves the earlier ones written.
        """
        for line in lines:
            self.write_line(line)

    def close(self) -> None:
        """Mark the writer closed. The file descriptor itself stays open."""
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
