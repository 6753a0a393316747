"""Base abstraction for storage backends.

This module defines the I/O operations the resolver needs from the place
assets live. Every operation is a coroutine so that one request waiting on
I/O never blocks another.
"""

import posixpath
from abc import ABC, abstractmethod


class Storage(ABC):
    """Abstract base class for all storage backends.

    Implementations provide backend-specific I/O while adhering to this
    common interface. Errors other than "missing" must propagate as
    OSError subclasses rather than being reported as absence.
    """

    @abstractmethod
    async def is_directory(self, path: str) -> bool:
        """Check whether a path exists and is a directory.

        Symlinks are followed.

        Args:
            path: Path to check

        Returns:
            True for a directory, False if the path is missing or is not a directory

        Raises:
            OSError: For any failure other than the path being missing
        """
        pass

    @abstractmethod
    async def list_directory(self, path: str) -> list[str]:
        """List the entry names of a directory.

        Args:
            path: Directory to list

        Returns:
            Bare entry names, in backend order

        Raises:
            OSError: If the directory can't be listed
        """
        pass

    @abstractmethod
    async def read_bytes(self, path: str) -> bytes:
        """Read the full content of a file.

        Args:
            path: File to read

        Returns:
            File content

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file can't be read
        """
        pass

    @abstractmethod
    async def modified_time_ns(self, path: str) -> int:
        """Get the last-modified time of a file.

        Args:
            path: File to inspect

        Returns:
            Modification time in nanoseconds since the epoch

        Raises:
            OSError: If the file can't be inspected
        """
        pass

    def join(self, base: str, *parts: str) -> str:
        """Join path components the way this backend addresses files.

        Empty components are skipped, so joining a root with the empty
        directory of a top-level asset yields the root itself.
        """
        path = base
        for part in parts:
            if part:
                path = posixpath.join(path, part)
        return path
