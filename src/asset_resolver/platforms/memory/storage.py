"""In-memory storage backend.

This module provides a Storage implementation that serves assets from a
dictionary, for embedding assets in a process and for exercising the
resolver without touching the disk. Paths are '/'-separated.
"""

import asyncio
import posixpath
import time
from dataclasses import dataclass, field

from ...storage.base import Storage


@dataclass
class MemoryFile:
    """A file held in memory."""

    content: bytes
    mtime_ns: int = field(default_factory=time.time_ns)


class MemoryStorage(Storage):
    """Storage backend holding files in a dictionary.

    Directories exist implicitly as parents of stored files, or explicitly
    through add_directory().

    Args:
        files: Mapping of absolute path to content or MemoryFile
        latency: Optional mapping of path to a delay in seconds applied to
            every operation on that path
        failures: Optional mapping of path to an exception raised by every
            operation on that path

    Example:
        >>> storage = MemoryStorage({'/proj/icon.png': b'...'})
        >>> asyncio.run(storage.is_directory('/proj'))
        True
    """

    def __init__(
        self,
        files: dict[str, bytes | MemoryFile] | None = None,
        latency: dict[str, float] | None = None,
        failures: dict[str, OSError] | None = None,
    ):
        self._files: dict[str, MemoryFile] = {}
        self._directories: set[str] = {"/"}
        self.latency = dict(latency or {})
        self.failures = dict(failures or {})

        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_file(self, path: str, content: bytes | MemoryFile, mtime_ns: int | None = None) -> None:
        """Store a file, creating its parent directories.

        Args:
            path: Absolute path of the file
            content: File content, or a MemoryFile carrying its own mtime
            mtime_ns: Modification time override in nanoseconds
        """
        path = posixpath.normpath(path)
        entry = content if isinstance(content, MemoryFile) else MemoryFile(content)
        if mtime_ns is not None:
            entry = MemoryFile(entry.content, mtime_ns)
        self._files[path] = entry
        self.add_directory(posixpath.dirname(path))

    def add_directory(self, path: str) -> None:
        """Create a directory and all of its parents."""
        path = posixpath.normpath(path)
        while path not in self._directories:
            self._directories.add(path)
            path = posixpath.dirname(path)

    def touch(self, path: str, mtime_ns: int) -> None:
        """Set the modification time of a stored file."""
        entry = self._get_file(posixpath.normpath(path))
        entry.mtime_ns = mtime_ns

    def remove(self, path: str) -> None:
        """Delete a stored file."""
        del self._files[posixpath.normpath(path)]

    async def _enter(self, path: str) -> str:
        path = posixpath.normpath(path)
        delay = self.latency.get(path)
        if delay:
            await asyncio.sleep(delay)
        if path in self.failures:
            raise self.failures[path]
        return path

    def _get_file(self, path: str) -> MemoryFile:
        try:
            return self._files[path]
        except KeyError:
            if path in self._directories:
                raise IsADirectoryError(path) from None
            raise FileNotFoundError(path) from None

    async def is_directory(self, path: str) -> bool:
        path = await self._enter(path)
        return path in self._directories

    async def list_directory(self, path: str) -> list[str]:
        path = await self._enter(path)
        if path not in self._directories:
            if path in self._files:
                raise NotADirectoryError(path)
            raise FileNotFoundError(path)

        entries = [
            posixpath.basename(entry)
            for entry in (*self._files, *self._directories)
            if entry != path and posixpath.dirname(entry) == path
        ]
        return sorted(entries)

    async def read_bytes(self, path: str) -> bytes:
        path = await self._enter(path)
        return self._get_file(path).content

    async def modified_time_ns(self, path: str) -> int:
        path = await self._enter(path)
        return self._get_file(path).mtime_ns
