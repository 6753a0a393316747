"""Filesystem storage backend.

This module provides a Storage implementation backed by the local disk.
Blocking calls run in worker threads so the event loop stays free to
serve other requests.
"""

import asyncio
import os
import stat
from pathlib import Path

from ...storage.base import Storage


def _is_directory(path: str) -> bool:
    try:
        # stat() follows symlinks: a link to a directory counts as one
        mode = os.stat(path).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return False
    return stat.S_ISDIR(mode)


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


class FilesystemStorage(Storage):
    """Storage backend for local directories.

    Example:
        >>> storage = FilesystemStorage()
        >>> files = asyncio.run(storage.list_directory('/path/to/assets'))
    """

    async def is_directory(self, path: str) -> bool:
        return await asyncio.to_thread(_is_directory, path)

    async def list_directory(self, path: str) -> list[str]:
        return await asyncio.to_thread(os.listdir, path)

    async def read_bytes(self, path: str) -> bytes:
        return await asyncio.to_thread(_read_bytes, path)

    async def modified_time_ns(self, path: str) -> int:
        stat_info = await asyncio.to_thread(os.stat, path)
        return stat_info.st_mtime_ns

    def join(self, base: str, *parts: str) -> str:
        """Join path components with the platform's separator."""
        return os.path.join(base, *(part for part in parts if part))


def validate_root(path: str | Path) -> str:
    """Check that a search root exists and is a directory.

    Args:
        path: Root directory (absolute or relative)

    Returns:
        The absolute root path

    Raises:
        ValueError: If path doesn't exist or isn't a directory
    """
    root = Path(path).resolve()

    if not root.exists():
        raise ValueError(f"Path does not exist: {root}")

    if not root.is_dir():
        raise ValueError(f"Path is not a directory: {root}")

    return str(root)
