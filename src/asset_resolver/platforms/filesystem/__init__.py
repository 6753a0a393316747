"""Filesystem platform for the asset resolver.

This platform resolves assets from directories on the local disk.
"""

from pathlib import Path

from .storage import FilesystemStorage, validate_root

# Auto-register with the registry
from ...registry import StorageRegistry


def _create_filesystem_storage(**kwargs) -> FilesystemStorage:
    """Factory function for creating filesystem storages.

    Args:
        **kwargs: Additional parameters (unused for filesystem)

    Returns:
        FilesystemStorage instance
    """
    return FilesystemStorage()


def _prepare_filesystem_roots(roots: list[str | Path]) -> list[str]:
    """Resolve search roots to absolute directories.

    Raises:
        ValueError: If a root doesn't exist or isn't a directory
    """
    return [validate_root(root) for root in roots]


# Auto-register at module import
StorageRegistry.register_factory(
    'filesystem',
    _create_filesystem_storage,
    prepare_roots=_prepare_filesystem_roots,
)

__all__ = [
    "FilesystemStorage",
    "validate_root",
]
