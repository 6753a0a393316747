"""In-memory platform for the asset resolver.

This platform serves assets held in a dictionary instead of on disk.
"""

from .storage import MemoryFile, MemoryStorage

# Auto-register with the registry
from ...registry import StorageRegistry


def _create_memory_storage(files: dict[str, bytes | MemoryFile] | None = None, **kwargs) -> MemoryStorage:
    """Factory function for creating memory storages.

    Args:
        files: Mapping of absolute path to content
        **kwargs: Passed through to MemoryStorage (latency, failures)

    Returns:
        MemoryStorage instance
    """
    return MemoryStorage(files, **kwargs)


# Auto-register at module import
StorageRegistry.register_factory('memory', _create_memory_storage)

__all__ = ["MemoryFile", "MemoryStorage"]
