"""Storage backends for the asset resolver.

This package contains the interface every storage backend implements.
Concrete backends live in the platforms/ directory.
"""

from .base import Storage

__all__ = ["Storage"]
