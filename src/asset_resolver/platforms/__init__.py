"""Platform implementations for the asset resolver.

This package contains self-contained platform modules that provide
storage backends (local filesystem, in-memory).

Each platform module auto-registers itself with the StorageRegistry
when imported.
"""

# Platform modules are imported dynamically by StorageRegistry.discover_platforms()
# to handle missing dependencies gracefully
