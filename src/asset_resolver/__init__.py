"""Asset Resolver.

This package resolves logical asset references such as ``icon@2x.png``
to the best-matching physical file across one or more search roots, and
reports a stable fingerprint of every density variant of an asset.
"""

import logging

# Core library interface
from .config import ResolverOptions
from .locator import RootLocator
from .registry import StorageRegistry
from .resolver import AssetResolver, build_asset_map, compute_fingerprint, select_variant
from .storage.base import Storage

# Core utilities
from .core import AssetMetadata, AssetRecord, AssetReference, parse_asset_reference
from .core import validate_metadata, validate_metadata_with_error_details
from .core.errors import (
    AssetNotFoundError,
    AssetResolverError,
    InvalidOptionsError,
    MalformedAssetPathError,
    NotFoundError,
)

__version__ = "0.1.0"

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Auto-discover and register all platforms
StorageRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "AssetResolver",
    "ResolverOptions",
    "RootLocator",
    "Storage",
    "StorageRegistry",
    # Resolution building blocks
    "build_asset_map",
    "compute_fingerprint",
    "select_variant",
    # Core utilities
    "AssetMetadata",
    "AssetRecord",
    "AssetReference",
    "parse_asset_reference",
    "validate_metadata",
    "validate_metadata_with_error_details",
    # Errors
    "AssetNotFoundError",
    "AssetResolverError",
    "InvalidOptionsError",
    "MalformedAssetPathError",
    "NotFoundError",
]
