"""Core utilities for asset resolution.

This package contains the request-scoped data types, the error taxonomy,
asset path parsing and schema validation used by the resolver and by
every storage platform.
"""

from .errors import (
    AssetNotFoundError,
    AssetResolverError,
    InvalidOptionsError,
    MalformedAssetPathError,
    NotFoundError,
)
from .naming import parse_asset_reference
from .types import AssetMap, AssetMetadata, AssetRecord, AssetReference, AssetVariant
from .validator import validate_metadata, validate_metadata_with_error_details, validate_options

__all__ = [
    "AssetMap",
    "AssetMetadata",
    "AssetNotFoundError",
    "AssetRecord",
    "AssetReference",
    "AssetResolverError",
    "AssetVariant",
    "InvalidOptionsError",
    "MalformedAssetPathError",
    "NotFoundError",
    "parse_asset_reference",
    "validate_metadata",
    "validate_metadata_with_error_details",
    "validate_options",
]
