"""Error taxonomy for asset resolution.

Every failure is scoped to the request that raised it. I/O errors coming
from a storage backend are never wrapped in these types; they propagate
unchanged so that misconfiguration (permissions, broken mounts) is not
reported as a missing asset.
"""

from collections.abc import Sequence


class AssetResolverError(Exception):
    """Base class for all errors raised by the resolver."""


class MalformedAssetPathError(AssetResolverError, ValueError):
    """An asset path could not be parsed into an asset reference."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Malformed asset path {path!r}: {reason}")
        self.path = path
        self.reason = reason


class NotFoundError(AssetResolverError):
    """No search root contains the requested directory."""

    def __init__(self, directory: str, roots: Sequence[str] = (), message: str | None = None):
        if message is None:
            message = (
                f"Directory {directory or '.'!r} not found in any root: {', '.join(roots) or 'none'}"
            )
        super().__init__(message)
        self.directory = directory
        self.roots = tuple(roots)


class AssetNotFoundError(NotFoundError):
    """The directory exists but holds no asset with the requested name."""

    def __init__(self, asset_name: str, directory: str):
        super().__init__(directory, message=f"Asset not found: {asset_name!r} in {directory}")
        self.asset_name = asset_name


class InvalidOptionsError(AssetResolverError, ValueError):
    """Resolver options failed schema validation."""
