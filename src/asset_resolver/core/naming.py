"""Asset path parsing.

Splits an asset path such as ``images/icon@2x.png`` into its directory,
base name, requested pixel density and extension. This module also guards
against paths that would escape a search root.
"""

import re
from pathlib import PurePosixPath

from .errors import MalformedAssetPathError
from .types import AssetReference

# Control characters are never valid in an asset path
DANGEROUS_PATH_CHARS = re.compile(r"[\x00-\x1f]")

# "@<digits and dots>x" directly before the extension
DENSITY_SUFFIX = re.compile(r"@([\d.]*)x$")

# A positive decimal number, e.g. "2", "1.5", ".75"
DENSITY_VALUE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


def split_extension(filename: str) -> tuple[str, str]:
    """Split a filename into its stem and lowercase extension.

    Args:
        filename: Bare filename (no directory component)

    Returns:
        Tuple of (stem, extension). extension is "" when there is none.
    """
    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem:
        # "icon" or ".hidden" have no usable extension
        return filename, ""
    return stem, extension.lower()


def parse_density(stem: str, path: str) -> tuple[str, float]:
    """Strip a density suffix from a filename stem.

    Args:
        stem: Filename without its extension (e.g. 'icon@2x')
        path: Full asset path, used for error messages

    Returns:
        Tuple of (name, resolution). resolution is 1.0 without a suffix.

    Raises:
        MalformedAssetPathError: If the suffix value is not a positive number
    """
    match = DENSITY_SUFFIX.search(stem)
    if match is None:
        return stem, 1.0

    value = match.group(1)
    if not DENSITY_VALUE.match(value):
        raise MalformedAssetPathError(path, f"invalid density suffix '@{value}x'")

    resolution = float(value)
    if resolution <= 0:
        raise MalformedAssetPathError(path, f"density must be positive, got '@{value}x'")

    name = stem[: match.start()]
    if not name:
        raise MalformedAssetPathError(path, "missing asset name before density suffix")
    return name, resolution


def parse_asset_reference(path: str) -> AssetReference:
    """Parse an asset path into an AssetReference.

    Example:
        >>> parse_asset_reference("images/icon@3x.png")
        AssetReference(directory='images', name='icon', resolution=3.0, extension='png')

    Args:
        path: Asset path relative to a search root, '/'-separated

    Returns:
        The parsed reference

    Raises:
        MalformedAssetPathError: If the path is empty, absolute, escapes its
            root, has no extension, or carries an invalid density suffix
    """
    if not path:
        raise MalformedAssetPathError(path, "empty path")

    if DANGEROUS_PATH_CHARS.search(path):
        raise MalformedAssetPathError(path, "contains control characters")

    posix_path = PurePosixPath(path)
    if posix_path.is_absolute():
        raise MalformedAssetPathError(path, "absolute paths are not allowed")

    if ".." in posix_path.parts:
        raise MalformedAssetPathError(path, "path escapes the search root")

    if path.endswith("/"):
        raise MalformedAssetPathError(path, "missing filename")

    stem, extension = split_extension(posix_path.name)
    if not extension:
        raise MalformedAssetPathError(path, "missing file extension")

    name, resolution = parse_density(stem, path)

    directory = str(posix_path.parent)
    return AssetReference(
        directory="" if directory == "." else directory,
        name=name,
        resolution=resolution,
        extension=extension,
    )
