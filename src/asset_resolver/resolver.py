"""Asset resolution.

Given a request for an asset by path, which may carry a density suffix,
find that asset (or the variant closest to the requested density) in one
of the search roots:

1. Parse the directory and name of the asset
2. Find the first search root holding that directory
3. Build a map of all assets and their scales in the directory
4. Pick the closest scale to the requested one, rounding up
"""

import asyncio
import hashlib
import logging
import os
from collections.abc import Callable, Iterable

from .config import ResolverOptions
from .core.errors import AssetNotFoundError, MalformedAssetPathError
from .core.naming import parse_asset_reference, split_extension
from .core.types import AssetMap, AssetMetadata, AssetRecord, AssetReference
from .locator import RootLocator
from .storage.base import Storage

logger = logging.getLogger(__name__)

NS_PER_MS = 1_000_000


def build_asset_map(
    directory: str,
    filenames: Iterable[str],
    asset_exts: Iterable[str],
    join: Callable[[str, str], str] = os.path.join,
) -> AssetMap:
    """Group the files of one directory into asset records.

    Files whose extension isn't recognized are ignored. Files whose name
    can't be parsed are skipped with a warning. Each record's variants are
    inserted in ascending scale order as they are seen, so the listing
    order doesn't matter.

    Args:
        directory: Directory the filenames belong to
        filenames: Bare filenames, in any order
        asset_exts: Recognized extensions (lowercase, no leading dot)
        join: Builds the directory-qualified path of each file

    Returns:
        Mapping of asset name (e.g. 'icon.png') to its record
    """
    exts = set(asset_exts)
    asset_map: AssetMap = {}

    for filename in filenames:
        # Subdirectories and unrelated files are not assets
        if split_extension(filename)[1] not in exts:
            continue

        try:
            ref = parse_asset_reference(filename)
        except MalformedAssetPathError as e:
            logger.warning("Skipping %s in %s: %s", filename, directory, e.reason)
            continue

        record = asset_map.get(ref.asset_name)
        if record is None:
            record = asset_map[ref.asset_name] = AssetRecord()
        record.insert(ref.resolution, join(directory, filename))

    return asset_map


def select_variant(record: AssetRecord, resolution: float) -> str:
    """Pick the file serving a requested density.

    Returns the first variant whose scale is at least the requested
    resolution. When the request exceeds every available scale, the
    highest-scale variant is returned instead of failing.

    Args:
        record: A non-empty asset record
        resolution: Requested pixel density

    Returns:
        Path of the selected variant
    """
    for variant in record.variants:
        if variant.scale >= resolution:
            return variant.file

    return record.variants[-1].file


def compute_fingerprint(mtimes_ns: Iterable[int]) -> str:
    """Fold modification times into a hex MD5 digest.

    Each time is hashed as its integer millisecond value followed by a
    newline, in the order given.

    Args:
        mtimes_ns: Modification times in nanoseconds, in record order

    Returns:
        32-character lowercase hex digest
    """
    digest = hashlib.md5()
    for mtime_ns in mtimes_ns:
        digest.update(f"{mtime_ns // NS_PER_MS}\n".encode("ascii"))
    return digest.hexdigest()


class AssetResolver:
    """Resolve asset paths to files across several search roots.

    The resolver only holds immutable configuration and its storage, so a
    single instance can serve any number of concurrent requests.

    Example:
        >>> resolver = AssetResolver(ResolverOptions.create(['/proj']), FilesystemStorage())
        >>> content = asyncio.run(resolver.resolve_file('icon@3x.png'))
        >>> asyncio.run(resolver.resolve_metadata('icon.png'))
        {'name': 'icon', 'type': 'png', 'scales': [1.0, 2.0], 'hash': '...'}
    """

    def __init__(self, options: ResolverOptions, storage: Storage):
        """Initialize the resolver.

        Args:
            options: Search roots and recognized extensions
            storage: Backend used for all I/O
        """
        self.options = options
        self.storage = storage
        self.locator = RootLocator(storage)

    @property
    def roots(self) -> tuple[str, ...]:
        return self.options.roots

    @property
    def asset_exts(self) -> tuple[str, ...]:
        return self.options.asset_exts

    async def get_asset_record(self, asset_path: str) -> AssetRecord:
        """Find every density variant of the asset at asset_path.

        Args:
            asset_path: Asset path relative to the search roots

        Returns:
            The record holding all variants of the asset

        Raises:
            MalformedAssetPathError: If asset_path can't be parsed
            NotFoundError: If no root contains the asset's directory
            AssetNotFoundError: If the directory holds no such asset
        """
        return await self._find_record(parse_asset_reference(asset_path))

    async def _find_record(self, ref: AssetReference) -> AssetRecord:
        directory = await self.locator.locate(self.roots, ref.directory)
        filenames = await self.storage.list_directory(directory)

        asset_map = build_asset_map(directory, filenames, self.asset_exts, self.storage.join)
        record = asset_map.get(ref.asset_name)
        if record is None:
            raise AssetNotFoundError(ref.asset_name, directory)

        logger.debug("Found %d variant(s) of %s in %s", len(record), ref.asset_name, directory)
        return record

    async def resolve_file(self, asset_path: str) -> bytes:
        """Read the variant best matching the requested density.

        Args:
            asset_path: Asset path, optionally with a density suffix
                (e.g. 'images/icon@2x.png')

        Returns:
            Content of the selected file

        Raises:
            MalformedAssetPathError: If asset_path can't be parsed
            NotFoundError: If no root contains the asset's directory
            AssetNotFoundError: If the directory holds no such asset
            OSError: If the storage fails to read the file
        """
        ref = parse_asset_reference(asset_path)
        record = await self._find_record(ref)

        file = select_variant(record, ref.resolution)
        logger.debug("Serving %s for %s", file, asset_path)
        return await self.storage.read_bytes(file)

    async def resolve_metadata(self, asset_path: str) -> AssetMetadata:
        """Describe an asset and all of its density variants.

        Args:
            asset_path: Asset path; any density suffix is ignored

        Returns:
            Metadata with the asset's name, type, scales and fingerprint

        Raises:
            MalformedAssetPathError: If asset_path can't be parsed
            NotFoundError: If no root contains the asset's directory
            AssetNotFoundError: If the directory holds no such asset
            OSError: If the storage fails to stat a variant
        """
        ref = parse_asset_reference(asset_path)
        record = await self._find_record(ref)

        # gather() keeps results in record order regardless of completion order
        mtimes = await asyncio.gather(
            *(self.storage.modified_time_ns(file) for file in record.files)
        )

        return AssetMetadata(
            name=ref.name,
            type=ref.extension,
            scales=record.scales,
            hash=compute_fingerprint(mtimes),
        )
