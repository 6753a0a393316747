"""Type definitions for asset resolution.

AssetMetadata mirrors the JSON schema in schemas/asset_metadata.schema.json.
The remaining types are request-scoped: they are built while resolving one
asset path and discarded once the result is produced.
"""

import bisect
from dataclasses import dataclass, field
from typing import TypedDict


@dataclass(frozen=True)
class AssetReference:
    """A parsed asset path.

    Example:
        "images/icon@2x.png" -> directory="images", name="icon",
        resolution=2.0, extension="png"
    """

    directory: str  # Directory relative to a search root ("" for the root itself)
    name: str  # Base name without density suffix or extension
    resolution: float  # Requested pixel density (1.0 when no suffix is given)
    extension: str  # Lowercase extension without the leading dot

    @property
    def asset_name(self) -> str:
        """Filename with the density suffix removed, e.g. 'icon.png'."""
        return f"{self.name}.{self.extension}"


@dataclass(frozen=True)
class AssetVariant:
    """One density variant of an asset."""

    scale: float
    file: str  # Directory-qualified path


@dataclass
class AssetRecord:
    """All density variants sharing one asset name within one directory.

    Variants are kept sorted ascending by scale as they are inserted.
    Variants with an identical scale keep their insertion order.
    """

    variants: list[AssetVariant] = field(default_factory=list)

    def insert(self, scale: float, file: str) -> None:
        """Insert a variant at its position by ascending scale.

        Args:
            scale: Pixel density of the variant
            file: Directory-qualified path of the variant
        """
        bisect.insort_right(self.variants, AssetVariant(scale, file), key=lambda v: v.scale)

    @property
    def scales(self) -> list[float]:
        return [variant.scale for variant in self.variants]

    @property
    def files(self) -> list[str]:
        return [variant.file for variant in self.variants]

    def __len__(self) -> int:
        return len(self.variants)


# Asset name (e.g. 'icon.png') -> record
AssetMap = dict[str, AssetRecord]


class AssetMetadata(TypedDict):
    """Public descriptor of an asset and all of its density variants."""

    name: str  # Base name without density suffix or extension
    type: str  # Lowercase extension (e.g. 'png')
    scales: list[float]  # Available densities, ascending
    hash: str  # Hex MD5 fingerprint over the variants' modification times
