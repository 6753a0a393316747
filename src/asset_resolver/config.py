"""Resolver configuration.

Options are validated once, normalised, and then frozen for the lifetime
of the resolver that holds them.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .core.validator import validate_options

DEFAULT_ASSET_EXTS = ("png",)


def normalize_extension(ext: str) -> str:
    """Return an extension lowercased and without its leading dot."""
    return ext.lstrip(".").lower()


@dataclass(frozen=True)
class ResolverOptions:
    """Immutable configuration of an AssetResolver.

    Attributes:
        roots: Search roots, highest precedence first
        asset_exts: Recognized extensions (lowercase, no leading dot)
    """

    roots: tuple[str, ...]
    asset_exts: tuple[str, ...] = DEFAULT_ASSET_EXTS

    @classmethod
    def from_dict(cls, options: dict[str, Any]) -> "ResolverOptions":
        """Build options from a raw dictionary.

        Example:
            >>> ResolverOptions.from_dict({"project_roots": ["/proj"], "asset_exts": [".PNG"]})
            ResolverOptions(roots=('/proj',), asset_exts=('png',))

        Args:
            options: Dictionary with 'project_roots' and optional 'asset_exts'

        Returns:
            Validated, normalised options

        Raises:
            InvalidOptionsError: If the dictionary doesn't match the options schema
        """
        validate_options(options)
        return cls.create(
            roots=options["project_roots"],
            asset_exts=options.get("asset_exts", DEFAULT_ASSET_EXTS),
        )

    @classmethod
    def create(
        cls,
        roots: Iterable[str],
        asset_exts: Iterable[str] = DEFAULT_ASSET_EXTS,
    ) -> "ResolverOptions":
        """Build options from Python values, validating them the same way as from_dict."""
        roots = [str(root) for root in roots]
        exts = list(asset_exts)
        validate_options({"project_roots": roots, "asset_exts": exts})

        normalized: list[str] = []
        for ext in exts:
            ext = normalize_extension(ext)
            if ext not in normalized:
                normalized.append(ext)

        return cls(roots=tuple(roots), asset_exts=tuple(normalized))
