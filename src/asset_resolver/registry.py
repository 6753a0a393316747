"""Storage registry for factory-based resolver creation.

This module provides a central registry for storage factories,
enabling backend-agnostic resolver creation and automatic
platform discovery.
"""

import importlib
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .resolver import AssetResolver
    from .storage.base import Storage

logger = logging.getLogger(__name__)

RootPreparer = Callable[[list], list[str]]


class StorageRegistry:
    """Central registry for storage factories.

    Platforms register themselves when imported, and the registry
    can automatically discover all available platforms. The resolver
    itself never needs to know which backend it is talking to.
    """

    _factories: dict[str, Callable[..., "Storage"]] = {}
    _root_preparers: dict[str, RootPreparer] = {}

    @classmethod
    def register_factory(
        cls,
        name: str,
        factory: Callable[..., "Storage"],
        prepare_roots: RootPreparer | None = None,
    ) -> None:
        """Register a factory function for creating storages.

        Args:
            name: Name of the storage (e.g. 'filesystem', 'memory')
            factory: Callable that creates a Storage instance
            prepare_roots: Optional callable that checks and normalises the
                search roots before a resolver is built on this storage

        Example:
            >>> def create_fs_storage(**kwargs) -> FilesystemStorage:
            ...     return FilesystemStorage()
            >>> StorageRegistry.register_factory('filesystem', create_fs_storage)
        """
        cls._factories[name] = factory
        if prepare_roots is not None:
            cls._root_preparers[name] = prepare_roots
        else:
            cls._root_preparers.pop(name, None)

    @classmethod
    def create_storage(cls, storage_name: str, **kwargs) -> "Storage":
        """Create a storage from a registered factory.

        Raises:
            ValueError: If storage_name is not registered
        """
        if storage_name not in cls._factories:
            available = ', '.join(cls._factories.keys()) or 'none'
            raise ValueError(
                f"Unknown storage: '{storage_name}'. Available storages: {available}"
            )
        return cls._factories[storage_name](**kwargs)

    @classmethod
    def create_resolver(
        cls,
        storage_name: str,
        roots: Iterable[str | Path],
        asset_exts: Iterable[str] | None = None,
        **kwargs,
    ) -> "AssetResolver":
        """Create a resolver backed by a registered storage.

        Args:
            storage_name: Name of the registered storage
            roots: Search roots, highest precedence first
            asset_exts: Recognized extensions (defaults to png only)
            **kwargs: Arguments passed to the storage factory

        Returns:
            AssetResolver configured with the requested storage

        Raises:
            ValueError: If storage_name is not registered or a root is rejected
                by the platform
            InvalidOptionsError: If the roots or extensions are invalid

        Example:
            >>> resolver = StorageRegistry.create_resolver(
            ...     'filesystem',
            ...     roots=[Path('/proj/local'), Path('/proj/shared')],
            ...     asset_exts=['png', 'jpg'],
            ... )
        """
        # Import here to avoid circular dependency
        from .config import DEFAULT_ASSET_EXTS, ResolverOptions
        from .resolver import AssetResolver

        storage = cls.create_storage(storage_name, **kwargs)

        roots = list(roots)
        preparer = cls._root_preparers.get(storage_name)
        prepared = preparer(roots) if preparer else [str(root) for root in roots]

        options = ResolverOptions.create(
            prepared,
            DEFAULT_ASSET_EXTS if asset_exts is None else asset_exts,
        )
        logger.debug("Created %s resolver over roots %s", storage_name, options.roots)
        return AssetResolver(options, storage)

    @classmethod
    def list_storages(cls) -> list[str]:
        """List all registered storage names.

        Returns:
            List of registered storage names

        Example:
            >>> StorageRegistry.list_storages()
            ['filesystem', 'memory']
        """
        return list(cls._factories.keys())

    @classmethod
    def discover_platforms(cls) -> None:
        """Auto-discover and import all platforms.

        This method iterates through the platforms/ directory and
        imports each platform module. Platforms with missing
        dependencies are skipped.

        Platforms register themselves when imported via their
        __init__.py files.
        """
        platforms_dir = Path(__file__).parent / 'platforms'

        if not platforms_dir.exists():
            return

        for platform_path in sorted(platforms_dir.iterdir()):
            if not platform_path.is_dir():
                continue

            if not (platform_path / '__init__.py').exists():
                continue

            platform_name = platform_path.name

            try:
                # This triggers auto-registration via the platform's __init__.py
                importlib.import_module(
                    f'.platforms.{platform_name}',
                    package='asset_resolver'
                )
            except ImportError as e:
                logger.debug("Skipping platform %s: %s", platform_name, e)
