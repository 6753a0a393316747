"""Shared fixtures for resolver tests."""

import os
from pathlib import Path

import pytest

from asset_resolver import AssetResolver, ResolverOptions
from asset_resolver.platforms.memory import MemoryStorage


def write_asset(root: Path, relative_path: str, content: bytes, mtime_ns: int | None = None) -> Path:
    """Create a file below root, optionally pinning its modification time."""
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    if mtime_ns is not None:
        os.utime(path, ns=(mtime_ns, mtime_ns))
    return path


@pytest.fixture
def icon_storage() -> MemoryStorage:
    """Memory storage holding icon variants at scales 1, 2 and 3."""
    return MemoryStorage({
        "/proj/icon.png": b"icon-1x",
        "/proj/icon@2x.png": b"icon-2x",
        "/proj/icon@3x.png": b"icon-3x",
        "/proj/README.md": b"docs",
    })


@pytest.fixture
def icon_resolver(icon_storage: MemoryStorage) -> AssetResolver:
    """Resolver over the icon storage with a single root."""
    return AssetResolver(ResolverOptions.create(["/proj"]), icon_storage)
