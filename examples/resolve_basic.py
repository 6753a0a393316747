"""Basic asset resolution example.

This example demonstrates how to:
- Create a resolver over a local override root and a shared root
- Serve the variant closest to a requested density
- Describe an asset for cache-busting
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

from asset_resolver import NotFoundError, StorageRegistry


async def describe(asset_path: str) -> None:
    # Local overrides first, shared defaults second (change these to your asset roots)
    roots = [Path.cwd() / "assets" / "local", Path.cwd() / "assets" / "shared"]

    resolver = StorageRegistry.create_resolver('filesystem', roots=roots)

    try:
        content = await resolver.resolve_file(asset_path)
        metadata = await resolver.resolve_metadata(asset_path)
    except NotFoundError as e:
        print(f"Not found: {e}", file=sys.stderr)
        return

    print(f"Served {len(content)} bytes for {asset_path}", file=sys.stderr)
    json.dump(metadata, sys.stdout, indent=2)
    print()


def main():
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    asset_path = sys.argv[1] if len(sys.argv) > 1 else "icon@2x.png"
    try:
        asyncio.run(describe(asset_path))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
