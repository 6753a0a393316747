"""Search-root lookup.

Finds which of several search roots holds a given directory. Roots are
checked concurrently but the answer always follows root order, so an
earlier root (e.g. a local override) wins over a later one (e.g. shared
defaults) no matter which check finishes first.
"""

import asyncio
import logging
from collections.abc import Sequence

from .core.errors import NotFoundError
from .storage.base import Storage

logger = logging.getLogger(__name__)


class RootLocator:
    """Locate a relative directory under an ordered list of roots.

    Stateless apart from the storage it queries; nothing is cached.

    Example:
        >>> locator = RootLocator(FilesystemStorage())
        >>> asyncio.run(locator.locate(['/proj/local', '/proj/shared'], 'images'))
        '/proj/local/images'
    """

    def __init__(self, storage: Storage):
        self.storage = storage

    async def locate(self, roots: Sequence[str], relative_dir: str) -> str:
        """Return the first root, in root order, that contains relative_dir.

        Args:
            roots: Search roots, highest precedence first
            relative_dir: Directory relative to each root ("" for the root itself)

        Returns:
            The matching candidate path (root joined with relative_dir)

        Raises:
            NotFoundError: If no root contains relative_dir as a directory
            OSError: If probing a root that precedes the match fails for a
                reason other than the directory being missing
        """
        candidates = [self.storage.join(root, relative_dir) for root in roots]
        tasks = [asyncio.create_task(self.storage.is_directory(c)) for c in candidates]

        try:
            # Settle in root order; later checks keep running meanwhile
            for candidate, task in zip(candidates, tasks):
                if await task:
                    logger.debug("Located %r at %s", relative_dir, candidate)
                    return candidate
        finally:
            for candidate, task in zip(candidates, tasks):
                if not task.done():
                    task.cancel()
                elif not task.cancelled() and task.exception() is not None:
                    # Marks the exception retrieved; only the first failure in root order propagates
                    logger.debug("Directory check for %s failed: %r", candidate, task.exception())

        raise NotFoundError(relative_dir, roots)
