"""Breadth-first directory traversal."""

import logging
import os
from collections import deque

from .matcher import matches
from .models import EntryMetadata, FilterConfig, SkippedEntry

logger = logging.getLogger(__name__)


class TreeWalker:
    """Walks a directory tree level by level and collects matching entries.

    Directories are expanded, everything else (regular files, symlinks,
    devices, ...) is checked against the filters. Symbolic links are never
    followed. Directories that cannot be listed and entries that cannot be
    stat-ed are logged, recorded in ``skipped`` and left out of the result.
    """

    def __init__(self, config: FilterConfig):
        """Initialize walker with parsed filters."""
        self.config = config
        self.skipped: list[SkippedEntry] = []

    def walk(self) -> list[str]:
        """Traverse the tree under the configured root.

        Returns:
            Matching paths in discovery order.
        """
        self.skipped = []
        result: list[str] = []
        queue: deque[str] = deque([self.config.root])

        while queue:
            directory = queue.popleft()
            logger.debug(f"Expanding directory: {directory}")
            self._expand(directory, queue, result)

        return result

    def _expand(self, directory: str, queue: deque[str], result: list[str]) -> None:
        """List one directory, queueing subdirectories and matching the rest."""
        try:
            with os.scandir(directory) as it:
                for entry in it:
                    path = os.path.join(directory, entry.name)
                    try:
                        st = os.lstat(path)
                    except OSError as e:
                        self._skip(path, e, is_dir=False)
                        continue

                    metadata = EntryMetadata.from_stat(st)
                    if metadata.is_dir:
                        queue.append(path)
                    elif matches(self.config, metadata, entry.name):
                        result.append(path)
        except OSError as e:
            self._skip(directory, e, is_dir=True)

    def _skip(self, path: str, error: OSError, is_dir: bool) -> None:
        reason = error.strerror or str(error)
        if is_dir:
            logger.warning(f"Cannot read directory '{path}': {reason}")
        else:
            logger.warning(f"Cannot stat '{path}': {reason}")
        self.skipped.append(SkippedEntry(path=path, reason=reason, is_dir=is_dir))


def find(config: FilterConfig) -> list[str]:
    """Return the paths under ``config.root`` matching its filters."""
    return TreeWalker(config).walk()
