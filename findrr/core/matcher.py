"""Predicate matching of filesystem entries against configured filters."""

from .models import EntryMetadata, FilterConfig


def matches(config: FilterConfig, metadata: EntryMetadata, name: str) -> bool:
    """Check an entry against every active filter.

    Filters that are not configured are skipped, so the result is a plain
    AND over whichever subset is active.

    Args:
        config: Parsed filters.
        metadata: lstat view of the entry (never a directory).
        name: Base name of the entry.

    Returns:
        True if the entry satisfies all active filters.
    """
    if config.inum is not None and metadata.inode != config.inum:
        return False
    if config.name is not None and name != config.name:
        return False
    if config.size is not None and not config.size.accepts(metadata.size):
        return False
    if config.nlinks is not None and metadata.nlinks != config.nlinks:
        return False
    return True
