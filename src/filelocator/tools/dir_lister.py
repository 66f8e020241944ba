"""
Directory lister for the File Locator.

This module lists the immediate children of a directory and memoizes each
listing by normalized directory path, so repeated traversals of the same tree
never touch the filesystem twice. Directory entries carry a trailing slash so
callers can tell them apart from files without another stat call.
"""

import os
import logging
from typing import Dict, Tuple, Union

from .paths import normalize_path


logger = logging.getLogger(__name__)

DIRECTORY_MARK = '/'


def is_directory_entry(item: str) -> bool:
    """Return True if a listed item is a directory (marked by a trailing slash)."""
    return item.endswith(DIRECTORY_MARK)


class DirectoryLister:
    """
    Memoizing, non-recursive directory lister.

    Listings are cached for the lifetime of the instance. There is no
    expiry and no change detection; ``clear_cache`` is the only way to force
    a directory to be read again.

    Not safe for concurrent use without external locking.
    """

    def __init__(self, include_hidden: bool = False):
        """
        Initialize the directory lister.

        Args:
            include_hidden: Whether to list entries whose names start with a dot
        """
        self.include_hidden = include_hidden
        self._globs: Dict[str, Tuple[str, ...]] = {}
        self._stats = {
            'listings': 0,
            'cache_hits': 0,
            'errors': 0
        }

    def list(self, directory: Union[str, os.PathLike]) -> Tuple[str, ...]:
        """
        List the immediate children of a directory.

        Args:
            directory: Directory path (normalized before lookup)

        Returns:
            Child paths in name order; directories end with a slash. Empty if
            the directory does not exist or cannot be read.
        """
        directory = normalize_path(directory)

        cached = self._globs.get(directory)
        if cached is not None:
            self._stats['cache_hits'] += 1
            return cached

        listing = self._read_directory(directory)
        self._globs[directory] = listing
        return listing

    def _read_directory(self, directory: str) -> Tuple[str, ...]:
        """
        Enumerate a directory once.

        Args:
            directory: Normalized directory path

        Returns:
            Tuple of child paths, empty on any OS-level failure
        """
        self._stats['listings'] += 1
        # The filesystem root normalizes to the empty string
        target = directory or DIRECTORY_MARK

        items = []
        try:
            with os.scandir(target) as entries:
                for entry in entries:
                    if not self.include_hidden and entry.name.startswith('.'):
                        continue

                    try:
                        is_dir = entry.is_dir()
                    except OSError:
                        is_dir = False

                    item = f"{directory}/{entry.name}"
                    if is_dir:
                        item += DIRECTORY_MARK
                    items.append((entry.name, item))
        except OSError as e:
            logger.debug(f"Cannot list directory {target}: {e}")
            self._stats['errors'] += 1
            return ()

        items.sort()
        logger.debug(f"Listed {len(items)} entries in {target}")
        return tuple(item for _, item in items)

    def is_cached(self, directory: Union[str, os.PathLike]) -> bool:
        """Check whether a directory listing is already memoized."""
        return normalize_path(directory) in self._globs

    def clear_cache(self) -> None:
        """Forget every memoized listing."""
        self._globs.clear()

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about listing operations.

        Returns:
            Dictionary containing listing statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = {
            'listings': 0,
            'cache_hits': 0,
            'errors': 0
        }
