"""
File locator for the File Locator.

This module finds a file by partial name within the base directories of a
group. Each base directory is walked depth-first up to its configured depth,
and the first path containing the fragment wins. Located files are memoized
per (group, fragment), so a repeated lookup never touches the filesystem even
if the tree has changed since.
"""

import os
import logging
from typing import Dict, List, Optional, Any, Tuple, Union

from ..models.entries import BaseDirectoryEntry, LocateResult
from .dir_lister import DirectoryLister, is_directory_entry
from .group_registry import GroupRegistry


logger = logging.getLogger(__name__)


class Locator:
    """
    Group-scoped recursive file locator.

    The registry and the directory lister are injected collaborators; fresh
    ones are created when omitted. Registry operations are exposed here as
    thin delegates so a caller can work with a single object.

    All state (registry, listing cache, located-file cache, working group) is
    owned by the instance and assumes a single caller at a time.
    """

    def __init__(self, registry: Optional[GroupRegistry] = None,
                 lister: Optional[DirectoryLister] = None,
                 base_path: Optional[str] = None,
                 include_hidden: bool = False):
        """
        Initialize the locator.

        Args:
            registry: Group registry to resolve directories from
            lister: Directory lister used for all filesystem reads
            base_path: Base path for a newly created registry
            include_hidden: Whether a newly created lister lists dot-files

        Raises:
            ValueError: If base_path or include_hidden is combined with an
                injected collaborator it cannot apply to
        """
        if registry is not None and base_path is not None:
            raise ValueError("base_path cannot be combined with an injected registry")
        if lister is not None and include_hidden:
            raise ValueError("include_hidden cannot be combined with an injected lister")

        self.registry = registry if registry is not None else GroupRegistry(base_path=base_path)
        self.lister = lister if lister is not None else DirectoryLister(include_hidden=include_hidden)
        self._found: Dict[Tuple[str, str], str] = {}
        self._scans: Dict[str, List[str]] = {}
        self._stats = {
            'locate_calls': 0,
            'cache_hits': 0,
            'files_found': 0,
            'misses': 0
        }

    @classmethod
    def from_config(cls, config) -> 'Locator':
        """
        Create a locator from a LocatorConfig.

        Args:
            config: LocatorConfig describing groups and defaults

        Returns:
            Locator with a populated registry
        """
        return cls(
            registry=config.build_registry(),
            lister=DirectoryLister(include_hidden=config.include_hidden)
        )

    def locate(self, fragment: str, group: Optional[str] = None) -> Optional[str]:
        """
        Attempt to locate a file in a group's directories.

        Args:
            fragment: File name to find (with or without extension); any
                path containing it matches
            group: Group name (replaced by the working group while one is set)

        Returns:
            The located path, or None if nothing matched

        Raises:
            ConfigurationError: If no group can be resolved
            UnknownGroupError: If the group has no registered directories
        """
        return self.locate_result(fragment, group).path

    def locate_result(self, fragment: str, group: Optional[str] = None) -> LocateResult:
        """
        Locate a file and report where the answer came from.

        Args:
            fragment: File name fragment to find
            group: Group name (replaced by the working group while one is set)

        Returns:
            LocateResult for the lookup
        """
        group = self.registry.resolve_group(group)
        self._stats['locate_calls'] += 1

        found = self._found.get((group, fragment))
        if found is not None:
            self._stats['cache_hits'] += 1
            logger.debug(f"Cache hit for '{fragment}' in group '{group}': {found}")
            return LocateResult(group=group, fragment=fragment, path=found, cached=True)

        for entry in self.registry.get_entries(group):
            found = self.search(entry.path, fragment, entry.max_depth)
            if found is not None:
                self._found[(group, fragment)] = found
                self._stats['files_found'] += 1
                logger.debug(f"Located '{fragment}' in group '{group}': {found}")
                return LocateResult(group=group, fragment=fragment, path=found)

        self._stats['misses'] += 1
        logger.debug(f"'{fragment}' not found in group '{group}'")
        return LocateResult(group=group, fragment=fragment)

    def search(self, directory: Union[str, os.PathLike], fragment: str,
               max_depth: Optional[int] = None, current_depth: int = 0) -> Optional[str]:
        """
        Search a directory tree for the first path containing a fragment.

        Children are visited in listing order. Each child is tested before the
        walk descends into it, so earlier siblings are always tested before
        anything inside a later sibling's subtree.

        Args:
            directory: Directory to search within
            fragment: File name fragment to find
            max_depth: Maximum recursion depth (registry default if None)
            current_depth: Depth of ``directory`` relative to the search root

        Returns:
            The first matching path, or None
        """
        if max_depth is None:
            max_depth = self.registry.default_depth

        # Explicit stack of listing iterators instead of call-stack recursion
        stack = [(iter(self.lister.list(directory)), current_depth)]
        while stack:
            children, depth = stack[-1]
            item = next(children, None)
            if item is None:
                stack.pop()
                continue

            if fragment in item:
                return item

            if depth < max_depth and is_directory_entry(item):
                stack.append((iter(self.lister.list(item)), depth + 1))

        return None

    def scan(self, group: Optional[str] = None, force_rescan: bool = False) -> List[str]:
        """
        List every file reachable in a group's directories.

        Each base directory is walked to its own depth. Directories are not
        included. The result is memoized per group.

        Args:
            group: Group name (replaced by the working group while one is set)
            force_rescan: Rebuild the memoized result

        Returns:
            File paths in traversal order, without duplicates

        Raises:
            ConfigurationError: If no group can be resolved
            UnknownGroupError: If the group has no registered directories
        """
        group = self.registry.resolve_group(group)
        entries = self.registry.get_entries(group)

        if group in self._scans and not force_rescan:
            return list(self._scans[group])

        files: Dict[str, None] = {}
        for entry in entries:
            for item in self._walk(entry):
                files[item] = None

        self._scans[group] = list(files)
        logger.debug(f"Scanned group '{group}': {len(files)} files")
        return list(files)

    def _walk(self, entry: BaseDirectoryEntry):
        """Yield file paths under an entry, depth-first, within its depth."""
        stack = [(iter(self.lister.list(entry.path)), 0)]
        while stack:
            children, depth = stack[-1]
            item = next(children, None)
            if item is None:
                stack.pop()
                continue

            if not is_directory_entry(item):
                yield item
            elif depth < entry.max_depth:
                stack.append((iter(self.lister.list(item)), depth + 1))

    def clear_cache(self) -> None:
        """Forget located files, scans and directory listings."""
        self._found.clear()
        self._scans.clear()
        self.lister.clear_cache()

    def add(self, path: Union[str, os.PathLike], group: Optional[str] = None,
            depth: Optional[int] = None) -> 'Locator':
        self.registry.add(path, group, depth)
        return self

    def get_entries(self, group: str) -> List[BaseDirectoryEntry]:
        return self.registry.get_entries(group)

    def set_default_depth(self, depth: int) -> 'Locator':
        self.registry.set_default_depth(depth)
        return self

    def set_group_default_depth(self, group: str, depth: int) -> 'Locator':
        self.registry.set_group_default_depth(group, depth)
        return self

    def set_working_group(self, group: str) -> 'Locator':
        self.registry.set_working_group(group)
        return self

    def get_working_group(self) -> Optional[str]:
        return self.registry.get_working_group()

    def reset_working_group(self) -> 'Locator':
        self.registry.reset_working_group()
        return self

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about lookups.

        Returns:
            Dictionary of lookup counters, with listing counters under 'listing'
        """
        stats: Dict[str, Any] = dict(self._stats)
        stats['listing'] = self.lister.get_stats()
        return stats

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = {
            'locate_calls': 0,
            'cache_hits': 0,
            'files_found': 0,
            'misses': 0
        }
        self.lister.reset_stats()
