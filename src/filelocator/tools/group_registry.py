"""
Group registry for the File Locator.

Maps group names to the ordered base directories registered under them,
together with the maximum recursion depth for each directory. Also holds the
optional working group used when callers omit the group argument.
"""

import os
import logging
from typing import Dict, List, Optional, Union

from ..errors import ConfigurationError, UnknownGroupError
from ..models.entries import BaseDirectoryEntry
from ..models.config import DEFAULT_SEARCH_DEPTH
from .paths import normalize_path, is_absolute_path


logger = logging.getLogger(__name__)


class GroupRegistry:
    """
    Registry of named groups of base directories.

    Depth resolution for ``add`` follows explicit argument, then the group
    default, then the registry-wide default. Defaults only apply to entries
    added after they are set.

    The working group is ambient mutable state. When set, it replaces any
    explicit group argument, and it must not be shared between concurrent
    callers.
    """

    def __init__(self, default_depth: int = DEFAULT_SEARCH_DEPTH, base_path: Optional[str] = None):
        """
        Initialize the registry.

        Args:
            default_depth: Registry-wide default recursion depth
            base_path: Directory that relative paths passed to ``add`` are joined onto
        """
        self._default_depth = _validate_depth(default_depth)
        self.base_path = normalize_path(base_path) if base_path is not None else None
        self._groups: Dict[str, Dict[str, BaseDirectoryEntry]] = {}
        self._group_default_depths: Dict[str, int] = {}
        self._working_group: Optional[str] = None

    @property
    def default_depth(self) -> int:
        return self._default_depth

    def resolve_group(self, group: Optional[str] = None) -> str:
        """
        Resolve the group to operate on.

        Args:
            group: Explicit group name, if any

        Returns:
            The working group when set, else the explicit group

        Raises:
            ConfigurationError: If neither is available
        """
        if self._working_group is not None:
            return self._working_group
        if group is not None:
            return group
        raise ConfigurationError("Must set group or working group.")

    def add(self, path: Union[str, os.PathLike], group: Optional[str] = None,
            depth: Optional[int] = None) -> 'GroupRegistry':
        """
        Add a directory path to a group.

        Re-adding a path already in the group replaces its depth and keeps its
        position in the search order.

        Args:
            path: Directory path
            group: Group name (ignored while a working group is set)
            depth: Maximum recursion depth for this path

        Returns:
            The registry, for chaining

        Raises:
            ConfigurationError: If no group can be resolved or depth is invalid
        """
        if group is None and self._working_group is None:
            raise ConfigurationError("Must set group or working group to add directory.")
        group = self.resolve_group(group)

        if depth is None:
            depth = self._group_default_depths.get(group, self._default_depth)
        else:
            depth = _validate_depth(depth)

        entry = BaseDirectoryEntry(path=self._resolve_path(path), max_depth=depth)
        self._groups.setdefault(group, {})[entry.path] = entry

        logger.info(f"Added directory {entry.path} to group '{group}' (depth {depth})")
        return self

    def _resolve_path(self, path: Union[str, os.PathLike]) -> str:
        path = normalize_path(path)
        if self.base_path is not None and not is_absolute_path(path):
            return normalize_path(f"{self.base_path}/{path}")
        return path

    def get_entries(self, group: str) -> List[BaseDirectoryEntry]:
        """
        Get the entries of a group in registration order.

        Raises:
            UnknownGroupError: If nothing was ever added to the group
        """
        entries = self._groups.get(group)
        if not entries:
            raise UnknownGroupError(group)
        return list(entries.values())

    def has_group(self, group: str) -> bool:
        return bool(self._groups.get(group))

    def groups(self) -> List[str]:
        return list(self._groups)

    def set_group_default_depth(self, group: str, depth: int) -> 'GroupRegistry':
        """Set the default depth for future additions to a group."""
        self._group_default_depths[group] = _validate_depth(depth)
        return self

    def get_group_default_depth(self, group: str) -> int:
        """Get the depth a new entry in this group would receive."""
        return self._group_default_depths.get(group, self._default_depth)

    def set_default_depth(self, depth: int) -> 'GroupRegistry':
        """Set the registry-wide default depth for future additions."""
        self._default_depth = _validate_depth(depth)
        return self

    def set_working_group(self, group: str) -> 'GroupRegistry':
        """
        Set the current working group.

        While set, ``add`` and lookups use it in place of any group argument.
        """
        self._working_group = group
        return self

    def get_working_group(self) -> Optional[str]:
        return self._working_group

    def reset_working_group(self) -> 'GroupRegistry':
        self._working_group = None
        return self


def _validate_depth(depth) -> int:
    """Coerce a depth to a non-negative integer; fractional floats are rejected."""
    if isinstance(depth, bool):
        raise ConfigurationError(f"Invalid search depth: {depth!r}")
    if isinstance(depth, float) and not depth.is_integer():
        raise ConfigurationError(f"Search depth must be a whole number, got {depth!r}")
    try:
        value = int(depth)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid search depth: {depth!r}") from e
    if value < 0:
        raise ConfigurationError(f"Search depth must be non-negative, got {value}")
    return value

