"""
Configuration data models for the File Locator.

This module defines the structures used to describe groups, their base
directories and the depth defaults, and to turn that description into a
populated group registry.
"""

from typing import Dict, List, Optional, Any, Union
from pathlib import Path
from pydantic import BaseModel, Field, field_validator

from ..tools.paths import normalize_path, is_absolute_path


DEFAULT_SEARCH_DEPTH = 3


class DirectoryConfig(BaseModel):
    """
    A single base directory within a group.

    Attributes:
        path: Directory path
        depth: Per-directory depth override (uses group/global default if None)
    """

    path: str = Field(..., min_length=1, description="Directory path")
    depth: Optional[int] = Field(None, ge=0, description="Maximum recursion depth override")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Expand user paths and normalize separators."""
        if v.startswith('~'):
            v = str(Path(v).expanduser())
        return normalize_path(v)


class GroupConfig(BaseModel):
    """
    Configuration of one named group.

    Attributes:
        paths: Base directories, as plain strings or DirectoryConfig mappings
        default_depth: Group default depth (uses global default if None)
    """

    paths: List[DirectoryConfig] = Field(default_factory=list, description="Base directories")
    default_depth: Optional[int] = Field(None, ge=0, description="Group default recursion depth")

    @field_validator('paths', mode='before')
    @classmethod
    def validate_paths(cls, v) -> List[Any]:
        """Accept bare path strings alongside mappings."""
        if v is None:
            return []
        if isinstance(v, (str, dict)):
            v = [v]
        if not isinstance(v, list):
            raise ValueError(f"paths must be a list, got {type(v).__name__}")

        normalized = []
        for item in v:
            if isinstance(item, str):
                normalized.append({'path': item})
            else:
                normalized.append(item)
        return normalized

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        paths: List[Union[str, Dict[str, Any]]] = []
        for directory in self.paths:
            if directory.depth is None:
                paths.append(directory.path)
            else:
                paths.append({'path': directory.path, 'depth': directory.depth})
        return {'paths': paths, 'default_depth': self.default_depth}


class LocatorConfig(BaseModel):
    """
    Main configuration class for the File Locator.

    Attributes:
        base_path: Directory that relative group paths are resolved against
        default_depth: Global default recursion depth
        include_hidden: Whether directory listings include dot-files
        working_group: Group that replaces the group argument of every call while set
        groups: Group definitions keyed by group name
    """

    base_path: Optional[str] = Field(None, description="Base path for relative directories")
    default_depth: int = Field(DEFAULT_SEARCH_DEPTH, ge=0, description="Global default recursion depth")
    include_hidden: bool = Field(False, description="Whether to list hidden entries")
    working_group: Optional[str] = Field(None, description="Initial working group")
    groups: Dict[str, GroupConfig] = Field(default_factory=dict, description="Group definitions")

    @field_validator('base_path')
    @classmethod
    def validate_base_path(cls, v: Optional[str]) -> Optional[str]:
        """Expand and normalize the base path."""
        if v is None or not v.strip():
            return None
        if v.startswith('~'):
            v = str(Path(v).expanduser())
        return normalize_path(v)

    @field_validator('groups', mode='before')
    @classmethod
    def validate_groups(cls, v) -> Dict[str, Any]:
        """Allow a group to be given as a bare list of paths."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError(f"groups must be a mapping, got {type(v).__name__}")

        normalized = {}
        for name, group in v.items():
            if not str(name).strip():
                raise ValueError("Group names cannot be empty")
            if group is None or isinstance(group, (list, str)):
                group = {'paths': group}
            normalized[str(name)] = group
        return normalized

    def build_registry(self):
        """
        Create a group registry populated from this configuration.

        Returns:
            GroupRegistry with defaults, entries and working group applied
        """
        from ..tools.group_registry import GroupRegistry

        registry = GroupRegistry(default_depth=self.default_depth, base_path=self.base_path)

        for name, group in self.groups.items():
            if group.default_depth is not None:
                registry.set_group_default_depth(name, group.default_depth)
            for directory in group.paths:
                registry.add(directory.path, name, directory.depth)

        if self.working_group is not None:
            registry.set_working_group(self.working_group)

        return registry

    def validate_configuration(self) -> List[str]:
        """
        Collect non-fatal configuration warnings.

        Returns:
            List of warning messages
        """
        warnings = []

        if self.working_group is not None and self.working_group not in self.groups:
            warnings.append(f"Working group '{self.working_group}' has no configured directories")

        for name, group in self.groups.items():
            if not group.paths:
                warnings.append(f"Group '{name}' has no directories")
                continue
            for directory in group.paths:
                path = directory.path
                if self.base_path is not None and not is_absolute_path(path):
                    path = f"{self.base_path}/{path}"
                if not Path(path or '/').is_dir():
                    warnings.append(f"Directory for group '{name}' does not exist: {path}")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'base_path': self.base_path,
            'default_depth': self.default_depth,
            'include_hidden': self.include_hidden,
            'working_group': self.working_group,
            'groups': {name: group.to_dict() for name, group in self.groups.items()}
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LocatorConfig':
        """Create configuration from dictionary."""
        return cls(**data)

    def __str__(self) -> str:
        lines = ["LocatorConfig:"]
        lines.append(f"  Base path: {self.base_path or '(none)'}")
        lines.append(f"  Default depth: {self.default_depth}")
        lines.append(f"  Working group: {self.working_group or '(none)'}")
        for name, group in self.groups.items():
            lines.append(f"  Group '{name}': {len(group.paths)} director{'y' if len(group.paths) == 1 else 'ies'}")
        return "\n".join(lines)
