"""
Registry and lookup data models for the File Locator.

This module defines the immutable base directory entry stored per group and
the result object returned by detailed lookups.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..tools.paths import normalize_path


class BaseDirectoryEntry(BaseModel):
    """
    A base directory registered under a group.

    Attributes:
        path: Normalized directory path
        max_depth: Maximum recursion depth below this directory
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Normalized directory path")
    max_depth: int = Field(..., ge=0, description="Maximum recursion depth")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Store the path in canonical form."""
        return normalize_path(v)


class LocateResult(BaseModel):
    """
    Outcome of a single lookup.

    Attributes:
        group: Group that was searched
        fragment: File name fragment that was looked up
        path: Located path, or None when nothing matched
        cached: Whether the path came from the located-file cache
    """

    group: str
    fragment: str
    path: Optional[str] = None
    cached: bool = False

    @property
    def found(self) -> bool:
        return self.path is not None

    def __str__(self) -> str:
        if not self.found:
            return f"{self.fragment!r} not found in group {self.group!r}"
        source = "cache" if self.cached else "search"
        return f"{self.fragment!r} -> {self.path} ({source})"
