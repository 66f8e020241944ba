"""
Data models for the File Locator.

This module contains the core data structures used throughout the system.
"""

from .entries import BaseDirectoryEntry, LocateResult
from .config import DirectoryConfig, GroupConfig, LocatorConfig

__all__ = [
    'BaseDirectoryEntry',
    'LocateResult',
    'DirectoryConfig',
    'GroupConfig',
    'LocatorConfig',
]
