"""
File Locator - Core Package

Locates files by partial name within named groups of base directories,
searching recursively up to a configurable depth and memoizing both
directory listings and located files.
"""

from .errors import LocatorError, ConfigurationError, UnknownGroupError
from .tools.paths import normalize_path
from .tools.dir_lister import DirectoryLister
from .tools.group_registry import GroupRegistry
from .tools.file_locator import Locator

__version__ = "0.1.0"
__author__ = "File Locator Team"

__all__ = [
    'LocatorError',
    'ConfigurationError',
    'UnknownGroupError',
    'normalize_path',
    'DirectoryLister',
    'GroupRegistry',
    'Locator',
]
