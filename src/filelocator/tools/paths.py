"""Path normalization shared by every File Locator component."""

import os
from typing import Union


def normalize_path(path: Union[str, os.PathLike]) -> str:
    """
    Convert a path to canonical form.

    Backslashes become forward slashes and trailing separators are stripped.
    The function is total and idempotent; ``normalize_path("")`` is ``""``.
    """
    return os.fspath(path).replace('\\', '/').rstrip('/')


def is_absolute_path(path: str) -> bool:
    """Check whether a normalized path is absolute, including drive paths like ``C:/``."""
    return path.startswith('/') or (len(path) > 1 and path[1] == ':')
