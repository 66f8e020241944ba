"""
Exception types for the File Locator.

Configuration and unknown-group conditions indicate caller misuse and are
raised straight to the caller. Filesystem read failures never surface here;
the directory lister absorbs them as empty listings.
"""


class LocatorError(Exception):
    """Base class for all File Locator errors."""
    pass


class ConfigurationError(LocatorError):
    """Raised when a group cannot be resolved or configuration is invalid."""
    pass


class UnknownGroupError(LocatorError, KeyError):
    """Raised when an operation targets a group with no registered directories."""

    def __init__(self, group: str):
        self.group = group
        super().__init__(f"Unknown filesystem group {group}.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
