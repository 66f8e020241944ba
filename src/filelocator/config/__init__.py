"""
Configuration management package for the File Locator.

This package provides YAML configuration parsing and validation, and builds
locators from the parsed configuration.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    load_config,
    load_locator
)
from ..errors import ConfigurationError

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config',
    'load_locator'
]
