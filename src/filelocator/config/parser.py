"""
YAML configuration parser for the File Locator.

This module loads group definitions and depth defaults from YAML files,
validates them, and builds ready-to-use locators from the result.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import LocatorConfig
from ..tools.file_locator import Locator


logger = logging.getLogger(__name__)


@dataclass
class ConfigParseResult:
    """
    Result of configuration parsing operation.

    Attributes:
        config: The parsed and validated configuration
        warnings: List of non-fatal warnings
        config_path: Path to the configuration file used
    """
    config: LocatorConfig
    warnings: List[str]
    config_path: Optional[Path]

    def create_locator(self) -> Locator:
        """Build a locator from the parsed configuration."""
        return Locator.from_config(self.config)


class ConfigParser:
    """
    YAML configuration parser with validation and error handling.

    Loads a YAML mapping, validates it into a LocatorConfig and collects
    warnings about groups without directories or directories that do not
    exist.
    """

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the configuration parser.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_config(self, config_path: Union[str, Path]) -> ConfigParseResult:
        """
        Load and parse configuration from a YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            ConfigParseResult containing parsed configuration and metadata

        Raises:
            ConfigurationError: If configuration is invalid or file cannot be read
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        config_data = self._load_yaml_file(config_path)
        config = self.parse_dict(config_data)

        warnings = config.validate_configuration()
        if not config_data:
            warnings.insert(0, f"Configuration file is empty, using defaults: {config_path}")

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        self.logger.info(f"Configuration loaded successfully from {config_path}")

        return ConfigParseResult(
            config=config,
            warnings=warnings,
            config_path=config_path
        )

    def parse_dict(self, config_data: Dict[str, Any]) -> LocatorConfig:
        """
        Validate raw configuration data.

        Args:
            config_data: Configuration mapping

        Returns:
            Validated LocatorConfig

        Raises:
            ConfigurationError: If the data is not a mapping or validation fails
        """
        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(config_data).__name__}")

        try:
            return LocatorConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML data as dictionary

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            if not content.strip():
                self.logger.warning(f"Configuration file is empty: {file_path}")
                return {}

            data = yaml.safe_load(content)

            # Comment-only documents parse to None
            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

    def save_config(self, config: LocatorConfig, output_path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration to save
            output_path: Path where to save the configuration

        Raises:
            ConfigurationError: If file cannot be written
        """
        try:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)

            lines = [
                "# File Locator Configuration",
                "# Groups map a name to the base directories searched for that group",
                "",
                yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False).rstrip(),
                ""
            ]

            with open(output_path, 'w', encoding='utf-8') as f:
                f.write("\n".join(lines))

            self.logger.info(f"Configuration saved to {output_path}")

        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {output_path}: {e}") from e


def load_config(config_path: Union[str, Path], strict_mode: bool = False) -> ConfigParseResult:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to configuration file
        strict_mode: Whether to treat warnings as errors

    Returns:
        ConfigParseResult containing parsed configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    parser = ConfigParser(strict_mode=strict_mode)
    return parser.load_config(config_path)


def load_locator(config_path: Union[str, Path], strict_mode: bool = False) -> Locator:
    """
    Convenience function to build a locator straight from a YAML file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    return load_config(config_path, strict_mode=strict_mode).create_locator()
