"""
Analytics Configuration Loader

Loads :class:`AnalyticsSettings` from YAML files. A file may hold the settings
at its top level or under a named section, so the analytics block can live
inside a larger application configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from in_app_analytics.exceptions import ConfigurationError

from .settings import AnalyticsSettings

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConfigurationLoader:
    """
    Loader for analytics settings files.

    The loader remembers every file it read successfully, which makes it
    easier to report where the active configuration came from.
    """

    def __init__(self, section: Optional[str] = None):
        """
        Initialize the configuration loader.

        Args:
            section: Optional top-level key holding the analytics settings.
        """
        self.section = section
        self.loaded_files: List[str] = []

    def load_config_file(self, path: PathLike) -> Dict[str, Any]:
        """
        Load the raw configuration mapping from ``path``.

        Returns:
            Configuration dictionary (the named section when one is set).

        Raises:
            ConfigurationError: If the file is missing, unreadable, not valid
                YAML or lacks the requested section.
        """
        file_path = str(path)

        try:
            with open(file_path, "r", encoding="utf-8") as file:
                config = yaml.safe_load(file)
        except FileNotFoundError:
            logger.error("Configuration file not found: %s", file_path)
            raise ConfigurationError(f"Configuration file not found: {file_path}", source=file_path)
        except yaml.YAMLError as e:
            logger.error("Error parsing YAML in %s: %s", file_path, e)
            raise ConfigurationError(f"Error parsing YAML in {file_path}: {e}", source=file_path)
        except OSError as e:
            logger.error("Error loading configuration from %s: %s", file_path, e)
            raise ConfigurationError(f"Error loading configuration: {e}", source=file_path)

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Invalid configuration format in {file_path}", source=file_path)

        if self.section is not None:
            if self.section not in config:
                raise ConfigurationError(
                    f"Section '{self.section}' not found in {file_path}", source=file_path
                )
            config = config[self.section] or {}
            if not isinstance(config, dict):
                raise ConfigurationError(
                    f"Section '{self.section}' in {file_path} must be a mapping", source=file_path
                )

        logger.debug("Loaded configuration from %s", file_path)
        self.loaded_files.append(file_path)
        return config

    def load(self, path: PathLike) -> AnalyticsSettings:
        """
        Load and validate settings from ``path``.

        Raises:
            ConfigurationError: If the file cannot be loaded or a value is invalid.
        """
        config = self.load_config_file(path)
        try:
            return AnalyticsSettings.model_validate(config)
        except ValidationError as e:
            logger.error("Invalid analytics settings in %s: %s", path, e)
            raise ConfigurationError(f"Invalid analytics settings in {path}: {e}", source=str(path)) from e


def load_settings(path: PathLike, section: Optional[str] = None) -> AnalyticsSettings:
    """Load settings from ``path`` with a one-off :class:`ConfigurationLoader`."""

    return ConfigurationLoader(section=section).load(path)


__all__ = ["ConfigurationLoader", "load_settings"]
