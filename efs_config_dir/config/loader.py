"""
Configuration loader module for the config directory linker.

Provides YAML-based configuration file loading with support for:
- Loading configuration from the default or a custom path
- Graceful handling of missing configuration files
- Validation of keys and value types
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

# Default configuration file
DEFAULT_CONFIG_FILE = Path("/etc/efs-config-dir/config.yaml")

# Environment variable for overriding the configuration file
CONFIG_FILE_ENV_VAR = "EFS_CONFIG_DIR_CONFIG_FILE"

# Accepted keys and their expected types
VALID_KEYS: dict[str, type[Any]] = {
    "legacy_dir": str,
    "preferred_dir": str,
    "target_path": str,
    "verbose": bool,
    "log_file": str,
}

# Keys that name filesystem locations and must not be empty
PATH_KEYS = ("legacy_dir", "preferred_dir", "target_path", "log_file")

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class ConfigLoader:
    """
    YAML configuration file loader.

    Attributes:
        config_file: Path to the configuration file

    Usage:
        loader = ConfigLoader()
        config = loader.load_and_validate()

        # Load from specific file
        config = ConfigLoader().load_from_file("/path/to/config.yaml")
    """

    def __init__(self, config_file: Path | str | None = None):
        """
        Initialize the configuration loader.

        Args:
            config_file: Path to the configuration file. Defaults to
                        $EFS_CONFIG_DIR_CONFIG_FILE, then
                        /etc/efs-config-dir/config.yaml
        """
        if config_file is not None:
            self.config_file = Path(config_file)
        else:
            env_file = os.environ.get(CONFIG_FILE_ENV_VAR)
            if env_file:
                self.config_file = Path(env_file)
            else:
                self.config_file = DEFAULT_CONFIG_FILE

    def load(self) -> dict[str, Any]:
        """
        Load configuration from the configured file.

        Returns:
            Dictionary of configuration values, or empty dict if the file
            doesn't exist

        Raises:
            ConfigError: If the file exists but cannot be parsed
        """
        return self.load_from_file(self.config_file)

    def load_from_file(self, path: Path | str) -> dict[str, Any]:
        """
        Load configuration from a specific file.

        Returns an empty dict if the file doesn't exist, so the linker can
        run on defaults alone.

        Args:
            path: Path to the configuration file

        Raises:
            ConfigError: If the file exists but cannot be parsed
        """
        path = Path(path)

        if not path.exists():
            logger.debug(f"Configuration file not found: {path}")
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                config = yaml.safe_load(f)

            if config is None:
                logger.debug(f"Configuration file is empty: {path}")
                return {}

            if not isinstance(config, dict):
                raise ConfigError(
                    f"Configuration file must contain a YAML dictionary, "
                    f"got {type(config).__name__}"
                )

            logger.debug(f"Loaded configuration from {path}")
            return config

        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML configuration file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file: {e}") from e

    def validate(self, config: dict[str, Any]) -> None:
        """
        Validate configuration keys and value types.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ConfigError: If configuration is invalid
        """
        if not isinstance(config, dict):
            raise ConfigError(
                f"Configuration must be a dictionary, got {type(config).__name__}"
            )

        for key, value in config.items():
            if key not in VALID_KEYS:
                raise ConfigError(
                    f"Unknown configuration key '{key}'. "
                    f"Must be one of: {', '.join(VALID_KEYS)}"
                )
            expected_type = VALID_KEYS[key]
            if not isinstance(value, expected_type):
                raise ConfigError(
                    f"Invalid type for '{key}': expected {expected_type.__name__}, "
                    f"got {type(value).__name__}"
                )

        for key in PATH_KEYS:
            if key in config and not config[key].strip():
                raise ConfigError(f"{key} must not be empty")

    def load_and_validate(self) -> dict[str, Any]:
        """
        Load configuration and validate it.

        Raises:
            ConfigError: If configuration cannot be loaded or is invalid
        """
        config = self.load()
        if config:
            self.validate(config)
        return config
