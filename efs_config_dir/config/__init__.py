"""
efs_config_dir.config - Configuration management module

Contains configuration file loading and validation.
"""

from efs_config_dir.config.loader import (
    CONFIG_FILE_ENV_VAR,
    DEFAULT_CONFIG_FILE,
    ConfigError,
    ConfigLoader,
)

__all__ = [
    "CONFIG_FILE_ENV_VAR",
    "DEFAULT_CONFIG_FILE",
    "ConfigError",
    "ConfigLoader",
]
