"""
Path utilities for config directory resolution.

Provides the conventional host locations used by the EFS driver and
consistent resolution of overrides across all modules.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple

# Where earlier driver versions kept config files on the host
DEFAULT_LEGACY_DIR = Path("/etc/amazon/efs-legacy")

# Where config files live going forward
DEFAULT_PREFERRED_DIR = Path("/var/amazon/efs")

# Well-known symlink read by efs-utils
DEFAULT_TARGET_PATH = Path("/etc/amazon/efs")

# Environment variables for overriding each location
LEGACY_DIR_ENV_VAR = "EFS_CONFIG_DIR_LEGACY_DIR"
PREFERRED_DIR_ENV_VAR = "EFS_CONFIG_DIR_PREFERRED_DIR"
TARGET_PATH_ENV_VAR = "EFS_CONFIG_DIR_TARGET_PATH"


class ConfigDirPaths(NamedTuple):
    """The three locations the linker works with."""

    legacy_dir: Path
    preferred_dir: Path
    target_path: Path


def resolve_path(
    value: Path | str | None,
    env_var: str,
    default: Path,
) -> Path:
    """
    Resolve a single location.

    Priority:
        1. Explicit value (if provided)
        2. The given environment variable
        3. The default

    The result has ~ expanded but is not resolved, so symlinks in the
    path are kept as given.
    """
    if value is not None:
        return Path(value).expanduser()

    env_value = os.environ.get(env_var)
    if env_value:
        return Path(env_value).expanduser()

    return default


def resolve_dirs(
    legacy_dir: Path | str | None = None,
    preferred_dir: Path | str | None = None,
    target_path: Path | str | None = None,
) -> ConfigDirPaths:
    """
    Resolve all three linker locations.

    Args:
        legacy_dir: Optional explicit legacy directory
        preferred_dir: Optional explicit preferred directory
        target_path: Optional explicit symlink location

    Returns:
        ConfigDirPaths with environment overrides and defaults applied
    """
    return ConfigDirPaths(
        legacy_dir=resolve_path(legacy_dir, LEGACY_DIR_ENV_VAR, DEFAULT_LEGACY_DIR),
        preferred_dir=resolve_path(
            preferred_dir, PREFERRED_DIR_ENV_VAR, DEFAULT_PREFERRED_DIR
        ),
        target_path=resolve_path(
            target_path, TARGET_PATH_ENV_VAR, DEFAULT_TARGET_PATH
        ),
    )
