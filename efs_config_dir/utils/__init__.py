"""
efs_config_dir.utils - Utility module

Path defaults and logging configuration.
"""

from efs_config_dir.utils.paths import (
    DEFAULT_LEGACY_DIR,
    DEFAULT_PREFERRED_DIR,
    DEFAULT_TARGET_PATH,
    ConfigDirPaths,
    resolve_dirs,
)

__all__ = [
    "ConfigDirPaths",
    "DEFAULT_LEGACY_DIR",
    "DEFAULT_PREFERRED_DIR",
    "DEFAULT_TARGET_PATH",
    "resolve_dirs",
]
