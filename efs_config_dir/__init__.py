"""
efs_config_dir - EFS driver config directory linker

Chooses the on-host directory that holds efs-utils config files and
exposes it through the /etc/amazon/efs symlink.
"""

__version__ = "0.1.0"

from efs_config_dir.linker import (  # noqa: E402
    ConfigDirError,
    ConfigDirErrorKind,
    PathOccupiedError,
    PreferredDirMissingError,
    PreferredDirNotADirectoryError,
    SymlinkCreateError,
    ensure_config_symlink,
)

__all__ = [
    "__version__",
    "ConfigDirError",
    "ConfigDirErrorKind",
    "PathOccupiedError",
    "PreferredDirMissingError",
    "PreferredDirNotADirectoryError",
    "SymlinkCreateError",
    "ensure_config_symlink",
]
