"""
Config directory linker for the EFS driver.

Decides which of two host directories holds the driver's configuration
files and exposes the choice through a single symlink.

Earlier driver versions wrote their config files to a legacy location that
is not writeable on every host, so newer versions prefer a different
directory. Hosts that still carry config files from an earlier version keep
using the legacy directory, which keeps pre-existing mounts working across
the upgrade. Everywhere else the symlink points at the preferred directory.

Usage:
    from efs_config_dir.linker import ensure_config_symlink

    chosen = ensure_config_symlink(
        "/etc/amazon/efs-legacy", "/var/amazon/efs", "/etc/amazon/efs"
    )
"""

from __future__ import annotations

import os
import stat
from enum import Enum
from pathlib import Path
from typing import Protocol

from efs_config_dir.utils.logging import get_logger

# File whose presence marks a directory as holding pre-existing config
MARKER_FILE = "efs-utils.conf"

logger = get_logger(__name__)


class ConfigDirErrorKind(Enum):
    """Kinds of failure reported by ensure_config_symlink."""

    PATH_OCCUPIED = "path_occupied"
    PREFERRED_DIR_MISSING = "preferred_dir_missing"
    PREFERRED_DIR_NOT_A_DIRECTORY = "preferred_dir_not_a_directory"
    SYMLINK_CREATE_FAILED = "symlink_create_failed"


class ConfigDirError(Exception):
    """Base class for config directory selection failures."""

    kind: ConfigDirErrorKind


class PathOccupiedError(ConfigDirError):
    """Something other than a symlink already exists at the target path."""

    kind = ConfigDirErrorKind.PATH_OCCUPIED

    def __init__(self, target_path: Path):
        self.target_path = target_path
        super().__init__(
            f"Something already exists at '{target_path}' and it is not a symlink"
        )


class PreferredDirMissingError(ConfigDirError):
    """The preferred config directory does not exist."""

    kind = ConfigDirErrorKind.PREFERRED_DIR_MISSING

    def __init__(self, preferred_dir: Path, cause: OSError | None = None):
        self.preferred_dir = preferred_dir
        self.cause = cause
        message = f"Config directory '{preferred_dir}' does not exist"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class PreferredDirNotADirectoryError(ConfigDirError):
    """The preferred config path exists but is not a directory."""

    kind = ConfigDirErrorKind.PREFERRED_DIR_NOT_A_DIRECTORY

    def __init__(self, preferred_dir: Path):
        self.preferred_dir = preferred_dir
        super().__init__(f"Config directory '{preferred_dir}' is not a directory")


class SymlinkCreateError(ConfigDirError):
    """The filesystem refused to create the symlink."""

    kind = ConfigDirErrorKind.SYMLINK_CREATE_FAILED

    def __init__(self, target_path: Path, source_dir: Path, cause: OSError):
        self.target_path = target_path
        self.source_dir = source_dir
        self.cause = cause
        super().__init__(
            f"Unable to create symlink from '{target_path}' to '{source_dir}': {cause}"
        )


class FileSystem(Protocol):
    """The filesystem calls ensure_config_symlink depends on."""

    def lstat(self, path: Path) -> os.stat_result: ...

    def stat(self, path: Path) -> os.stat_result: ...

    def exists(self, path: Path) -> bool: ...

    def readlink(self, path: Path) -> Path: ...

    def symlink(self, source: Path, link: Path) -> None: ...


class OsFileSystem:
    """FileSystem backed by the host's os module."""

    def lstat(self, path: Path) -> os.stat_result:
        return os.lstat(path)

    def stat(self, path: Path) -> os.stat_result:
        return os.stat(path)

    def exists(self, path: Path) -> bool:
        return os.path.exists(path)

    def readlink(self, path: Path) -> Path:
        return Path(os.readlink(path))

    def symlink(self, source: Path, link: Path) -> None:
        # os.symlink never overwrites; an existing link raises FileExistsError
        os.symlink(source, link, target_is_directory=True)


def _lstat_or_none(fs: FileSystem, path: Path) -> os.stat_result | None:
    # Any lstat failure counts as absent; symlink() then reports the cause
    try:
        return fs.lstat(path)
    except OSError:
        return None


def _has_marker(fs: FileSystem, legacy_dir: Path) -> bool:
    return fs.exists(legacy_dir / MARKER_FILE)


def _check_preferred_dir(fs: FileSystem, preferred_dir: Path) -> None:
    try:
        info = fs.stat(preferred_dir)
    except OSError as e:
        raise PreferredDirMissingError(preferred_dir, e) from e
    if not stat.S_ISDIR(info.st_mode):
        raise PreferredDirNotADirectoryError(preferred_dir)


def _create_symlink(fs: FileSystem, source_dir: Path, target_path: Path) -> None:
    try:
        fs.symlink(source_dir, target_path)
    except OSError as e:
        raise SymlinkCreateError(target_path, source_dir, e) from e


def ensure_config_symlink(
    legacy_dir: Path | str,
    preferred_dir: Path | str,
    target_path: Path | str,
    fs: FileSystem | None = None,
) -> Path:
    """
    Make target_path a symlink to the appropriate config directory.

    Rules are applied in order and the first match wins:
        1. target_path is already a symlink (to anything): nothing to do.
        2. target_path exists but is not a symlink: PathOccupiedError.
        3. legacy_dir contains efs-utils.conf: link to legacy_dir.
        4. preferred_dir is a directory: link to preferred_dir.

    Args:
        legacy_dir: Directory where earlier driver versions wrote config files
        preferred_dir: Directory new installations should use
        target_path: Where the symlink lives (normally /etc/amazon/efs)
        fs: Filesystem implementation, defaults to the host filesystem

    Returns:
        The directory target_path points at. For an existing symlink this is
        the link's destination as stored in the link.

    Raises:
        PathOccupiedError: target_path exists and is not a symlink
        PreferredDirMissingError: no legacy config and preferred_dir is missing
        PreferredDirNotADirectoryError: preferred_dir is not a directory
        SymlinkCreateError: the symlink could not be created
    """
    fs = fs or OsFileSystem()
    legacy_dir = Path(legacy_dir)
    preferred_dir = Path(preferred_dir)
    target_path = Path(target_path)

    info = _lstat_or_none(fs, target_path)
    if info is not None:
        if stat.S_ISLNK(info.st_mode):
            logger.info(f"Symlink exists at '{target_path}', no need to create one")
            return fs.readlink(target_path)
        raise PathOccupiedError(target_path)

    if _has_marker(fs, legacy_dir):
        _create_symlink(fs, legacy_dir, target_path)
        logger.info(f"Pre-existing config files are being used from '{legacy_dir}'")
        return legacy_dir

    logger.info(f"Creating symlink from '{target_path}' to '{preferred_dir}'")
    _check_preferred_dir(fs, preferred_dir)
    _create_symlink(fs, preferred_dir, target_path)
    return preferred_dir


def choose_config_dir(
    legacy_dir: Path | str,
    preferred_dir: Path | str,
    fs: FileSystem | None = None,
) -> Path:
    """
    Report which directory a fresh link would point at, without linking.

    Raises the same preferred directory errors as ensure_config_symlink.
    """
    fs = fs or OsFileSystem()
    legacy_dir = Path(legacy_dir)
    preferred_dir = Path(preferred_dir)

    if _has_marker(fs, legacy_dir):
        return legacy_dir
    _check_preferred_dir(fs, preferred_dir)
    return preferred_dir


__all__ = [
    "MARKER_FILE",
    "ConfigDirError",
    "ConfigDirErrorKind",
    "FileSystem",
    "OsFileSystem",
    "PathOccupiedError",
    "PreferredDirMissingError",
    "PreferredDirNotADirectoryError",
    "SymlinkCreateError",
    "choose_config_dir",
    "ensure_config_symlink",
]
