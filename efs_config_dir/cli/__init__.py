"""CLI package for efs_config_dir."""

from efs_config_dir.cli.main import cli, get_paths

__all__ = ["cli", "get_paths"]
