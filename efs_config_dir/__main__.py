"""
Entry point for running efs_config_dir as a module.

Usage:
    python -m efs_config_dir --help
    python -m efs_config_dir link
    python -m efs_config_dir status
"""

from efs_config_dir.cli import cli

if __name__ == "__main__":
    cli()
