"""
Command-line interface for efs_config_dir.

Provides CLI commands that pick the EFS driver's on-host config directory
and expose it through the /etc/amazon/efs symlink.

Usage:
    # Show help
    efs-config-dir --help

    # Create the symlink (no-op if it already exists)
    efs-config-dir link
    efs-config-dir link --preferred-dir /var/amazon/efs

    # Inspect without changing anything
    efs-config-dir status
"""

import os
import stat
import sys
from pathlib import Path
from typing import Any, Callable

import click

from efs_config_dir import __version__
from efs_config_dir.config.loader import CONFIG_FILE_ENV_VAR, ConfigError, ConfigLoader
from efs_config_dir.linker import (
    ConfigDirError,
    choose_config_dir,
    ensure_config_symlink,
)
from efs_config_dir.utils.logging import get_logger, setup_logging
from efs_config_dir.utils.paths import (
    LEGACY_DIR_ENV_VAR,
    PREFERRED_DIR_ENV_VAR,
    TARGET_PATH_ENV_VAR,
    ConfigDirPaths,
    resolve_dirs,
)


def path_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the --legacy-dir, --preferred-dir and --target-path options."""
    func = click.option(
        "--target-path",
        type=click.Path(file_okay=True, dir_okay=True),
        envvar=TARGET_PATH_ENV_VAR,
        help="Symlink location (default: /etc/amazon/efs).",
    )(func)
    func = click.option(
        "--preferred-dir",
        type=click.Path(file_okay=True, dir_okay=True),
        envvar=PREFERRED_DIR_ENV_VAR,
        help="Config directory for new installations (default: /var/amazon/efs).",
    )(func)
    func = click.option(
        "--legacy-dir",
        type=click.Path(file_okay=True, dir_okay=True),
        envvar=LEGACY_DIR_ENV_VAR,
        help="Config directory used by earlier versions "
        "(default: /etc/amazon/efs-legacy).",
    )(func)
    return func


def get_paths(
    ctx: click.Context,
    legacy_dir: str | None,
    preferred_dir: str | None,
    target_path: str | None,
) -> ConfigDirPaths:
    """Combine command-line values with the config file and defaults."""
    config = ctx.obj["config"]
    return resolve_dirs(
        legacy_dir=legacy_dir or config.get("legacy_dir"),
        preferred_dir=preferred_dir or config.get("preferred_dir"),
        target_path=target_path or config.get("target_path"),
    )


@click.group()
@click.version_option(version=__version__, prog_name="efs-config-dir")
@click.option(
    "--verbose", "-v", is_flag=True, help="Enable verbose output with detailed logging."
)
@click.option(
    "--config-file",
    "-f",
    type=click.Path(exists=False, file_okay=True, dir_okay=False),
    envvar=CONFIG_FILE_ENV_VAR,
    help="Configuration file path (default: /etc/efs-config-dir/config.yaml).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: str | None) -> None:
    """
    EFS driver config directory linker.

    Points /etc/amazon/efs at the directory holding efs-utils config files:
    the legacy directory when it already holds efs-utils.conf, otherwise the
    preferred directory.
    """
    ctx.ensure_object(dict)

    loader = ConfigLoader(config_file=config_file)
    try:
        config = loader.load_and_validate()
    except ConfigError as e:
        click.echo(click.style(f"Configuration error: {e}", fg="red"), err=True)
        sys.exit(1)

    ctx.obj["config"] = config
    ctx.obj["config_file"] = loader.config_file

    effective_verbose = verbose or config.get("verbose", False)
    ctx.obj["verbose"] = effective_verbose

    log_file = Path(config["log_file"]) if config.get("log_file") else None
    setup_logging(verbose=effective_verbose, log_file=log_file)


# =============================================================================
# Link Command
# =============================================================================


@cli.command("link")
@path_options
@click.pass_context
def link_command(
    ctx: click.Context,
    legacy_dir: str | None,
    preferred_dir: str | None,
    target_path: str | None,
) -> None:
    """
    Create the config directory symlink.

    Does nothing if a symlink is already in place. Fails if something other
    than a symlink occupies the target path.

    Examples:

        efs-config-dir link

        efs-config-dir link --target-path /tmp/efs --preferred-dir /tmp/cfg
    """
    logger = get_logger(__name__)
    paths = get_paths(ctx, legacy_dir, preferred_dir, target_path)
    logger.debug(
        f"Linking {paths.target_path} (legacy: {paths.legacy_dir}, "
        f"preferred: {paths.preferred_dir})"
    )

    try:
        chosen = ensure_config_symlink(*paths)
    except ConfigDirError as e:
        logger.error(f"Unable to set up config directory: {e}")
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style(f"{paths.target_path} -> {chosen}", fg="green"))


# =============================================================================
# Status Command
# =============================================================================


@cli.command("status")
@path_options
@click.pass_context
def status_command(
    ctx: click.Context,
    legacy_dir: str | None,
    preferred_dir: str | None,
    target_path: str | None,
) -> None:
    """
    Show the state of the config directory symlink.

    Never changes the filesystem. Exits with status 1 unless the target
    path is already a symlink.
    """
    paths = get_paths(ctx, legacy_dir, preferred_dir, target_path)

    click.echo(f"Legacy dir:    {paths.legacy_dir}")
    click.echo(f"Preferred dir: {paths.preferred_dir}")
    click.echo(f"Target path:   {paths.target_path}")
    click.echo("")

    try:
        info = os.lstat(paths.target_path)
    except FileNotFoundError:
        info = None
    except OSError as e:
        click.echo(
            click.style(
                f"Error: Unable to inspect '{paths.target_path}': {e}", fg="red"
            ),
            err=True,
        )
        sys.exit(1)

    if info is not None and stat.S_ISLNK(info.st_mode):
        destination = os.readlink(paths.target_path)
        click.echo(click.style(f"Linked: -> {destination}", fg="green"))
        return

    if info is not None:
        click.echo(
            click.style("Occupied: target path exists and is not a symlink", fg="red")
        )
        sys.exit(1)

    click.echo(click.style("Not linked", fg="yellow"))
    try:
        would_choose = choose_config_dir(paths.legacy_dir, paths.preferred_dir)
    except ConfigDirError as e:
        click.echo(f"Linking would fail: {e}")
    else:
        click.echo(f"Linking would choose: {would_choose}")
    sys.exit(1)
