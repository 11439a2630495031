"""
Logging configuration module for efs_config_dir.

The linker runs once at driver startup, so output goes to stderr where the
container runtime collects it. A log file can be added through
EFS_CONFIG_DIR_LOG_FILE or the config file.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

# Root logger name for the package
LOGGER_NAME = "efs_config_dir"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# Used for --verbose and for log files
VERBOSE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Environment variable names
ENV_LOG_LEVEL = "EFS_CONFIG_DIR_LOG_LEVEL"
ENV_DEBUG = "EFS_CONFIG_DIR_DEBUG"
ENV_LOG_FILE = "EFS_CONFIG_DIR_LOG_FILE"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level_from_env() -> int:
    """
    Get the logging level from environment variables.

    EFS_CONFIG_DIR_DEBUG wins over EFS_CONFIG_DIR_LOG_LEVEL. Unknown
    level names fall back to INFO.
    """
    if os.environ.get(ENV_DEBUG, "").lower() in ("1", "true", "yes"):
        return logging.DEBUG

    return _LEVELS.get(os.environ.get(ENV_LOG_LEVEL, "INFO").upper(), logging.INFO)


def get_log_file_path() -> Optional[Path]:
    """Return the log file named by EFS_CONFIG_DIR_LOG_FILE, if any."""
    log_file = os.environ.get(ENV_LOG_FILE)
    if not log_file or log_file.lower() in ("none", "disabled"):
        return None
    return Path(log_file)


def setup_logging(
    level: Optional[int] = None,
    verbose: bool = False,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the efs_config_dir logger.

    Args:
        level: Logging level. If None, determined from environment variables.
        verbose: If True, log at DEBUG with source locations.
        log_file: Extra file to log to. Falls back to EFS_CONFIG_DIR_LOG_FILE.

    Returns:
        The efs_config_dir logger
    """
    if level is None:
        level = get_log_level_from_env()
    if verbose:
        level = logging.DEBUG

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        logging.Formatter(VERBOSE_FORMAT if verbose else CONSOLE_FORMAT, DATE_FORMAT)
    )
    logger.addHandler(console_handler)

    file_path = log_file or get_log_file_path()
    if file_path:
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(file_path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(VERBOSE_FORMAT, DATE_FORMAT))
            logger.addHandler(file_handler)
        except OSError as e:
            # Console logging still works
            logger.warning(f"Could not create log file {file_path}: {e}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the efs_config_dir logger for a module."""
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)


__all__ = [
    "setup_logging",
    "get_logger",
    "get_log_level_from_env",
    "get_log_file_path",
    "LOGGER_NAME",
    "CONSOLE_FORMAT",
    "VERBOSE_FORMAT",
    "DATE_FORMAT",
]
