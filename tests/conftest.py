"""Shared fixtures for the efs_config_dir tests."""

import logging

import pytest

from efs_config_dir.utils.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging so caplog sees records from every test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger.disabled = False
