"""Pytest configuration for all tests."""

import logging

import pytest

from sequence_splitter.shared.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels installed by configure_logger."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    if hasattr(logger, "_configured_base_logger"):
        del logger._configured_base_logger
