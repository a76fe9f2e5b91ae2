"""Pytest configuration and fixtures."""

import logging

import pytest

from fluentcheck.config import reset_settings


@pytest.fixture(autouse=True)
def cleanup_settings():
    """Drop settings configured by a test so the next one starts from defaults."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up fluentcheck loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("fluentcheck")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]
