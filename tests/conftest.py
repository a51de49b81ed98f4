"""Pytest configuration and fixtures."""

import logging

import pytest

pytest_plugins = ["pytester", "tbcheck.plugin"]


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up tbcheck loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("tbcheck")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]
