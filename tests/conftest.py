"""Workspace-level pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True, scope="function")
def isolate_logging_configuration():
    """Preserve and restore global logging state around each test.

    CLI tests apply the packaged dictConfig, which replaces root handlers
    with ones bound to the runner's captured streams.
    """
    root = logging.getLogger()
    package_logger = logging.getLogger("pythcheck")
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_package_level = package_logger.level

    yield

    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    package_logger.setLevel(saved_package_level)
