"""Shared pytest configuration."""

import logging
from collections.abc import Generator

import pytest

pytest_plugins = ["repo_inspect.testing.conftest"]


@pytest.fixture(autouse=True)
def reset_package_logging() -> Generator[None, None, None]:
    """Undo handlers and levels installed by configure_logging()."""
    yield
    for name in ("repo_inspect", "repo_inspect.http"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
