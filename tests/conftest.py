import logging

import pytest

from clicolor import ColorContext, MemoryConsole, Palette, use_context


@pytest.fixture(autouse=True)
def isolated_context():
    """Every test runs against a fresh context without a console service."""
    with use_context(ColorContext()) as context:
        yield context


@pytest.fixture
def console():
    return MemoryConsole(Palette.Yellow, Palette.DarkBlue)


@pytest.fixture
def context(console):
    with use_context(ColorContext(console)) as context:
        yield context


@pytest.fixture
def reset_logging():
    yield
    logger = logging.getLogger("clicolor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
