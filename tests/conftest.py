from __future__ import annotations

import logging

import pytest

from logging_config import LOGGER_NAMES

LOREM = (
    "Lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua"
)

LOREM_12 = (
    "Lorem  ipsum\n"
    "dolor    sit\n"
    "amet        \n"
    "consectetur \n"
    "adipiscing  \n"
    "elit  sed do\n"
    "eiusmod     \n"
    "tempor      \n"
    "incididunt  \n"
    "ut labore et\n"
    "dolore magna\n"
    "aliqua      "
)


@pytest.fixture(autouse=True)
def reset_loggers():
    yield
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture
def lorem() -> str:
    return LOREM


@pytest.fixture
def lorem_12() -> str:
    return LOREM_12
