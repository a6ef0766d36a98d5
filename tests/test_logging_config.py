"""Tests for the logging setup."""

from __future__ import annotations

import logging

from logging_config import LOGGER_NAMES, setup_logging


def test_setup_logging_stops_propagation() -> None:
    setup_logging(level=logging.DEBUG)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        assert logger.propagate is False
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1


def test_setup_logging_twice_does_not_double_handlers(tmp_path) -> None:
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))
    setup_logging(level=logging.INFO, log_file=str(log_file))
    for name in LOGGER_NAMES:
        assert len(logging.getLogger(name).handlers) == 2
