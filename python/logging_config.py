"""
Logging Configuration
Sets up the logger used by the command line tool.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMES = ('greedy_justify', 'tools')


def setup_logging(level:int=logging.INFO, log_file:Optional[str]=None) -> None:
    """
    Configures the loggers of the line-breaking modules.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False

        # Drop handlers from an earlier setup so messages are not doubled
        for old in logger.handlers:
            old.close()
        logger.handlers.clear()

        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger(LOGGER_NAMES[0]).debug("Logging initialized.")
