"""
Logging setup for the image import prechecks.

Prechecks log their decisions (derived OS identifier, matched license variant,
downgraded collaborator errors) at debug level under the ``import_precheck``
logger. The host application decides where that goes.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = 'import_precheck'

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
BRIEF_FORMAT = '%(levelname)s - %(message)s'


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name on the console."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        color = self.COLORS.get(levelname)
        if color:
            record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Handlers share the record; the file handler must see the plain name.
            record.levelname = levelname


def _console_handler(level: int, verbose: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(DETAILED_FORMAT if verbose else BRIEF_FORMAT))
    return handler


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
    return handler


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """
    Route precheck logs to the console and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file that always receives DEBUG
        verbose: Include timestamps and source locations on the console

    Returns:
        The ``import_precheck`` logger
    """
    console_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.addHandler(_console_handler(console_level, verbose))
    if log_file:
        logger.addHandler(_file_handler(log_file))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(console_level)

    return logger


def configure_from_config(logging_config) -> logging.Logger:
    """
    Set up logging from the ``logging`` section of a loaded Config.

    Args:
        logging_config: ``config.LoggingConfig`` instance

    Returns:
        The ``import_precheck`` logger
    """
    return setup_logging(logging_config.level, logging_config.log_file, logging_config.verbose)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module of this package.

    Args:
        name: Short module name, e.g. "checks.os_version"

    Returns:
        Logger named ``import_precheck.<name>``
    """
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
