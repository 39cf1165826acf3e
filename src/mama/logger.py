# SPDX-License-Identifier: MIT

import logging
from logging.handlers import RotatingFileHandler

from mama import configuration

LOGGER_NAME = "mama"
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach the journal's handlers to the package logger.

    Everything at `level` and above goes to a rotating file in the platform
    log directory; warnings and errors are echoed to stderr as well.

    Args:
        level: Name of the file log level (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured package logger
    """
    configuration.LOG_PATH.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    # Reset only this logger's handlers so repeated calls don't duplicate output
    logger.handlers = []
    logger.propagate = False

    file_handler = RotatingFileHandler(
        configuration.LOG_FILE_PATH,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.getLevelName(level.upper()))
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    return logger
