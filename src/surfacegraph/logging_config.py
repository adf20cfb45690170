"""
Logging Configuration
Attaches handlers to the 'surfacegraph' logger for the command line and scripts.

Library modules only create module loggers; nothing is printed unless an
application calls setup_logging().
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "surfacegraph"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route surfacegraph log records to stderr and, optionally, a file.

    Stdout stays reserved for command output (neighbor ids, counts), so
    piping the CLI into other tools is not polluted by log lines.

    Args:
        level: Logging level for the package logger and its handlers.
        log_file: Optional path; overwritten on every call.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Repeated CLI invocations in one process reuse the logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to stderr{f' and {log_file}' if log_file else ''} at {logging.getLevelName(level)}.")
    return logger
