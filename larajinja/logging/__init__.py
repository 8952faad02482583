"""
Logging Package
Package loggers and their configuration

Every logger handed out lives under the ``larajinja`` namespace, so one
LoggerConfig.setup_logger('larajinja') call configures renderer, loaders
and factories together.
"""
import logging
from typing import Optional

from larajinja.logging.logger_config import JSONFormatter, LoggerConfig

ROOT_LOGGER = 'larajinja'

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a package logger (same call shape as logging.getLogger)

    Dotted module names are used as-is; bare names are placed under the
    package logger, and None returns the package logger itself.

    Example:
        logger = getLogger(__name__)
        logger.debug("Template '%s' not found", name)
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if '.' in name or name == ROOT_LOGGER:
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')


__all__ = [
    'CRITICAL',
    'DEBUG',
    'ERROR',
    'INFO',
    'JSONFormatter',
    'LoggerConfig',
    'ROOT_LOGGER',
    'WARNING',
    'getLogger',
]
